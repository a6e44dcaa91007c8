# Standard library imports
import asyncio
import dataclasses
import logging
from typing import List, Optional

# Local application imports
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User

logger = logging.getLogger(__name__)


class InMemoryUserRepository(UserRepository):
    """Process-lifetime, append-only implementation of UserRepository.

    Records live in a list for as long as the process runs. IDs are
    ``len + 1``, which is only sound because records are never deleted.
    """
    
    def __init__(self) -> None:
        self._users: List[User] = []
        self._lock = asyncio.Lock()
    
    def locked(self) -> asyncio.Lock:
        return self._lock
    
    async def find_by_email(self, email: str) -> Optional[User]:
        """
        Find user by email address
        
        Args:
            email: Email address to search for (exact, case-sensitive)
            
        Returns:
            User domain model if found, None otherwise
        """
        if not email:
            return None
        
        for user in self._users:
            if user.email == email:
                return user
        return None
    
    async def list_all(self) -> List[User]:
        return list(self._users)
    
    async def count(self) -> int:
        return len(self._users)
    
    async def save(self, user: User) -> User:
        """
        Append a new user, assigning the next sequential ID
        
        Args:
            user: User domain model without an ID
            
        Returns:
            Stored User domain model with ID set
            
        Raises:
            ValueError: If the user already has an ID or its email or DPI
                is already stored
        """
        if not user:
            raise ValueError("User cannot be None")
        if user.id is not None:
            raise ValueError(f"User {user.id} is already stored; records are immutable")
        
        for existing in self._users:
            if existing.email == user.email:
                raise ValueError("A user with this email is already stored")
            if existing.national_id == user.national_id:
                raise ValueError("A user with this national ID is already stored")
        
        stored = dataclasses.replace(user, id=len(self._users) + 1)
        self._users.append(stored)
        logger.debug(f"Stored user {stored.id}; {len(self._users)} user(s) in memory")
        return stored
