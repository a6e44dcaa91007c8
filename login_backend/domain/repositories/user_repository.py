from abc import ABC, abstractmethod
from typing import Any, AsyncContextManager, List, Optional
from ..models.user import User


class UserRepository(ABC):
    """Repository interface - defines contract for user data access.

    The store is append-only: records are never updated or deleted.
    Methods do not lock on their own; callers wrap every read and every
    check-then-append sequence in ``locked()``.
    """
    
    @abstractmethod
    def locked(self) -> AsyncContextManager[Any]:
        """Return the single lock guarding the whole collection"""
        pass
    
    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find user by exact email address"""
        pass
    
    @abstractmethod
    async def list_all(self) -> List[User]:
        """Return every user in insertion order"""
        pass
    
    @abstractmethod
    async def count(self) -> int:
        """Number of stored users"""
        pass
    
    @abstractmethod
    async def save(self, user: User) -> User:
        """Append a new user and return it with its assigned ID"""
        pass
