# Standard library imports
import logging
from typing import Any, Mapping

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models import AuthResult, FailureReason
from ....domain.constants import UserFields
from ....domain.validation import validate_login_fields

logger = logging.getLogger(__name__)


class LoginUserUseCase:
    """Use case for matching supplied credentials against a stored user"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, fields: Mapping[str, Any]) -> AuthResult:
        """
        Authenticate a user by email and password
        
        An unknown email and a wrong password produce the same
        INVALID_CREDENTIALS result. The store is never modified.
        
        Args:
            fields: Raw login fields (email, password)
            
        Returns:
            AuthResult holding the matched user, or MALFORMED_INPUT /
            INVALID_CREDENTIALS
        """
        errors = validate_login_fields(fields)
        if errors:
            return AuthResult.rejected(FailureReason.MALFORMED_INPUT, errors)
        
        email: str = fields[UserFields.EMAIL]
        password: str = fields[UserFields.PASSWORD]
        
        async with self.user_repository.locked():
            user = await self.user_repository.find_by_email(email)
        
        if user is None or not _passwords_match(user.password, password):
            logger.info("Login rejected: invalid credentials")
            return AuthResult.rejected(FailureReason.INVALID_CREDENTIALS)
        
        logger.info(f"User authenticated: {user.full_name} ({user.email})")
        return AuthResult.success(user)


def _passwords_match(stored: str, supplied: str) -> bool:
    # Exact equality; stored passwords are plain text.
    return stored == supplied
