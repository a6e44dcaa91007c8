# Standard library imports
import logging
from typing import Any, Mapping

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models import AuthResult, FailureReason, User
from ....domain.constants import UserFields
from ....domain.validation import Collision, check_collision, validate_registration_fields
from ....utils.datetime_utils import utc_now

logger = logging.getLogger(__name__)


class RegisterUserUseCase:
    """Use case for registering a new user"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, fields: Mapping[str, Any]) -> AuthResult:
        """
        Register a new user
        
        Validation runs first; the collision check and the append then
        happen under the store lock so two concurrent registrations cannot
        both claim the same email or DPI.
        
        Args:
            fields: Raw registration fields (nombre, dpi, email, password)
            
        Returns:
            AuthResult holding the stored user, or the rejection reason
            (MALFORMED_INPUT, DUPLICATE_EMAIL, DUPLICATE_NATIONAL_ID)
        """
        errors = validate_registration_fields(fields)
        if errors:
            logger.info(f"Registration rejected: invalid fields {sorted(errors)}")
            return AuthResult.rejected(FailureReason.MALFORMED_INPUT, errors)
        
        email: str = fields[UserFields.EMAIL]
        national_id: str = fields[UserFields.NATIONAL_ID]
        
        async with self.user_repository.locked():
            existing_users = await self.user_repository.list_all()
            collision = check_collision(email, national_id, existing_users)
            
            if collision is Collision.EMAIL:
                logger.info(f"Registration rejected: email {email} already registered")
                return AuthResult.rejected(FailureReason.DUPLICATE_EMAIL)
            if collision is Collision.NATIONAL_ID:
                logger.info("Registration rejected: national ID already registered")
                return AuthResult.rejected(FailureReason.DUPLICATE_NATIONAL_ID)
            
            # TODO: hash passwords before storing once the web client stops
            # relying on plain-text parity.
            new_user = User(
                id=None,  # Assigned by repository
                full_name=fields[UserFields.FULL_NAME],
                national_id=national_id,
                email=email,
                password=fields[UserFields.PASSWORD],
                registered_at=utc_now(),
            )
            saved_user = await self.user_repository.save(new_user)
        
        logger.info(f"New user registered: {saved_user.full_name} ({saved_user.email}), id={saved_user.id}")
        return AuthResult.success(saved_user)
