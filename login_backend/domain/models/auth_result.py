from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional

from .user import User


class FailureReason(str, Enum):
    """Why a registration or login attempt was rejected"""
    MALFORMED_INPUT = "malformed_input"
    DUPLICATE_EMAIL = "duplicate_email"
    DUPLICATE_NATIONAL_ID = "duplicate_national_id"
    INVALID_CREDENTIALS = "invalid_credentials"


@dataclass(frozen=True)
class AuthResult:
    """Outcome of a registration or login workflow.

    Exactly one of ``user`` and ``failure`` is set. ``errors`` maps field
    names to messages and is only populated for MALFORMED_INPUT.
    """
    user: Optional[User] = None
    failure: Optional[FailureReason] = None
    errors: Dict[str, str] = field(default_factory=dict)

    @property
    def succeeded(self) -> bool:
        return self.failure is None

    @classmethod
    def success(cls, user: User) -> "AuthResult":
        return cls(user=user)

    @classmethod
    def rejected(
        cls,
        failure: FailureReason,
        errors: Optional[Dict[str, str]] = None,
    ) -> "AuthResult":
        return cls(failure=failure, errors=dict(errors or {}))
