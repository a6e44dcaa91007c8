from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class User:
    """Pure domain model for a registered user - no external dependencies.

    Records are immutable once created. The password is kept in plain text
    and must only leave the process through the redacted UserResponse.
    """
    id: Optional[int]
    full_name: str
    national_id: str
    email: str
    password: str
    registered_at: Optional[datetime] = None

    def __post_init__(self):
        """Business validations"""
        if self.id is not None and self.id < 1:
            raise ValueError("User id must be a positive integer")
        if not self.full_name or not self.full_name.strip():
            raise ValueError("Full name is required")
        if not self.national_id:
            raise ValueError("National ID is required")
        if not self.email or "@" not in self.email:
            raise ValueError("Invalid email format")
        if not self.password:
            raise ValueError("Password is required")
