"""Constants for domain field names and user-facing messages"""

from .user_fields import UserFields
from .auth_messages import AuthMessages

__all__ = [
    "UserFields",
    "AuthMessages",
]
