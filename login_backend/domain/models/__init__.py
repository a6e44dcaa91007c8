from .user import User
from .auth_result import AuthResult, FailureReason

__all__ = ["User", "AuthResult", "FailureReason"]
