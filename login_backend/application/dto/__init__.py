from .auth_dto import AuthResponse, ErrorResponse, ServiceInfoResponse
from .user_dto import UserResponse, UserListResponse

__all__ = [
    "AuthResponse",
    "ErrorResponse",
    "ServiceInfoResponse",
    "UserResponse",
    "UserListResponse",
]
