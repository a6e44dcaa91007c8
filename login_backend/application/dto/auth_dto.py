from typing import Dict, Optional

from pydantic import BaseModel

from .user_dto import UserResponse


class AuthResponse(BaseModel):
    """DTO for a successful registration or login"""
    message: str
    user: UserResponse


class ErrorResponse(BaseModel):
    """DTO for a rejected request; errors holds per-field messages"""
    message: str
    errors: Optional[Dict[str, str]] = None


class ServiceInfoResponse(BaseModel):
    """DTO describing the available endpoints"""
    message: str
    endpoints: Dict[str, str]
