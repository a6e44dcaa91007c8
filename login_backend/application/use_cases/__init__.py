from .auth import (
    RegisterUserUseCase,
    LoginUserUseCase,
)
from .user import ListUsersUseCase

__all__ = [
    "RegisterUserUseCase",
    "LoginUserUseCase",
    "ListUsersUseCase",
]
