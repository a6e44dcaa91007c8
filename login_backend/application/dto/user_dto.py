from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from ...domain.models.user import User
from ...utils.datetime_utils import to_iso


class UserResponse(BaseModel):
    """DTO for user response (no password field, ever)"""
    model_config = ConfigDict(extra="forbid", frozen=True)

    id: int
    nombre: str
    email: str
    dpi: str
    fechaRegistro: Optional[str] = None

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        """Redacted projection of a stored user"""
        if user.id is None:
            raise ValueError("Only stored users can be projected")
        return cls(
            id=user.id,
            nombre=user.full_name,
            email=user.email,
            dpi=user.national_id,
            fechaRegistro=to_iso(user.registered_at),
        )


class UserListResponse(BaseModel):
    """DTO for the user listing"""
    total: int
    usuarios: List[UserResponse]
