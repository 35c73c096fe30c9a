"""User and caller identity models."""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .enums import UserRole


class User(BaseModel):
    """Directory entry for an employee."""
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    email: str = ""
    name: str
    department: str = ""
    position: str = ""
    manager_id: Optional[str] = None
    role: UserRole = UserRole.EMPLOYEE
    is_active: bool = True


class Identity(BaseModel):
    """Authenticated caller as resolved by the identity provider."""
    model_config = ConfigDict(frozen=True)

    id: str
    role: UserRole

    @classmethod
    def from_user(cls, user: User) -> "Identity":
        return cls(id=user.id, role=user.role)
