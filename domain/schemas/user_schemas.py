from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from domain.enums import UserRole


def canonical_email(email: str) -> str:
    """Form under which user emails are stored and looked up"""
    return email.strip().lower()


class UserCreate(BaseModel):
    email: EmailStr
    role: UserRole = UserRole.REGULAR
    name: str = Field(..., min_length=1)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return canonical_email(v)


class RoleUpdate(BaseModel):
    role: UserRole


class UserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    email: str
    role: UserRole
    name: Optional[str] = None
