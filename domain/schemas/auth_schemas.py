"""Schemas for the Facebook login flow and the issued session."""

from typing import Optional

from pydantic import BaseModel, Field

from domain.enums import UserRole


class FacebookProfile(BaseModel):
    """Subset of the Graph API ``/me`` response we request"""

    id: str
    name: str = ""
    email: Optional[str] = None


class SessionUser(BaseModel):
    """User information handed to the frontend together with the token"""

    name: str
    email: str
    role: UserRole
    loginTime: str
    source: str = "sql"
    avatar: str
    security: int = 2


class LoginResult(BaseModel):
    user: SessionUser
    token: str = Field(..., description="Signed JWT")
