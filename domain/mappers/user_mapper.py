"""
User domain mappers.
Handles transformation between ORM models and DTOs for user-related entities.
"""

from datetime import datetime
from typing import Optional

from domain.models import RecipeUser
from domain.schemas.user_schemas import UserResponse
from domain.schemas.auth_schemas import FacebookProfile, SessionUser

AVATAR_URL = "https://i.pravatar.cc/150?u={email}"


class UserMapper:
    """Mapper for user-related transformations."""

    @staticmethod
    def to_response(user: RecipeUser) -> UserResponse:
        """Convert RecipeUser ORM model to UserResponse DTO."""
        return UserResponse.model_validate(user)

    @staticmethod
    def to_session_user(
        profile: FacebookProfile, user: RecipeUser, login_time: Optional[datetime] = None
    ) -> SessionUser:
        """
        Build the session user for a successful login.

        Args:
            profile: Facebook profile that authenticated
            user: matching row of the user store (provides the role)
            login_time: defaults to now

        Returns:
            SessionUser sent to the frontend along with the token
        """
        login_time = login_time or datetime.now().astimezone()
        return SessionUser(
            name=profile.name or user.name or "",
            email=user.email,
            role=user.role,
            loginTime=login_time.isoformat(),
            source="sql",
            avatar=AVATAR_URL.format(email=user.email),
            security=2,
        )
