"""
User Repository - Data access layer for the recipeUser table
"""

from typing import Optional, List
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError

from repositories.base import BaseRepository
from domain.enums import UserRole
from domain.models import RecipeUser
from app.exceptions import ConflictError


class UserRepository(BaseRepository[RecipeUser]):
    """Repository for user data access"""

    def __init__(self, db: Session):
        super().__init__(db, RecipeUser)

    def get_by_email(self, email: str) -> Optional[RecipeUser]:
        """Get user by email"""
        return self.get_by_id(email)

    def list_users(self) -> List[RecipeUser]:
        """All users ordered by email"""
        return self.db.query(RecipeUser).order_by(RecipeUser.email).all()

    def create_user(self, email: str, role: UserRole, name: str) -> RecipeUser:
        """Insert a new user"""
        user = RecipeUser(email=email, role=role, name=name)
        try:
            self.db.add(user)
            self.db.commit()
            self.db.refresh(user)
            return user
        except IntegrityError:
            self.db.rollback()
            raise ConflictError(f"User with email {email} already exists")

    def update_role(self, email: str, role: UserRole) -> int:
        """Set the role of ``email``; returns the number of affected rows"""
        count = (
            self.db.query(RecipeUser)
            .filter(RecipeUser.email == email)
            .update({RecipeUser.role: role}, synchronize_session=False)
        )
        self.db.commit()
        return count

    def delete_by_email(self, email: str) -> int:
        """Delete the user row; returns the number of affected rows"""
        count = self.db.query(RecipeUser).filter(RecipeUser.email == email).delete()
        self.db.commit()
        return count
