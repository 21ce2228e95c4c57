from typing import Any, Dict, List
import logging

from pymongo.database import Database
from sqlalchemy.orm import Session

from domain.enums import UserRole
from domain.models import RecipeUser
from domain.schemas.user_schemas import UserCreate, canonical_email
from repositories import PlanRepository, UserRepository

logger = logging.getLogger("cookbook.admin")


class AdminService:
    """Business logic for user administration"""

    @staticmethod
    def list_users(db: Session) -> List[RecipeUser]:
        return UserRepository(db).list_users()

    @staticmethod
    def add_user(db: Session, data: UserCreate) -> RecipeUser:
        """Register a user; raises ConflictError when the email is taken"""
        user = UserRepository(db).create_user(str(data.email), data.role, data.name)
        logger.info(f"user_added email={user.email} role={user.role.value}")
        return user

    @staticmethod
    def update_role(db: Session, email: str, role: UserRole) -> int:
        email = canonical_email(email)
        count = UserRepository(db).update_role(email, role)
        if count:
            logger.info(f"user_role_updated email={email} role={role.value}")
        else:
            logger.warning(f"user_role_not_updated email={email} reason=not_found")
        return count

    @staticmethod
    def delete_user(db: Session, mongo_db: Database, email: str) -> Dict[str, Any]:
        """
        Remove a user's plans, then the user row.

        The two stores are not updated atomically: if the SQL delete fails
        after the plans are gone, the user remains without plans.
        """
        email = canonical_email(email)
        plans = PlanRepository(mongo_db).delete_by_user(email)
        logger.info(f"user_plans_deleted email={email} count={plans.deleted_count}")

        deleted = UserRepository(db).delete_by_email(email)
        logger.info(f"user_deleted email={email} rows={deleted}")

        return {
            "mongo": {"acknowledged": plans.acknowledged, "deletedCount": plans.deleted_count},
            "sql": {"deleted": deleted},
        }
