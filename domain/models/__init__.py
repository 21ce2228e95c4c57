"""
Domain models package - SQLAlchemy ORM models.
"""

from domain.models.database import (
    Base,
    create_db_engine,
    create_session_factory,
    init_database,
)
from domain.models.user import RecipeUser

__all__ = [
    # Database
    "Base",
    "create_db_engine",
    "create_session_factory",
    "init_database",
    # User models
    "RecipeUser",
]
