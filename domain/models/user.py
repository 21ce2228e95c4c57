"""
User database model.
"""

from sqlalchemy import Column, String, Enum as SQLEnum

from domain.models.database import Base
from domain.enums import UserRole


class RecipeUser(Base):
    """Registered user allowed to log in"""

    __tablename__ = "recipeUser"

    email = Column(String(255), primary_key=True)
    role = Column(
        SQLEnum(
            UserRole,
            name="user_role",
            native_enum=False,
            values_callable=lambda roles: [r.value for r in roles],
        ),
        nullable=False,
        default=UserRole.REGULAR,
    )
    name = Column(String(255))

    def __repr__(self) -> str:
        return f"<RecipeUser email={self.email!r} role={self.role!r}>"
