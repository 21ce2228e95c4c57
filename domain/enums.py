"""
Domain enums for the Cookbook application.
"""

import enum


class UserRole(str, enum.Enum):
    """Role of a registered user"""

    REGULAR = "regular"
    ADMIN = "admin"
