"""
Domain mappers package.
Handles transformation between ORM models / Mongo documents and DTOs.
"""

from domain.mappers.user_mapper import UserMapper
from domain.mappers.document_mapper import DocumentMapper

__all__ = ["UserMapper", "DocumentMapper"]
