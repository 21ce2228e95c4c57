"""
API dependencies for dependency injection.

Shared clients are created once in the application lifespan and stored on
``app.state``; these dependencies hand them to the route handlers.
"""

from typing import Generator

from fastapi import Request
from pymongo.database import Database
from sqlalchemy.orm import Session

from adapters import FacebookOAuthClient, SpoonacularClient, WelcomeMailer
from app.config import Settings, settings


def get_settings() -> Settings:
    return settings


def get_db(request: Request) -> Generator[Session, None, None]:
    """
    SQL session for the user store, closed after the request.

    Usage:
        @router.get("/example")
        def example(db: Session = Depends(get_db)):
            # Use db session here
            pass
    """
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


def get_mongo_db(request: Request) -> Database:
    """Database of the shared MongoDB client"""
    return request.app.state.mongo.db


def get_spoonacular(request: Request) -> SpoonacularClient:
    return request.app.state.spoonacular


def get_facebook(request: Request) -> FacebookOAuthClient:
    return request.app.state.facebook


def get_mailer(request: Request) -> WelcomeMailer:
    return request.app.state.mailer
