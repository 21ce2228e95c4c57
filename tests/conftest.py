"""
Pytest configuration and shared fixtures.
This file ensures the project root is in sys.path for imports.
"""

import sys
from pathlib import Path
from types import SimpleNamespace

# Add project root to sys.path so we can import domain, services, etc.
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

import mongomock
import pytest
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from api.dependencies import get_db, get_mongo_db
from domain.models import Base, create_session_factory
from main import app


@pytest.fixture
def session_factory():
    """
    Session factory over an in-memory SQLite user store.

    StaticPool keeps the single connection alive across the threads the
    TestClient runs sync endpoints in.
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        future=True,
    )
    Base.metadata.create_all(engine)
    try:
        yield create_session_factory(engine)
    finally:
        engine.dispose()


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def mongo_db():
    """Fresh in-memory MongoDB database"""
    return mongomock.MongoClient()["snmf2020"]


@pytest.fixture
def stores(session_factory, mongo_db):
    """Wire the in-memory stores into the app's dependencies"""

    def _get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_mongo_db] = lambda: mongo_db
    try:
        yield SimpleNamespace(session_factory=session_factory, mongo_db=mongo_db)
    finally:
        app.dependency_overrides.clear()
