"""
Database configuration and session management.

The engine and session factory are created once during application startup
(see ``main.lifespan``) and kept on ``app.state``.
"""

import logging
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

logger = logging.getLogger("cookbook.database")

# Create SQLAlchemy Base
Base = declarative_base()


def create_db_engine(url: str, echo: bool = False, pool_size: int = 4) -> Engine:
    """Create the pooled engine for the user store"""
    kwargs = {"echo": echo, "future": True, "pool_pre_ping": True}
    if not url.startswith("sqlite"):
        kwargs["pool_size"] = pool_size
    return create_engine(url, **kwargs)


def create_session_factory(engine: Engine) -> sessionmaker:
    """Session factory bound to ``engine``"""
    return sessionmaker(bind=engine, future=True, expire_on_commit=False)


def init_database(engine: Engine) -> None:
    """Check connectivity and make sure the user table exists"""
    with engine.begin() as conn:
        conn.execute(text("SELECT 1"))
        Base.metadata.create_all(bind=conn)
        logger.info("User store reachable, tables ensured")
