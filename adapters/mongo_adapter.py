"""MongoDB adapter holding the process-wide client.
"""

import logging
from typing import Optional

from pymongo import MongoClient
from pymongo.database import Database

logger = logging.getLogger("cookbook.mongo")


class MongoStore:
    """Single pymongo client shared by all requests.

    pymongo's client keeps its own connection pool and is safe to use from
    the worker threads that run the route handlers.
    """

    def __init__(self, uri: str, db_name: str, client: Optional[MongoClient] = None):
        self.uri = uri
        self.db_name = db_name
        self.client = client if client is not None else MongoClient(uri)
        self.db: Database = self.client[db_name]

    def ping(self) -> None:
        """Raise if the server cannot be reached"""
        self.client.admin.command("ping")
        logger.info("Connected to MongoDB (database: %s)", self.db_name)

    def close(self) -> None:
        """Close MongoDB connection."""
        try:
            self.client.close()
            logger.info("MongoDB client closed")
        except Exception:
            logger.exception("Error closing MongoDB client")
