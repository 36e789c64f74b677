# =============================================================================
# lib/mongo_client.py - MongoDB Connection Wrapper
# =============================================================================
# This module owns the single MongoDB handle shared by every request.
#
# The connection is established lazily: nothing touches the network until
# the first request needs the database. After that the same Database object
# is reused for the lifetime of the process. There is no teardown and no
# reconnect; the only transition is not-connected -> connected.
#
# A lock guards the first connect so concurrent first requests don't each
# open their own client. A failed attempt leaves the state not-connected and
# the next caller starts over.
#
# Usage:
#   from lib.mongo_client import get_mongo_connection
#   podcasts = get_mongo_connection().collection("podcasts")
# =============================================================================

from __future__ import annotations

import logging
import threading
from functools import lru_cache
from typing import Any, Callable

from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import PyMongoError
from pymongo.server_api import ServerApi

from app.config import Settings, settings

# Set up logging for this module
logger = logging.getLogger(__name__)


class MongoClientError(Exception):
    """
    Error while establishing the MongoDB connection.

    Carries a machine-readable code and a suggestion for fixing it.
    """

    def __init__(
        self,
        message: str,
        code: str = "MONGO_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}

    def __str__(self) -> str:
        result = f"[{self.code}] {self.message}"
        if self.suggestion:
            result += f" Suggestion: {self.suggestion}"
        return result


class MongoConnection:
    """
    Lazily-connected, process-wide MongoDB handle.

    Example:
        connection = MongoConnection("mongodb://localhost:27017", "Assets")
        connection.is_connected          # False, nothing opened yet
        connection.collection("videos")  # connects, pings, returns collection
        connection.is_connected          # True from now on

    Tests inject an in-memory client through `client_factory`:
        MongoConnection("mongodb://test", "test", client_factory=lambda uri, **kw: mongomock.MongoClient())
    """

    def __init__(
        self,
        uri: str | None,
        database_name: str,
        server_selection_timeout_ms: int = 5000,
        client_factory: Callable[..., MongoClient] | None = None,
    ):
        self._uri = uri
        self._database_name = database_name
        self._server_selection_timeout_ms = server_selection_timeout_ms
        self._client_factory = client_factory or MongoClient

        self._client: MongoClient | None = None
        self._db: Database | None = None
        self._lock = threading.Lock()

    @classmethod
    def from_settings(cls, config: Settings) -> MongoConnection:
        """Build a connection from application settings."""
        return cls(
            uri=config.MONGODB_URI,
            database_name=config.DB_NAME,
            server_selection_timeout_ms=config.MONGODB_SERVER_SELECTION_TIMEOUT_MS,
        )

    @property
    def database_name(self) -> str:
        return self._database_name

    @property
    def is_connected(self) -> bool:
        """True once a connect attempt has succeeded. Never performs I/O."""
        return self._db is not None

    # -------------------------------------------------------------------------
    # Connect-or-reuse
    # -------------------------------------------------------------------------

    def get_database(self) -> Database:
        """
        Return the shared Database, connecting on first use.

        Returns:
            Database: The configured database handle

        Raises:
            MongoClientError: If the URI is missing or the server can't be reached
        """
        db = self._db
        if db is not None:
            return db

        with self._lock:
            # Another thread may have connected while we waited
            if self._db is None:
                self._db = self._connect()
            return self._db

    def collection(self, name: str) -> Collection:
        """Return a collection from the shared database, connecting on first use."""
        return self.get_database()[name]

    def _connect(self) -> Database:
        if not self._uri:
            raise MongoClientError(
                message="MongoDB connection string is not configured",
                code="MISSING_URI",
                suggestion="Set MONGODB_URI in your environment or .env file",
            )

        client = None
        try:
            client = self._client_factory(
                self._uri,
                server_api=ServerApi("1", strict=True, deprecation_errors=True),
                serverSelectionTimeoutMS=self._server_selection_timeout_ms,
                tz_aware=True,
            )
            # MongoClient connects in the background; ping forces a round trip
            client.admin.command("ping")
        except PyMongoError as e:
            logger.error(f"MongoDB connection error: {e}")
            if client is not None:
                client.close()
            raise MongoClientError(
                message=f"Failed to connect to MongoDB: {e}",
                code="CONNECTION_FAILED",
                suggestion="Check MONGODB_URI and that the cluster accepts connections from this host",
                details={"database": self._database_name},
            ) from e

        self._client = client
        logger.info(f"Connected to MongoDB database '{self._database_name}'")
        return client[self._database_name]


@lru_cache
def get_mongo_connection() -> MongoConnection:
    """
    Get the process-wide MongoConnection.

    Creating the object is free; the network connect happens on first use.
    """
    return MongoConnection.from_settings(settings)
