# =============================================================================
# lib/mongo_client.py - MongoDB Client Wrapper
# =============================================================================
# This module owns the process-wide MongoDB connection. One async client is
# opened at startup and shared by every request:
# - connect(): open the client, check the server once, create indexes
# - users() / tweets(): collection handles for the service layer
# - close(): release the client on shutdown
#
# There is no retry: if the server can't be reached at startup the error is
# raised and the process doesn't serve requests.
#
# Usage:
#   from lib.mongo_client import Database
#   await Database.connect()
#   user = await Database.users().find_one({"username": "ana"})
# =============================================================================

from __future__ import annotations

import logging
from typing import Any

from pymongo import ASCENDING, DESCENDING, AsyncMongoClient
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import PyMongoError

from app.config import settings

# Set up logging for this module
logger = logging.getLogger(__name__)

USERS_COLLECTION = "users"
TWEETS_COLLECTION = "tweets"


class MongoClientError(Exception):
    """Error while opening or using the MongoDB connection."""

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


class Database:
    """
    Singleton holder for the MongoDB database handle.

    All methods are class methods; the handle is shared across the
    application and set exactly once per process by connect() or bind().
    """

    _client: AsyncMongoClient | None = None
    _database: AsyncDatabase | None = None

    @classmethod
    async def connect(
        cls,
        uri: str | None = None,
        database_name: str | None = None,
    ) -> AsyncDatabase:
        """
        Open the client and verify the server is reachable.

        Args:
            uri: Connection string (defaults to settings.MONGO_URI)
            database_name: Used when the URI doesn't name a database
                (defaults to settings.DATABASE_NAME)

        Returns:
            The selected database

        Raises:
            MongoClientError: If the server can't be reached or indexes
                can't be created
        """
        uri = uri or settings.MONGO_URI
        database_name = database_name or settings.DATABASE_NAME

        client: AsyncMongoClient | None = None
        try:
            # An invalid URI raises ConfigurationError here
            client = AsyncMongoClient(
                uri,
                serverSelectionTimeoutMS=settings.MONGO_TIMEOUT_MS,
            )
            await client.admin.command("ping")
            database = client.get_default_database(default=database_name)
            cls._client = client
            cls.bind(database)
            await cls.ensure_indexes()
        except PyMongoError as e:
            cls._client = None
            cls._database = None
            if client is not None:
                await client.close()
            raise MongoClientError(
                message=f"Failed to connect to MongoDB: {e}",
                code="CONNECTION_FAILED",
                suggestion="Check MONGO_URI in your .env file and that the server is running",
                details={"database": database_name},
            ) from e

        logger.info(f"Connected to MongoDB database '{database.name}'")
        return database

    @classmethod
    def bind(cls, database: AsyncDatabase) -> None:
        """Install an already-open database handle."""
        cls._database = database

    @classmethod
    async def ensure_indexes(cls) -> None:
        """
        Create the indexes the API relies on.

        - users.username is unique (backs the duplicate sign-up check)
        - tweets are listed per user, newest first
        """
        await cls.users().create_index("username", unique=True)
        await cls.tweets().create_index([("username", ASCENDING), ("createdAt", DESCENDING)])

    @classmethod
    def get_database(cls) -> AsyncDatabase:
        """
        Get the shared database handle.

        Raises:
            MongoClientError: If connect() hasn't run yet
        """
        if cls._database is None:
            raise MongoClientError(
                message="MongoDB is not connected",
                code="NOT_CONNECTED",
                suggestion="Call Database.connect() during application startup",
            )
        return cls._database

    @classmethod
    def users(cls) -> AsyncCollection:
        """The `users` collection."""
        return cls.get_database()[USERS_COLLECTION]

    @classmethod
    def tweets(cls) -> AsyncCollection:
        """The `tweets` collection."""
        return cls.get_database()[TWEETS_COLLECTION]

    @classmethod
    async def close(cls) -> None:
        """Close the client opened by connect(), if any."""
        if cls._client is not None:
            await cls._client.close()
            logger.info("MongoDB connection closed")
        cls._client = None
        cls._database = None
