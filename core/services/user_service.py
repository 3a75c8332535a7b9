# =============================================================================
# core/services/user_service.py - User Business Logic
# =============================================================================
# Handles sign-up and user lookups.
# Separates HTTP concerns from database/business logic.
# =============================================================================

import logging
from datetime import datetime, timezone
from typing import Any

from pymongo import DESCENDING
from pymongo.errors import DuplicateKeyError, PyMongoError

from lib.mongo_client import Database
from core.models.user import UserResponse
from app.exceptions import StorageError, UsernameTakenError

logger = logging.getLogger(__name__)


class UserService:
    """
    Service for user operations.

    Provides a clean interface between API routes and database.
    """

    @staticmethod
    async def find_by_username(username: str) -> dict[str, Any] | None:
        """
        Look up a user document by handle.

        Returns:
            The user document, or None if no user has this username

        Raises:
            PyMongoError: If the query fails (callers map it to StorageError)
        """
        return await Database.users().find_one({"username": username})

    @staticmethod
    async def sign_up(username: str, avatar: str = "") -> dict[str, Any]:
        """
        Create a new user.

        The username is checked first; the unique index on `username`
        catches a concurrent sign-up that slips past the check.

        Args:
            username: The new handle
            avatar: Avatar URL (empty string if none)

        Returns:
            The inserted user document

        Raises:
            UsernameTakenError: If the username already exists
            StorageError: If the database operation fails
        """
        try:
            if await UserService.find_by_username(username) is not None:
                raise UsernameTakenError(username)

            document = {
                "username": username,
                "avatar": avatar or "",
                "createdAt": datetime.now(timezone.utc),
            }
            result = await Database.users().insert_one(document)
            document["_id"] = result.inserted_id

        except DuplicateKeyError:
            raise UsernameTakenError(username)
        except PyMongoError as e:
            logger.error(f"Failed to create user '{username}': {e}")
            raise StorageError("Failed to register user.", error=str(e)) from e

        logger.info(f"Created user: {username}")
        return document

    @staticmethod
    async def list_users() -> list[UserResponse]:
        """
        List every user, most recently created first.

        Raises:
            StorageError: If the query fails
        """
        try:
            cursor = Database.users().find().sort([("createdAt", DESCENDING), ("_id", DESCENDING)])
            documents = await cursor.to_list(None)
        except PyMongoError as e:
            logger.error(f"Failed to list users: {e}")
            raise StorageError("Failed to fetch users.", error=str(e)) from e

        return [UserResponse.from_document(doc) for doc in documents]
