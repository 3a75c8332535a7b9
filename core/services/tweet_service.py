# =============================================================================
# core/services/tweet_service.py - Tweet Business Logic
# =============================================================================
# Handles posting, listing, editing and deleting tweets.
#
# Tweets store their author's username only. Listings attach the author's
# current avatar at read time; a username with no user behind it gets an
# empty avatar rather than an error.
# =============================================================================

import asyncio
import logging
from datetime import datetime, timezone
from typing import Any

from bson import ObjectId
from pymongo import DESCENDING
from pymongo.errors import PyMongoError

from lib.mongo_client import Database
from core.models.tweet import TweetResponse
from core.services.user_service import UserService
from app.exceptions import (
    StorageError,
    TweetNotFoundError,
    UserNotFoundError,
    UserNotRegisteredError,
)

logger = logging.getLogger(__name__)

# Newest first; _id breaks ties between tweets created in the same millisecond
NEWEST_FIRST = [("createdAt", DESCENDING), ("_id", DESCENDING)]


def _to_response(document: dict[str, Any], avatar: str | None) -> TweetResponse:
    return TweetResponse(
        id=str(document["_id"]),
        username=document["username"],
        avatar=avatar or "",
        tweet=document["tweet"],
    )


class TweetService:
    """Service for tweet operations."""

    @staticmethod
    async def create_tweet(username: str, text: str) -> dict[str, Any]:
        """
        Post a tweet on behalf of a signed-up user.

        Args:
            username: Author handle
            text: Tweet text (already validated)

        Returns:
            The inserted tweet document

        Raises:
            UserNotRegisteredError: If no user has this username
            StorageError: If the database operation fails
        """
        try:
            if await UserService.find_by_username(username) is None:
                raise UserNotRegisteredError(username)

            now = datetime.now(timezone.utc)
            document = {
                "username": username,
                "tweet": text,
                "createdAt": now,
                "updatedAt": now,
            }
            result = await Database.tweets().insert_one(document)
            document["_id"] = result.inserted_id

        except PyMongoError as e:
            logger.error(f"Failed to create tweet for '{username}': {e}")
            raise StorageError("Failed to create tweet.", error=str(e)) from e

        logger.info(f"Created tweet {document['_id']} for user: {username}")
        return document

    @staticmethod
    async def list_user_tweets(username: str) -> list[TweetResponse]:
        """
        List one user's tweets, newest first.

        Every item carries the user's avatar.

        Raises:
            UserNotFoundError: If no user has this username
            StorageError: If the query fails
        """
        try:
            user = await UserService.find_by_username(username)
            if user is None:
                raise UserNotFoundError(username)

            cursor = Database.tweets().find({"username": username}).sort(NEWEST_FIRST)
            documents = await cursor.to_list(None)

        except PyMongoError as e:
            logger.error(f"Failed to list tweets for '{username}': {e}")
            raise StorageError("Failed to fetch tweets.", error=str(e)) from e

        avatar = user.get("avatar")
        return [_to_response(doc, avatar) for doc in documents]

    @staticmethod
    async def list_tweets() -> list[TweetResponse]:
        """
        List all tweets, newest first.

        Each tweet's avatar is resolved with its own user lookup; the lookups
        run concurrently and any failure fails the whole listing.

        Raises:
            StorageError: If any query fails
        """

        async def with_avatar(document: dict[str, Any]) -> TweetResponse:
            author = await UserService.find_by_username(document["username"])
            return _to_response(document, author.get("avatar") if author else None)

        try:
            documents = await Database.tweets().find().sort(NEWEST_FIRST).to_list(None)
            tweets = await asyncio.gather(*(with_avatar(doc) for doc in documents))

        except PyMongoError as e:
            logger.error(f"Failed to list tweets: {e}")
            raise StorageError("Failed to fetch tweets.", error=str(e)) from e

        return list(tweets)

    @staticmethod
    async def update_tweet(tweet_id: str, text: str) -> None:
        """
        Replace the text of a tweet.

        The author is not re-checked.

        Args:
            tweet_id: 24-hex tweet identifier (already validated)
            text: New tweet text (already validated)

        Raises:
            TweetNotFoundError: If no tweet has this ID
            StorageError: If the database operation fails
        """
        try:
            result = await Database.tweets().update_one(
                {"_id": ObjectId(tweet_id)},
                {"$set": {"tweet": text, "updatedAt": datetime.now(timezone.utc)}},
            )
        except PyMongoError as e:
            logger.error(f"Failed to update tweet {tweet_id}: {e}")
            raise StorageError("Failed to update tweet.", error=str(e)) from e

        if result.matched_count == 0:
            raise TweetNotFoundError(tweet_id)

        logger.info(f"Updated tweet: {tweet_id}")

    @staticmethod
    async def delete_tweet(tweet_id: str) -> None:
        """
        Delete a tweet.

        Raises:
            TweetNotFoundError: If no tweet has this ID
            StorageError: If the database operation fails
        """
        try:
            result = await Database.tweets().delete_one({"_id": ObjectId(tweet_id)})
        except PyMongoError as e:
            logger.error(f"Failed to delete tweet {tweet_id}: {e}")
            raise StorageError("Failed to delete tweet.", error=str(e)) from e

        if result.deleted_count == 0:
            raise TweetNotFoundError(tweet_id)

        logger.info(f"Deleted tweet: {tweet_id}")
