# =============================================================================
# tests/test_tweets.py - Tweet Endpoint Tests
# =============================================================================
# Tests for posting, listing, editing and deleting tweets, including the
# avatar enrichment and newest-first ordering of every listing.
# =============================================================================

import asyncio
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock, patch
from urllib.parse import quote

from pymongo.errors import PyMongoError

from lib.mongo_client import Database

MISSING_ID = "6650c1f2a1b2c3d4e5f60718"

# 24 characters, but not 24 hex digits
SPACED_ID = "aa aa aa aa aa aa aa aa "


def _post(client, username, text):
    response = client.post("/tweets", json={"username": username, "tweet": text})
    assert response.status_code == 201
    return response


def _ids(client):
    return [tweet["_id"] for tweet in client.get("/tweets").json()]


# =============================================================================
# POST /tweets
# =============================================================================

class TestCreateTweet:
    """Tests for POST /tweets."""

    def test_create_tweet(self, client, database, signed_up, sample_tweet_payload):
        signed_up("ana")

        response = client.post("/tweets", json=sample_tweet_payload)

        assert response.status_code == 201
        assert response.json() == {"message": "Tweet created successfully!"}
        stored = asyncio.run(database.tweets.find_one({"username": "ana"}))
        assert stored["tweet"] == "hello world"

    def test_unknown_user_is_unauthorized(self, client, database):
        response = client.post("/tweets", json={"username": "bob", "tweet": "x"})

        assert response.status_code == 401
        assert response.json() == {"message": "Unauthorized user. Please sign up first."}
        assert asyncio.run(database.tweets.count_documents({})) == 0

    def test_invalid_body(self, client):
        response = client.post("/tweets", json={"username": "ana", "tweet": "x" * 281})

        assert response.status_code == 422
        assert response.json() == {
            "message": "Invalid data",
            "errors": ["tweet must be at most 280 characters long"],
        }

    def test_storage_failure_is_500(self, client):
        users = MagicMock()
        users.find_one = AsyncMock(side_effect=PyMongoError("boom"))

        with patch.object(Database, "users", return_value=users):
            response = client.post("/tweets", json={"username": "ana", "tweet": "hi"})

        assert response.status_code == 500
        assert response.json() == {"message": "Failed to create tweet."}


# =============================================================================
# GET /tweets/{username}
# =============================================================================

class TestListUserTweets:
    """Tests for GET /tweets/{username}."""

    def test_unknown_user_not_found(self, client):
        response = client.get("/tweets/nobody")

        assert response.status_code == 404
        assert response.json() == {"message": "User not found."}

    def test_no_tweets(self, client, signed_up):
        signed_up("ana")

        response = client.get("/tweets/ana")

        assert response.status_code == 200
        assert response.json() == []

    def test_storage_failure_is_500(self, client):
        users = MagicMock()
        users.find_one = AsyncMock(side_effect=PyMongoError("boom"))

        with patch.object(Database, "users", return_value=users):
            response = client.get("/tweets/ana")

        assert response.status_code == 500
        assert response.json() == {"message": "Failed to fetch tweets."}

    def test_newest_first_with_avatar(self, client, signed_up):
        signed_up("ana", "ana.png")
        signed_up("bob")
        for text in ["first", "second", "third"]:
            _post(client, "ana", text)
        _post(client, "bob", "not mine")

        response = client.get("/tweets/ana")

        assert response.status_code == 200
        body = response.json()
        assert [tweet["tweet"] for tweet in body] == ["third", "second", "first"]
        assert all(tweet["avatar"] == "ana.png" for tweet in body)
        assert all(tweet["username"] == "ana" for tweet in body)


# =============================================================================
# GET /tweets
# =============================================================================

class TestListTweets:
    """Tests for GET /tweets."""

    def test_empty(self, client):
        response = client.get("/tweets")

        assert response.status_code == 200
        assert response.json() == []

    def test_all_tweets_newest_first(self, client, signed_up):
        signed_up("ana", "ana.png")
        signed_up("bob", "bob.png")
        _post(client, "ana", "one")
        _post(client, "bob", "two")
        _post(client, "ana", "three")

        body = client.get("/tweets").json()

        assert [(t["username"], t["tweet"], t["avatar"]) for t in body] == [
            ("ana", "three", "ana.png"),
            ("bob", "two", "bob.png"),
            ("ana", "one", "ana.png"),
        ]
        assert set(body[0]) == {"_id", "username", "avatar", "tweet"}

    def test_author_without_user_gets_empty_avatar(self, client, database):
        """A tweet whose author has no user record is listed, not an error."""
        asyncio.run(database.tweets.insert_one({
            "username": "ghost",
            "tweet": "boo",
            "createdAt": datetime.now(timezone.utc),
        }))

        response = client.get("/tweets")

        assert response.status_code == 200
        assert response.json()[0]["username"] == "ghost"
        assert response.json()[0]["avatar"] == ""

    def test_storage_failure_is_500(self, client):
        tweets = MagicMock()
        tweets.find.side_effect = PyMongoError("boom")

        with patch.object(Database, "tweets", return_value=tweets):
            response = client.get("/tweets")

        assert response.status_code == 500
        assert response.json() == {"message": "Failed to fetch tweets."}


# =============================================================================
# PUT /tweets/{id}
# =============================================================================

class TestUpdateTweet:
    """Tests for PUT /tweets/{id}."""

    def test_update_round_trip(self, client, signed_up):
        """The new text shows up under the original identifier."""
        signed_up("ana")
        _post(client, "ana", "original")
        (tweet_id,) = _ids(client)

        response = client.put(f"/tweets/{tweet_id}", json={"tweet": "edited"})

        assert response.status_code == 204
        assert response.content == b""
        body = client.get("/tweets").json()
        assert len(body) == 1
        assert body[0]["_id"] == tweet_id
        assert body[0]["tweet"] == "edited"

    def test_unknown_id_not_found(self, client):
        response = client.put(f"/tweets/{MISSING_ID}", json={"tweet": "edited"})

        assert response.status_code == 404
        assert response.json() == {"message": "Tweet not found."}

    def test_invalid_body(self, client):
        response = client.put(f"/tweets/{MISSING_ID}", json={"tweet": ""})

        assert response.status_code == 422
        assert response.json() == {"message": "Invalid data", "errors": ["tweet must not be empty"]}

    def test_invalid_id_checked_before_body(self, client):
        response = client.put("/tweets/123", json={})

        assert response.status_code == 422
        assert response.json() == {
            "message": "Invalid parameters",
            "errors": ["id must be a 24-character hexadecimal string"],
        }

    def test_invalid_id_never_touches_storage(self, client):
        tweets = MagicMock()

        with patch.object(Database, "tweets", return_value=tweets) as collection:
            response = client.put("/tweets/not-a-valid-object-id!!", json={"tweet": "x"})

        assert response.status_code == 422
        collection.assert_not_called()

    def test_spaced_id_rejected(self, client):
        """Spaces between hex pairs don't make a valid identifier."""
        tweets = MagicMock()

        with patch.object(Database, "tweets", return_value=tweets) as collection:
            response = client.put(f"/tweets/{quote(SPACED_ID)}", json={"tweet": "x"})

        assert response.status_code == 422
        assert response.json()["errors"] == ["id must be a 24-character hexadecimal string"]
        collection.assert_not_called()

    def test_storage_failure_is_500(self, client):
        tweets = MagicMock()
        tweets.update_one = AsyncMock(side_effect=PyMongoError("boom"))

        with patch.object(Database, "tweets", return_value=tweets):
            response = client.put(f"/tweets/{MISSING_ID}", json={"tweet": "edited"})

        assert response.status_code == 500
        assert response.json() == {"message": "Failed to update tweet."}


# =============================================================================
# DELETE /tweets/{id}
# =============================================================================

class TestDeleteTweet:
    """Tests for DELETE /tweets/{id}."""

    def test_delete_twice(self, client, signed_up):
        """Deleting the same ID succeeds once, then is not found."""
        signed_up("ana")
        _post(client, "ana", "bye")
        (tweet_id,) = _ids(client)

        first = client.delete(f"/tweets/{tweet_id}")
        second = client.delete(f"/tweets/{tweet_id}")

        assert first.status_code == 204
        assert first.content == b""
        assert second.status_code == 404
        assert client.get("/tweets").json() == []

    def test_delete_keeps_other_tweets(self, client, signed_up):
        signed_up("ana")
        _post(client, "ana", "keep")
        _post(client, "ana", "drop")
        drop_id, keep_id = _ids(client)

        client.delete(f"/tweets/{drop_id}")

        assert _ids(client) == [keep_id]

    def test_invalid_id_never_touches_storage(self, client):
        tweets = MagicMock()

        with patch.object(Database, "tweets", return_value=tweets) as collection:
            response = client.delete("/tweets/xyz")

        assert response.status_code == 422
        assert response.json()["message"] == "Invalid parameters"
        collection.assert_not_called()

    def test_spaced_id_rejected(self, client):
        tweets = MagicMock()

        with patch.object(Database, "tweets", return_value=tweets) as collection:
            response = client.delete(f"/tweets/{quote(SPACED_ID)}")

        assert response.status_code == 422
        assert response.json()["errors"] == ["id must be a 24-character hexadecimal string"]
        collection.assert_not_called()

    def test_storage_failure_is_500(self, client):
        tweets = MagicMock()
        tweets.delete_one = AsyncMock(side_effect=PyMongoError("boom"))

        with patch.object(Database, "tweets", return_value=tweets):
            response = client.delete(f"/tweets/{MISSING_ID}")

        assert response.status_code == 500
        assert response.json() == {"message": "Failed to delete tweet."}


# =============================================================================
# End-to-end scenario
# =============================================================================

def test_sign_up_post_and_read_scenario(client):
    assert client.post("/sign-up", json={"username": "ana"}).status_code == 201
    assert client.post("/sign-up", json={"username": "ana"}).status_code == 409
    assert client.post("/tweets", json={"username": "ana", "tweet": "hi"}).status_code == 201

    body = client.get("/tweets/ana").json()
    assert [{k: t[k] for k in ("username", "tweet", "avatar")} for t in body] == [
        {"username": "ana", "tweet": "hi", "avatar": ""},
    ]

    assert client.post("/tweets", json={"username": "bob", "tweet": "x"}).status_code == 401
