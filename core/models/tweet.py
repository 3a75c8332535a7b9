# =============================================================================
# core/models/tweet.py - Tweet Schemas
# =============================================================================
# These models define the API contract for tweet operations:
# - TweetCreate: Input for POST /tweets
# - TweetUpdate: Input for PUT /tweets/{id} (text only)
# - TweetIdParams: Path parameters for PUT/DELETE /tweets/{id}
# - TweetResponse: One item of GET /tweets and GET /tweets/{username}
#
# Tweets reference their author by username only. The avatar shown with a
# tweet is looked up from the users collection at read time.
# =============================================================================

import re
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, Field

# Maximum length of a tweet's text
TWEET_MAX_LENGTH = 280

# Store-assigned identifiers are exactly 24 hex digits
OBJECT_ID_PATTERN = re.compile(r"[0-9a-fA-F]{24}")


def _check_object_id(value: str) -> str:
    if OBJECT_ID_PATTERN.fullmatch(value) is None:
        raise ValueError("must be a 24-character hexadecimal string")
    return value


ObjectIdStr = Annotated[str, AfterValidator(_check_object_id)]

TweetText = Annotated[
    str,
    Field(
        min_length=1,
        max_length=TWEET_MAX_LENGTH,
        description="Text of the tweet"
    ),
]


class TweetCreate(BaseModel):
    """
    Schema for posting a tweet.

    Example:
        {
            "username": "ana",
            "tweet": "hello world"
        }
    """

    model_config = ConfigDict(extra="forbid")

    # Author handle; must belong to a signed-up user
    username: str = Field(
        ...,
        min_length=1,
        description="Handle of the author"
    )

    tweet: TweetText


class TweetUpdate(BaseModel):
    """
    Schema for replacing a tweet's text.

    Only `tweet` is read; any other key in the body is ignored.
    """

    tweet: TweetText


class TweetIdParams(BaseModel):
    """Path parameters identifying a single tweet."""

    id: ObjectIdStr


class TweetResponse(BaseModel):
    """
    Schema for returning a tweet enriched with its author's avatar.

    Example:
        {
            "_id": "6650c1f2a1b2c3d4e5f60718",
            "username": "ana",
            "avatar": "https://example.com/ana.png",
            "tweet": "hello world"
        }
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id", description="Store-assigned identifier")
    username: str
    avatar: str = ""
    tweet: str
