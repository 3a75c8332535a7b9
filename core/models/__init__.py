# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - common.py: Acknowledgement message returned by create endpoints
# - user.py: Sign-up input and stored user output
# - tweet.py: Tweet input, path parameters, and enriched tweet output
#
# These models define the "contract" between API and clients.
# =============================================================================

from .common import MessageResponse

from .user import (
    UserCreate,
    UserResponse,
)

from .tweet import (
    TWEET_MAX_LENGTH,
    TweetCreate,
    TweetIdParams,
    TweetResponse,
    TweetUpdate,
)

__all__ = [
    # Common
    "MessageResponse",
    # User
    "UserCreate",
    "UserResponse",
    # Tweet
    "TWEET_MAX_LENGTH",
    "TweetCreate",
    "TweetIdParams",
    "TweetResponse",
    "TweetUpdate",
]
