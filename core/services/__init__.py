# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .user_service import UserService
from .tweet_service import TweetService

__all__ = [
    "UserService",
    "TweetService",
]
