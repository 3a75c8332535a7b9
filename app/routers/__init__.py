# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - users.py: Sign-up and user listing
# - tweets.py: Tweet creation, listing, editing and deletion
#
# Each router is mounted in main.py at the root path.
# =============================================================================

from . import users
from . import tweets

__all__ = [
    "users",
    "tweets",
]
