# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable utilities:
# - mongo_client.py: Process-wide MongoDB connection wrapper
# =============================================================================

from lib.mongo_client import Database, MongoClientError

__all__ = [
    "Database",
    "MongoClientError",
]
