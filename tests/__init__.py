# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Tweteroo API:
# - test_validators.py: Schema validation and error messages
# - test_config.py: Settings loading
# - test_database.py: MongoDB connection and startup behaviour
# - test_users.py / test_tweets.py: Endpoint tests against an in-memory MongoDB
#
# Run tests with: poetry run pytest
# =============================================================================
