# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the business logic:
# - models/: Pydantic schemas for users and tweets
# - validators.py: Non-raising schema validation with readable messages
# - services/: User and tweet operations against MongoDB
# =============================================================================
