# =============================================================================
# core/models/common.py - Shared Response Schemas
# =============================================================================

from pydantic import BaseModel, Field


class MessageResponse(BaseModel):
    """Acknowledgement returned by create endpoints."""
    message: str = Field(..., examples=["User created successfully!"])
