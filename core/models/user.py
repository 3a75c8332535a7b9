# =============================================================================
# core/models/user.py - User Schemas
# =============================================================================
# These models define the API contract for user operations:
# - UserCreate: Input for POST /sign-up
# - UserResponse: Output of GET /users
#
# A user is identified by its unique handle (username). Users are created
# once and never modified by the API.
# =============================================================================

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class UserCreate(BaseModel):
    """
    Schema for signing up a new user.

    Example:
        {
            "username": "ana",
            "avatar": "https://example.com/ana.png"
        }
    """

    model_config = ConfigDict(extra="forbid")

    # The handle; must be unique across all users
    username: str = Field(
        ...,
        min_length=1,
        description="Unique handle of the user"
    )

    # Avatar URL, optional
    avatar: str = Field(
        default="",
        description="URL of the user's avatar image"
    )


class UserResponse(BaseModel):
    """
    Schema for returning a stored user.

    Covers the whole `users` document: sign-up stores exactly these fields.

    Example:
        {
            "_id": "6650c1f2a1b2c3d4e5f60718",
            "username": "ana",
            "avatar": "",
            "createdAt": "2024-05-24T10:30:00Z"
        }
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id", description="Store-assigned identifier")
    username: str
    avatar: str = ""
    created_at: datetime = Field(..., alias="createdAt")

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> "UserResponse":
        """Build from a raw `users` collection document."""
        return cls(
            id=str(document["_id"]),
            username=document["username"],
            avatar=document.get("avatar") or "",
            created_at=document["createdAt"],
        )
