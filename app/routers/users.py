# =============================================================================
# app/routers/users.py - User Endpoints
# =============================================================================
# Handles sign-up and the user listing.
# =============================================================================

from fastapi import APIRouter, Depends, status

from app.dependencies import validate_body
from core.models.common import MessageResponse
from core.models.user import UserCreate, UserResponse
from core.services.user_service import UserService

router = APIRouter()


@router.post(
    "/sign-up",
    status_code=status.HTTP_201_CREATED,
    response_model=MessageResponse,
)
async def sign_up(payload: UserCreate = Depends(validate_body(UserCreate))):
    """
    Register a new user.

    Returns 409 if the username is already taken.
    """
    await UserService.sign_up(payload.username, payload.avatar)
    return MessageResponse(message="User created successfully!")


@router.get("/users", response_model=list[UserResponse])
async def list_users():
    """List every stored user, most recently created first."""
    return await UserService.list_users()
