# =============================================================================
# app/dependencies.py - Request Validation Dependencies
# =============================================================================
# FastAPI dependencies that gate a route on a Pydantic schema.
# They run before the handler; a failing request gets a 422 listing every
# violation and never reaches the database.
#
# Usage:
#   @router.post("/sign-up")
#   async def sign_up(payload: UserCreate = Depends(validate_body(UserCreate))):
# =============================================================================

import json
from collections.abc import Awaitable, Callable
from typing import TypeVar

from fastapi import Request
from pydantic import BaseModel

from app.exceptions import InvalidParamsError, InvalidPayloadError
from core.validators import validate

ModelT = TypeVar("ModelT", bound=BaseModel)


def validate_body(schema: type[ModelT]) -> Callable[[Request], Awaitable[ModelT]]:
    """
    Build a dependency that validates the JSON body against `schema`.

    Raises:
        InvalidPayloadError: If the body isn't JSON or violates the schema
    """

    async def dependency(request: Request) -> ModelT:
        try:
            payload = await request.json()
        except (json.JSONDecodeError, UnicodeDecodeError):
            raise InvalidPayloadError(["body must be valid JSON"])

        result = validate(schema, payload)
        if not result.ok:
            raise InvalidPayloadError(result.errors)
        return result.value

    return dependency


def validate_params(schema: type[ModelT]) -> Callable[[Request], Awaitable[ModelT]]:
    """
    Build a dependency that validates the path parameters against `schema`.

    Raises:
        InvalidParamsError: If a parameter violates the schema
    """

    async def dependency(request: Request) -> ModelT:
        result = validate(schema, dict(request.path_params))
        if not result.ok:
            raise InvalidParamsError(result.errors)
        return result.value

    return dependency
