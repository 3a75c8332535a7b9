# =============================================================================
# core/validators.py - Schema Validation
# =============================================================================
# Evaluates a Pydantic schema against raw request data without raising.
# Every violation is collected and turned into a human-readable message, e.g.:
#
#   result = validate(UserCreate, {"avatar": 3})
#   result.ok      -> False
#   result.errors  -> ["username is required", "avatar must be a string"]
# =============================================================================

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)


# Templates keyed by Pydantic error type. {field} is the dotted location,
# {ctx[...]} comes from the error context.
_MESSAGES: dict[str, str] = {
    "missing": "{field} is required",
    "string_type": "{field} must be a string",
    "string_too_short": "{field} must not be empty",
    "string_too_long": "{field} must be at most {max_length} characters long",
    "extra_forbidden": "{field} is not allowed",
    "model_type": "body must be a JSON object",
    "model_attributes_type": "body must be a JSON object",
    "dict_type": "body must be a JSON object",
}


@dataclass
class ValidationResult(Generic[ModelT]):
    """Outcome of validating one payload against one schema."""

    ok: bool
    value: ModelT | None = None
    errors: list[str] = field(default_factory=list)


def _field_name(loc: Iterable[Any]) -> str:
    # FastAPI prefixes locations with "body"/"path"/"query"
    parts = [str(part) for part in loc if part not in ("body", "path", "query")]
    return ".".join(parts)


def format_error(error: Mapping[str, Any]) -> str:
    """Turn one Pydantic error dict into a sentence."""
    name = _field_name(error.get("loc", ()))
    template = _MESSAGES.get(error.get("type", ""))
    ctx = error.get("ctx") or {}

    if template is not None and (name or "{field}" not in template):
        try:
            return template.format(field=name, **ctx)
        except KeyError:
            pass

    msg = str(error.get("msg", "is invalid"))
    # Custom validators report "Value error, <reason>"
    msg = msg.removeprefix("Value error, ")
    return f"{name} {msg}" if name else msg


def format_errors(errors: Iterable[Mapping[str, Any]]) -> list[str]:
    """Format every error, keeping the order Pydantic reported them in."""
    return [format_error(error) for error in errors]


def validate(schema: type[ModelT], data: Any) -> ValidationResult[ModelT]:
    """
    Validate `data` against `schema` without raising.

    Args:
        schema: Pydantic model class describing the payload
        data: Decoded JSON body or path parameters

    Returns:
        ValidationResult with the parsed model on success, or every
        violation message on failure
    """
    try:
        value = schema.model_validate(data)
    except ValidationError as e:
        return ValidationResult(ok=False, errors=format_errors(e.errors()))
    return ValidationResult(ok=True, value=value)
