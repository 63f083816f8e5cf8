"""Helpers for turning pydantic errors into readable messages."""

from pydantic import ValidationError as PydanticValidationError


def describe_validation_error(exc: PydanticValidationError) -> str:
    """Return a one-line description of the first validation failure."""
    errors = exc.errors()
    if not errors:
        return str(exc)
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    message = first.get("msg", "invalid value")
    return f"{location}: {message}" if location else message
