"""Core utilities and shared functionality."""

from challenges.core.exceptions import (
    AppError,
    ValidationError,
    MalformedLineError,
)
from challenges.core.tokens import parse_int_token

__all__ = [
    "AppError",
    "ValidationError",
    "MalformedLineError",
    "parse_int_token",
]
