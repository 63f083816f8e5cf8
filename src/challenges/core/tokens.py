"""Strict integer token parsing shared by the input parsers."""

import re

from challenges.core.exceptions import ValidationError

# Optional sign followed by ASCII digits only; no whitespace, underscores or
# exponents (int() would accept the first two)
_INT_TOKEN = re.compile(r"[+-]?[0-9]+")


def parse_int_token(token: str, field: str) -> int:
    """Parse a base-10 integer token, raising ValidationError otherwise."""
    if not _INT_TOKEN.fullmatch(token):
        raise ValidationError(f"Invalid {field}: {token!r}")
    return int(token)
