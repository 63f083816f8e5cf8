"""Parser for portfolio:benchmark lines."""

from typing import Optional

from pydantic import ValidationError as PydanticValidationError

from challenges.core.exceptions import MalformedLineError, ValidationError
from challenges.core.tokens import parse_int_token
from challenges.domain.models import Asset
from challenges.schemas.errors import describe_validation_error
from challenges.schemas.portfolio import AssetRecord

SIDE_SEPARATOR = ":"
ASSET_SEPARATOR = "|"
FIELD_SEPARATOR = ","


def parse_asset(text: str, line_number: Optional[int] = None) -> Asset:
    """Parse a single company,TYPE,shares triple."""
    fields = text.split(FIELD_SEPARATOR)
    if len(fields) != 3:
        raise MalformedLineError(
            f"Expected company,TYPE,shares but got {text!r}",
            line_number=line_number,
        )
    company, asset_type, shares_text = fields

    try:
        shares = parse_int_token(shares_text, "shares")
        record = AssetRecord(company=company, asset_type=asset_type, shares=shares)
    except ValidationError as e:
        raise MalformedLineError(e.message, line_number=line_number)
    except PydanticValidationError as e:
        raise MalformedLineError(
            f"Invalid asset {text!r}: {describe_validation_error(e)}",
            line_number=line_number,
        )
    return record.to_domain()


def parse_side(text: str, side: str, line_number: Optional[int] = None) -> list[Asset]:
    """Parse one |-separated side of a line, keeping the order read."""
    if not text:
        raise MalformedLineError(f"Empty {side} side", line_number=line_number)
    return [parse_asset(item, line_number) for item in text.split(ASSET_SEPARATOR)]


def parse_line(
    line: str,
    line_number: Optional[int] = None,
) -> tuple[list[Asset], list[Asset]]:
    """
    Split a line into its portfolio and benchmark assets.

    Raises MalformedLineError when the line does not have exactly one ':',
    a side is empty, or any asset fails validation.
    """
    text = line.rstrip("\r\n")
    sides = text.split(SIDE_SEPARATOR)
    if len(sides) != 2:
        raise MalformedLineError(
            f"Expected exactly one '{SIDE_SEPARATOR}' separating portfolio and benchmark",
            line_number=line_number,
        )
    portfolio_text, benchmark_text = sides
    portfolio = parse_side(portfolio_text, "portfolio", line_number)
    benchmark = parse_side(benchmark_text, "benchmark", line_number)
    return portfolio, benchmark
