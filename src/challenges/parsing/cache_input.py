"""Parser for the cabinet cache resolver stdin protocol.

Line 1 holds space-separated cabinet sizes, line 2 the access count K and
the next K lines one item key each. Anything after those K lines is ignored.
"""

import logging
from typing import Iterable, Iterator

from pydantic import ValidationError as PydanticValidationError

from challenges.core.exceptions import ValidationError
from challenges.core.tokens import parse_int_token
from challenges.schemas.cache import (
    CacheRequest,
    MAX_NUMBER_OF_CABINETS,
    validate_access_count,
)
from challenges.schemas.errors import describe_validation_error

logger = logging.getLogger(__name__)


def _next_line(lines: Iterator[str], what: str) -> str:
    try:
        line = next(lines)
    except StopIteration:
        raise ValidationError(f"Unexpected end of input while reading {what}")
    return line.rstrip("\r\n")


def _parse_cabinet_sizes(line: str) -> list[int]:
    # A single space separates sizes; trailing separators are tolerated
    tokens = line.rstrip(" ").split(" ")
    if len(tokens) >= MAX_NUMBER_OF_CABINETS:
        raise ValidationError(f"Invalid number of cabinets: {len(tokens)}")
    return [parse_int_token(token, "cabinet size") for token in tokens]


def parse_cache_input(lines: Iterable[str]) -> CacheRequest:
    """
    Parse and validate the full resolver input.

    Raises ValidationError on any malformed or out-of-range value, including
    fewer key lines than announced.
    """
    stream = iter(lines)

    cabinet_sizes = _parse_cabinet_sizes(_next_line(stream, "cabinet sizes"))

    access_count = parse_int_token(_next_line(stream, "access count"), "access count")
    try:
        validate_access_count(access_count)
    except PydanticValidationError as e:
        raise ValidationError(f"Invalid access count: {describe_validation_error(e)}")

    accesses = []
    for position in range(access_count):
        line = _next_line(stream, f"access {position + 1} of {access_count}")
        accesses.append(parse_int_token(line, "item key"))

    try:
        request = CacheRequest(cabinet_sizes=cabinet_sizes, accesses=accesses)
    except PydanticValidationError as e:
        raise ValidationError(describe_validation_error(e))

    logger.debug(f"Parsed {len(cabinet_sizes)} cabinets and {access_count} accesses")
    return request
