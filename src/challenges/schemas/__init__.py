"""Pydantic schemas validating parsed input."""

from challenges.schemas.cache import (
    CacheRequest,
    MAX_CABINET_SIZE,
    MAX_NUMBER_OF_CABINETS,
    MAX_ACCESS_COUNT,
    MAX_ITEM_KEY,
    validate_access_count,
)
from challenges.schemas.portfolio import AssetRecord, MAX_SHARES
from challenges.schemas.errors import describe_validation_error

__all__ = [
    "CacheRequest",
    "MAX_CABINET_SIZE",
    "MAX_NUMBER_OF_CABINETS",
    "MAX_ACCESS_COUNT",
    "MAX_ITEM_KEY",
    "validate_access_count",
    "AssetRecord",
    "MAX_SHARES",
    "describe_validation_error",
]
