"""Domain models package."""

from challenges.domain.models.enums import (
    AssetType,
    TransactionType,
    PlacementOutcome,
    ASSET_TYPE_ORDER,
)
from challenges.domain.models.asset import Asset
from challenges.domain.models.transaction import Transaction
from challenges.domain.models.cache import CabinetLayout, AccessLog

__all__ = [
    "AssetType",
    "TransactionType",
    "PlacementOutcome",
    "ASSET_TYPE_ORDER",
    "Asset",
    "Transaction",
    "CabinetLayout",
    "AccessLog",
]
