"""Domain layer - pure models with no external dependencies."""

from challenges.domain.models import (
    AssetType,
    TransactionType,
    PlacementOutcome,
    Asset,
    Transaction,
    CabinetLayout,
    AccessLog,
)

__all__ = [
    "AssetType",
    "TransactionType",
    "PlacementOutcome",
    "Asset",
    "Transaction",
    "CabinetLayout",
    "AccessLog",
]
