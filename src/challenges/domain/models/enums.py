"""Enumerations for domain models."""

from enum import Enum


class AssetType(str, Enum):
    """Kinds of holdings a portfolio can carry."""

    BOND = "BOND"
    STOCK = "STOCK"


class TransactionType(str, Enum):
    """Trades emitted while reconciling a portfolio."""

    BUY = "BUY"
    SELL = "SELL"


class PlacementOutcome(str, Enum):
    """Where a sought item ends up relative to the cabinets."""

    CABINET = "CABINET"
    NEW = "NEW"  # never accessed before the final access
    OUTSIDE = "OUTSIDE"  # evicted past the last cabinet


# Explicit tie-break rank for same-company transactions; BOND always sorts first
ASSET_TYPE_ORDER = {
    AssetType.BOND: 0,
    AssetType.STOCK: 1,
}
