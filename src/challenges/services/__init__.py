"""Service layer - the two solvers."""

from challenges.services.cache_resolver import (
    CachePositionResolver,
    SimulatedLruResolver,
    get_cache_resolver,
    locate_cabinet,
)
from challenges.services.portfolio_matcher import (
    PortfolioMatcher,
    compare_transactions,
    format_transactions,
    reconcile_asset,
    sort_transactions,
)

__all__ = [
    "CachePositionResolver",
    "SimulatedLruResolver",
    "get_cache_resolver",
    "locate_cabinet",
    "PortfolioMatcher",
    "compare_transactions",
    "format_transactions",
    "reconcile_asset",
    "sort_transactions",
]
