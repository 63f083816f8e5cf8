"""
Pytest configuration and fixtures for the challenge solvers.

This module provides:
- Settings isolation between tests
- Resolver and matcher fixtures
- Input builders for both stdin protocols
- Helpers for checking reconciliation results
"""

import random
from collections import defaultdict
from typing import Callable, Iterable, Optional

import pytest

from challenges.config.settings import reset_settings
from challenges.domain.models import Asset, AssetType, Transaction
from challenges.services import (
    CachePositionResolver,
    SimulatedLruResolver,
    PortfolioMatcher,
)


# =============================================================================
# INPUT BUILDERS
# =============================================================================


def cache_input_lines(
    cabinet_sizes: Iterable[int],
    accesses: list[int],
    access_count: Optional[int] = None,
) -> list[str]:
    """Build the resolver's stdin lines; access_count defaults to len(accesses)."""
    count = len(accesses) if access_count is None else access_count
    lines = [" ".join(str(size) for size in cabinet_sizes) + "\n", f"{count}\n"]
    lines.extend(f"{key}\n" for key in accesses)
    return lines


def asset(company: str, asset_type: str, shares: int) -> Asset:
    """Shorthand Asset constructor."""
    return Asset(company=company, asset_type=AssetType(asset_type), shares=shares)


def holdings_after(
    portfolio: list[Asset],
    transactions: list[Transaction],
) -> dict[tuple[str, AssetType], int]:
    """Apply transactions to a portfolio and return non-zero holdings by identity key."""
    holdings: dict[tuple[str, AssetType], int] = defaultdict(int)
    for item in portfolio:
        holdings[item.identity_key] += item.shares
    for txn in transactions:
        holdings[txn.identity_key] += txn.signed_shares
    return {key: shares for key, shares in holdings.items() if shares != 0}


def holdings_of(assets: list[Asset]) -> dict[tuple[str, AssetType], int]:
    """Return non-zero holdings by identity key."""
    return holdings_after(assets, [])


# =============================================================================
# SETTINGS FIXTURES
# =============================================================================


@pytest.fixture(autouse=True)
def isolated_settings():
    """Reload settings from a clean environment for every test."""
    reset_settings()
    yield
    reset_settings()


# =============================================================================
# SERVICE FIXTURES
# =============================================================================


@pytest.fixture
def cache_resolver() -> CachePositionResolver:
    """Provide the linear-time resolver."""
    return CachePositionResolver()


@pytest.fixture
def simulated_resolver() -> SimulatedLruResolver:
    """Provide the move-to-front reference resolver."""
    return SimulatedLruResolver()


@pytest.fixture
def portfolio_matcher() -> PortfolioMatcher:
    """Provide a PortfolioMatcher."""
    return PortfolioMatcher()


# =============================================================================
# RANDOM DATA FIXTURES
# =============================================================================


@pytest.fixture
def rng() -> random.Random:
    """Seeded random generator for deterministic generated cases."""
    return random.Random(42)


@pytest.fixture
def random_access_factory(rng) -> Callable[..., list[int]]:
    """Factory for random access sequences drawn from a small key space."""

    def _create(length: int, key_space: int = 8) -> list[int]:
        return [rng.randint(1, key_space) for _ in range(length)]

    return _create


@pytest.fixture
def random_assets_factory(rng) -> Callable[..., list[Asset]]:
    """Factory for asset lists with unique identity keys."""
    companies = ["AAPL", "GOOG", "msft", "Amzn", "IBM"]

    def _create(max_count: int = 6) -> list[Asset]:
        keys = [(company, asset_type) for company in companies for asset_type in AssetType]
        chosen = rng.sample(keys, rng.randint(1, max_count))
        return [
            Asset(company=company, asset_type=asset_type, shares=rng.randint(0, 500))
            for company, asset_type in chosen
        ]

    return _create
