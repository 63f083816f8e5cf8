"""Portfolio matcher: trades that turn a portfolio into its benchmark."""

import logging
from collections import defaultdict, deque
from functools import cmp_to_key
from typing import Iterable, Optional, TextIO

from challenges.core.exceptions import MalformedLineError
from challenges.domain.models import (
    ASSET_TYPE_ORDER,
    Asset,
    AssetType,
    Transaction,
    TransactionType,
)
from challenges.domain.views import MatchSummary
from challenges.parsing.portfolio_input import parse_line

logger = logging.getLogger(__name__)


def compare_transactions(a: Transaction, b: Transaction) -> int:
    """
    Order transactions by company, then BOND before STOCK.

    Companies are compared case-insensitively; the asset type only breaks
    ties between transactions for exactly the same company name.
    """
    if a.company == b.company:
        return ASSET_TYPE_ORDER[a.asset_type] - ASSET_TYPE_ORDER[b.asset_type]
    left = a.company.lower()
    right = b.company.lower()
    return (left > right) - (left < right)


def sort_transactions(transactions: Iterable[Transaction]) -> list[Transaction]:
    """Sort with compare_transactions; equal elements keep emission order."""
    return sorted(transactions, key=cmp_to_key(compare_transactions))


def reconcile_asset(
    portfolio_asset: Optional[Asset],
    benchmark_asset: Optional[Asset],
) -> Optional[Transaction]:
    """
    Return the trade that turns portfolio_asset into benchmark_asset.

    A missing portfolio asset is bought in full, a missing benchmark asset is
    sold in full. Returns None when the share counts already match.
    """
    if portfolio_asset is None and benchmark_asset is None:
        raise ValueError("At least one asset is required")

    if portfolio_asset is None:
        return Transaction(
            txn_type=TransactionType.BUY,
            company=benchmark_asset.company,
            asset_type=benchmark_asset.asset_type,
            shares=benchmark_asset.shares,
        )
    if benchmark_asset is None:
        return Transaction(
            txn_type=TransactionType.SELL,
            company=portfolio_asset.company,
            asset_type=portfolio_asset.asset_type,
            shares=portfolio_asset.shares,
        )

    difference = benchmark_asset.shares - portfolio_asset.shares
    if difference == 0:
        return None
    return Transaction(
        txn_type=TransactionType.BUY if difference > 0 else TransactionType.SELL,
        company=benchmark_asset.company,
        asset_type=benchmark_asset.asset_type,
        shares=abs(difference),
    )


def format_transactions(transactions: Iterable[Transaction]) -> list[str]:
    return [txn.to_line() for txn in transactions]


class PortfolioMatcher:
    """
    Computes the sorted BUY/SELL list reconciling a portfolio to a benchmark.

    Each line is independent; nothing is carried between calls.
    """

    def match(self, portfolio: list[Asset], benchmark: list[Asset]) -> list[Transaction]:
        """
        Reconcile portfolio against benchmark.

        Benchmark assets are visited in order and each consumes the first
        unmatched portfolio asset with the same company and asset type.
        Portfolio assets left over are sold in their original order.
        """
        # identity key -> portfolio indexes, first match at the left
        index: dict[tuple[str, AssetType], deque[int]] = defaultdict(deque)
        for position, asset in enumerate(portfolio):
            index[asset.identity_key].append(position)

        matched: set[int] = set()
        transactions: list[Transaction] = []

        for benchmark_asset in benchmark:
            candidates = index.get(benchmark_asset.identity_key)
            portfolio_asset = None
            if candidates:
                position = candidates.popleft()
                matched.add(position)
                portfolio_asset = portfolio[position]

            transaction = reconcile_asset(portfolio_asset, benchmark_asset)
            if transaction is not None:
                transactions.append(transaction)

        for position, remaining_asset in enumerate(portfolio):
            if position not in matched:
                transactions.append(reconcile_asset(remaining_asset, None))

        return sort_transactions(transactions)

    def match_line(self, line: str, line_number: Optional[int] = None) -> list[Transaction]:
        """Parse a portfolio:benchmark line and reconcile it."""
        portfolio, benchmark = parse_line(line, line_number)
        return self.match(portfolio, benchmark)

    def process_lines(
        self,
        lines: Iterable[str],
        out: TextIO,
        policy: str = "skip",
    ) -> MatchSummary:
        """
        Match every line and write the transactions to out, in input order.

        With policy "skip" a malformed line is logged and recorded in the
        summary; with "abort" processing stops at the first malformed line.
        Blank lines are skipped silently.
        """
        summary = MatchSummary()

        for line_number, line in enumerate(lines, start=1):
            if not line.strip():
                summary.skipped_count += 1
                continue

            try:
                transactions = self.match_line(line, line_number)
            except MalformedLineError as e:
                summary.errors.append(e.message)
                if policy == "abort":
                    logger.error(f"Aborting: {e.message}")
                    summary.aborted = True
                    break
                logger.warning(f"Skipping malformed input: {e.message}")
                summary.skipped_count += 1
                continue

            for text in format_transactions(transactions):
                out.write(text + "\n")
            summary.processed_count += 1
            summary.transaction_count += len(transactions)

        logger.info(
            f"Matched {summary.processed_count} lines, skipped {summary.skipped_count}, "
            f"emitted {summary.transaction_count} transactions"
        )
        return summary
