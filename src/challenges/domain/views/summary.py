"""View model for a portfolio matching run."""

from dataclasses import dataclass, field


@dataclass
class MatchSummary:
    """Summary of a batch of portfolio:benchmark lines."""

    processed_count: int = 0
    skipped_count: int = 0
    transaction_count: int = 0
    errors: list[str] = field(default_factory=list)
    aborted: bool = False

    @property
    def error_count(self) -> int:
        return len(self.errors)
