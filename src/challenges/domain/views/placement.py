"""View model for cache resolver output."""

from dataclasses import dataclass
from typing import Optional

from challenges.domain.models.enums import PlacementOutcome


@dataclass
class CabinetPlacement:
    """Where the sought item sits after the final access."""

    position_index: int
    outcome: PlacementOutcome
    cabinet: Optional[int] = None  # 1-based ordinal, set only for CABINET

    def render(self) -> str:
        """Return the single output token for this placement."""
        if self.outcome == PlacementOutcome.CABINET:
            return str(self.cabinet)
        return self.outcome.value
