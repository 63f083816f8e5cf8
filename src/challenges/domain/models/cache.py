"""Cache models: cabinet layout and the most-recently-used access log."""

from collections import deque
from dataclasses import dataclass, field
from typing import Iterable, Iterator


@dataclass
class CabinetLayout:
    """
    Ordered cabinet capacities.

    Cache slots are filled cabinet by cabinet, first cabinet first.
    """

    sizes: list[int] = field(default_factory=list)

    @property
    def total_capacity(self) -> int:
        return sum(self.sizes)

    def __len__(self) -> int:
        return len(self.sizes)


@dataclass
class AccessLog:
    """
    Most-recently-used-first log of every access, duplicates included.

    Each access is pushed to the front and earlier entries are never moved,
    so the front is always the latest access.
    """

    entries: deque = field(default_factory=deque)

    @classmethod
    def from_accesses(cls, keys: Iterable[int]) -> "AccessLog":
        """Build the log from keys in chronological order."""
        log = cls()
        for key in keys:
            log.entries.appendleft(key)
        return log

    def pop_sought(self) -> int:
        """Remove and return the latest access."""
        return self.entries.popleft()

    def __iter__(self) -> Iterator[int]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)
