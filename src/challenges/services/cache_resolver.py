"""Cabinet cache resolver: where does the latest access sit in an LRU cache."""

import logging

from challenges.domain.models import AccessLog, CabinetLayout, PlacementOutcome
from challenges.domain.views import CabinetPlacement
from challenges.schemas.cache import CacheRequest

logger = logging.getLogger(__name__)


def locate_cabinet(layout: CabinetLayout, position_index: int) -> CabinetPlacement:
    """
    Map a 1-based cache position to the cabinet holding it.

    Position 0 means the item was never accessed before (NEW). A position
    past the combined capacity is OUTSIDE. Otherwise the cabinet is reported
    as a 1-based ordinal; a position equal to the total capacity lands in the
    last cabinet.
    """
    if position_index == 0:
        return CabinetPlacement(position_index=0, outcome=PlacementOutcome.NEW)

    remaining = position_index
    walked = 0
    for size in layout.sizes:
        if remaining <= 0:
            break
        remaining -= size
        walked += 1

    if remaining > 0:
        return CabinetPlacement(position_index=position_index, outcome=PlacementOutcome.OUTSIDE)
    return CabinetPlacement(
        position_index=position_index,
        outcome=PlacementOutcome.CABINET,
        cabinet=walked,
    )


class CachePositionResolver:
    """
    Resolver working on the access log in O(K + N).

    Every access is kept in the log, so an item's position in the LRU cache
    is one plus the number of distinct keys in front of its latest earlier
    access. A single scan with a seen-set finds it.
    """

    def resolve(self, request: CacheRequest) -> CabinetPlacement:
        """Find the cabinet holding the final access of the request."""
        position_index = self.find_position(request)
        placement = locate_cabinet(request.to_layout(), position_index)
        logger.debug(
            f"Position {position_index} across {len(request.cabinet_sizes)} cabinets "
            f"-> {placement.render()}"
        )
        return placement

    def find_position(self, request: CacheRequest) -> int:
        log = request.to_access_log()
        sought = log.pop_sought()
        return self.position_index(sought, log)

    @staticmethod
    def position_index(sought: int, log: AccessLog) -> int:
        """
        Count distinct keys up to and including the next occurrence of sought.

        Returns 0 when sought does not occur in the log.
        """
        seen: set[int] = set()
        position_index = 0
        for key in log:
            if key not in seen:
                seen.add(key)
                position_index += 1
            if key == sought:
                return position_index
        return 0


class SimulatedLruResolver(CachePositionResolver):
    """
    Resolver that replays every access on a move-to-front list.

    Each access searches the list, so this is O(K^2). It gives the same
    answers as CachePositionResolver and is kept as a reference.
    """

    def find_position(self, request: CacheRequest) -> int:
        *history, sought = request.accesses
        cache: list[int] = []
        for key in history:
            if key in cache:
                cache.remove(key)
            cache.insert(0, key)
        if sought not in cache:
            return 0
        return cache.index(sought) + 1


def get_cache_resolver(strategy: str = "deque") -> CachePositionResolver:
    """Return the resolver for a configured strategy name."""
    if strategy == "deque":
        return CachePositionResolver()
    if strategy == "simulate":
        return SimulatedLruResolver()
    raise ValueError(f"Unknown cache strategy: {strategy}")
