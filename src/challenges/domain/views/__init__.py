"""View models for service outputs."""

from challenges.domain.views.placement import CabinetPlacement
from challenges.domain.views.summary import MatchSummary

__all__ = [
    "CabinetPlacement",
    "MatchSummary",
]
