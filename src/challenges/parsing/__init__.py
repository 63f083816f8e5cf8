"""Text protocol parsers for both utilities."""

from challenges.parsing.cache_input import parse_cache_input
from challenges.parsing.portfolio_input import parse_line, parse_side

__all__ = [
    "parse_cache_input",
    "parse_line",
    "parse_side",
]
