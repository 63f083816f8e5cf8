#!/usr/bin/env python3
"""Portfolio matcher entry point.

Reads portfolio:benchmark lines from stdin and prints the transactions for
each line, in input order.
Run with: python -m challenges.cli.portfolio
"""

import logging
import sys
from typing import TextIO

from challenges.config.logging_config import setup_logging
from challenges.config.settings import get_settings
from challenges.services.portfolio_matcher import PortfolioMatcher

logger = logging.getLogger(__name__)


def run(stdin: TextIO, stdout: TextIO, stderr: TextIO) -> int:
    """Process every line; returns 1 only when a malformed line aborts the run."""
    settings = get_settings()
    summary = PortfolioMatcher().process_lines(
        stdin,
        stdout,
        policy=settings.malformed_line_policy,
    )
    if summary.aborted:
        stderr.write(f"Error: {summary.errors[-1]}\n")
        return 1
    return 0


def main() -> None:
    """Console script for portfolio-matcher."""
    setup_logging()
    sys.exit(run(sys.stdin, sys.stdout, sys.stderr))


if __name__ == "__main__":
    main()
