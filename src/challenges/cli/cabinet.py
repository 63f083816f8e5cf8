#!/usr/bin/env python3
"""Cabinet cache resolver entry point.

Reads cabinet sizes, K and K item keys from stdin and prints the cabinet
holding the last key, NEW, OUTSIDE or INPUT_ERROR.
Run with: python -m challenges.cli.cabinet
"""

import logging
import sys
from typing import TextIO

from challenges.config.logging_config import setup_logging
from challenges.config.settings import get_settings
from challenges.core.exceptions import ValidationError
from challenges.parsing.cache_input import parse_cache_input
from challenges.services.cache_resolver import get_cache_resolver

INPUT_ERROR = "INPUT_ERROR"

logger = logging.getLogger(__name__)


def run(stdin: TextIO, stdout: TextIO) -> int:
    """Resolve one request; the exit code is always 0."""
    try:
        request = parse_cache_input(stdin)
    except ValidationError as e:
        logger.info(f"Rejected input: {e.message}")
        stdout.write(INPUT_ERROR + "\n")
        return 0

    resolver = get_cache_resolver(get_settings().cache_strategy)
    placement = resolver.resolve(request)
    stdout.write(placement.render() + "\n")
    return 0


def main() -> None:
    """Console script for cabinet-resolver."""
    setup_logging()
    sys.exit(run(sys.stdin, sys.stdout))


if __name__ == "__main__":
    main()
