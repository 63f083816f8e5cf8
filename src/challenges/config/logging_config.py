"""Logging configuration."""

import logging
import sys

from challenges.config.settings import get_settings


def setup_logging() -> None:
    """Configure application logging.

    Records go to stderr so they never mix with the answers on stdout.
    """
    settings = get_settings()

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )
