"""Cabinet cache resolver and portfolio benchmark matcher."""

__version__ = "0.1.0"
