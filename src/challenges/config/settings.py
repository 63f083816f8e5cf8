"""Application settings and configuration."""

from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration loaded from CHALLENGES_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="CHALLENGES_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "Crafty Portfolio Challenges"
    app_version: str = "0.1.0"

    # Logs go to stderr; stdout is reserved for answers
    log_level: str = "WARNING"

    # "deque" is the linear resolver, "simulate" replays a move-to-front list
    cache_strategy: Literal["deque", "simulate"] = "deque"

    # What the portfolio matcher does with a line it cannot parse
    malformed_line_policy: Literal["skip", "abort"] = "skip"


# Global settings instance (can be replaced at runtime)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the current settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def set_settings(settings: Settings) -> None:
    """Set the global settings instance (used by tests)."""
    global _settings
    _settings = settings


def reset_settings() -> None:
    """Reset settings to force reload."""
    global _settings
    _settings = None
