"""
Application configuration.

Settings are loaded from environment variables prefixed with RSST_ and
from an optional .env file in the working directory.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from . import __version__

_env_file = Path.cwd() / ".env"


class Settings(BaseSettings):
    """
    rsst configuration from environment variables.

    All settings are prefixed with RSST_ in environment.
    """

    model_config = SettingsConfigDict(
        env_prefix="RSST_",
        env_file=str(_env_file) if _env_file.exists() else None,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Manually maintained subscription list in OPML 2.0 format
    opml_path: Path = Path("~/.config/rss/opml.xml")
    # Directory holding one cached body per feed, named after the feed
    cache_dir: Path = Path("~/.config/rss/")

    log_level: str = "WARNING"

    request_timeout: float = 30.0
    user_agent: str = f"rsst/{__version__}"

    @field_validator("opml_path", "cache_dir", mode="after")
    @classmethod
    def expand_home(cls, value: Path) -> Path:
        """Expand a leading ``~`` in configured paths."""
        return value.expanduser()

    @field_validator("log_level", mode="after")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        """Upper-case the log level name."""
        return value.upper()


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()
