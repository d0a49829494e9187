"""
Configuration management for Notefind.

Uses XDG base directories:
- Config: ~/.config/notefind/config.toml
- Log: ~/.local/state/notefind/notefind.log
"""

import logging
import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator

from notefind.errors import LogSetupError

logger = logging.getLogger(__name__)

# XDG defaults
DEFAULT_CONFIG_HOME = Path.home() / ".config"
DEFAULT_STATE_HOME = Path.home() / ".local" / "state"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class Settings(BaseModel):
    """Schema for the [notefind] table of config.toml."""

    notes_dir: Path = Field(default_factory=Path.cwd, description="Root directory of the notes")
    log_level: str = Field(default="WARNING", description="Level for the log file")

    @field_validator("notes_dir")
    @classmethod
    def expand_notes_dir(cls, value: Path) -> Path:
        return value.expanduser()

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level


def get_config_dir() -> Path:
    """Get the config directory (XDG_CONFIG_HOME/notefind)."""
    base = Path(os.environ.get("XDG_CONFIG_HOME", DEFAULT_CONFIG_HOME))
    return base / "notefind"


def get_state_dir() -> Path:
    """Get the state directory (XDG_STATE_HOME/notefind)."""
    base = Path(os.environ.get("XDG_STATE_HOME", DEFAULT_STATE_HOME))
    return base / "notefind"


def get_config_path() -> Path:
    """Get the path to config.toml."""
    return get_config_dir() / "config.toml"


def get_log_path() -> Path:
    """Get the path to notefind.log."""
    return get_state_dir() / "notefind.log"


def load_config() -> dict[str, Any]:
    """
    Load configuration from config.toml.

    Returns default config if the file doesn't exist or can't be parsed.
    """
    config_path = get_config_path()

    if not config_path.exists():
        return get_default_config()

    # Lazy import tomli only when needed
    import tomli

    try:
        with open(config_path, "rb") as f:
            return tomli.load(f)
    except (OSError, tomli.TOMLDecodeError) as e:
        logger.warning(f"Ignoring unreadable config {config_path}: {e}")
        return get_default_config()


def get_default_config() -> dict[str, Any]:
    """Return default configuration."""
    return {
        "notefind": {
            "notes_dir": str(Path.cwd()),
            "log_level": "WARNING",
        },
    }


def load_settings(config: dict[str, Any] | None = None) -> Settings:
    """
    Validate the [notefind] table into Settings.

    A malformed table falls back to the defaults rather than failing.
    """
    if config is None:
        config = load_config()

    section = config.get("notefind", {})
    if not isinstance(section, dict):
        logger.warning("Ignoring [notefind] config: expected a table")
        return Settings()

    try:
        return Settings(**section)
    except ValidationError as e:
        logger.warning(f"Ignoring invalid [notefind] config: {e}")
        return Settings()


def configure_logging(level: str = "WARNING") -> Path:
    """
    Send log records to the state-dir log file.

    The terminal belongs to the search prompt, so nothing is logged there.
    """
    log_path = get_log_path()
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logging.basicConfig(
            filename=log_path,
            format=LOG_FORMAT,
            level=getattr(logging, level, logging.WARNING),
        )
    except OSError as e:
        raise LogSetupError(f"Cannot open log file {log_path}: {e}") from e
    return log_path
