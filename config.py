"""
config.py
---------
Centralised configuration for the migration conventions engine.

Loads settings from environment variables (with .env file support via
python-dotenv). Provides typed settings as frozen dataclasses so the
configuration is immutable at runtime.

Design Decision:
    Using a dataclass with field-level defaults means the engine works
    "out of the box" without any .env file, while still allowing a host
    process to override the default schema and working directory through
    its environment.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

_env_path = Path(__file__).parent / ".env"
if _env_path.exists():
    load_dotenv(dotenv_path=_env_path)


def _optional_env(name: str) -> str | None:
    value = os.getenv(name)
    return value or None


@dataclass(frozen=True)
class ConventionsConfig:
    """Settings consulted by the default migration conventions."""
    default_schema: str | None = field(
        default_factory=lambda: _optional_env("MIGRATION_DEFAULT_SCHEMA")
    )
    working_directory: Path | None = field(
        default_factory=lambda: (
            Path(os.environ["MIGRATION_WORKING_DIR"])
            if os.getenv("MIGRATION_WORKING_DIR")
            else None  # None → process working directory
        )
    )


@dataclass(frozen=True)
class LoggingConfig:
    """Logging preferences."""
    log_level: str = field(
        default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper()
    )
    log_file: str | None = field(
        default_factory=lambda: _optional_env("LOG_FILE")  # None → stderr only
    )


@dataclass(frozen=True)
class AppConfig:
    """Root configuration."""
    conventions: ConventionsConfig = field(default_factory=ConventionsConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    app_name: str = "Migration Conventions"
    app_version: str = "1.0.0"


def load_config() -> AppConfig:
    """
    Build and return the configuration from the current environment.

    Returns:
        AppConfig: Fully populated (and frozen) configuration object.

    Example::

        cfg = load_config()
        print(cfg.conventions.default_schema)   # None
        print(cfg.logging.log_level)            # "INFO"
    """
    return AppConfig()


# Module-level singleton used throughout the package
CONFIG: AppConfig = load_config()


def get_log_level() -> int:
    """Convert string log level from config to logging module constant."""
    level = getattr(logging, CONFIG.logging.log_level, None)
    if not isinstance(level, int):
        return logging.INFO
    return level
