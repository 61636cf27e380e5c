"""
logger.py
---------
Logging for the conventions package.

The naming, classification and tag-matching functions never log; only the
discovery pass does, reporting skipped migration types at WARNING and
discovery counts at INFO/DEBUG. Everything goes to the
"migration_conventions" logger hierarchy. It writes to stderr at LOG_LEVEL,
and also writes every record to LOG_FILE when that variable is set. A host
runner can attach its own handlers to the same hierarchy.
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path

from config import CONFIG, get_log_level

_ROOT_LOGGER_NAME = "migration_conventions"
_CONSOLE_FORMAT = "%(asctime)s [%(levelname)-8s] %(name)s: %(message)s"
_FILE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s (%(filename)s:%(lineno)d): %(message)s"
_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"

_configured = False


def _configure_root_logger() -> None:
    """One-time setup of the root logger and its handlers."""
    global _configured
    if _configured:
        return
    _configured = True

    root = logging.getLogger(_ROOT_LOGGER_NAME)
    root.setLevel(get_log_level())

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(get_log_level())
    console_handler.setFormatter(
        logging.Formatter(fmt=_CONSOLE_FORMAT, datefmt=_DATE_FORMAT)
    )
    root.addHandler(console_handler)

    if CONFIG.logging.log_file:
        log_path = Path(CONFIG.logging.log_file)
        try:
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(
                logging.Formatter(fmt=_FILE_FORMAT, datefmt=_DATE_FORMAT)
            )
            root.addHandler(file_handler)
        except OSError as exc:
            root.warning("Could not create log file '%s': %s", log_path, exc)


_configure_root_logger()


def get_logger(name: str) -> logging.Logger:
    """
    Return a child logger scoped to the given name.

    Args:
        name: Typically ``__name__`` of the calling module.

    Returns:
        A :class:`logging.Logger` instance under the
        'migration_conventions' hierarchy.

    Example::

        log = get_logger(__name__)
        log.info("Discovered %d migration(s)", count)
        log.warning("Skipping %s: %s", type_name, reason)
    """
    return logging.getLogger(f"{_ROOT_LOGGER_NAME}.{name}")
