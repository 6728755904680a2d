"""
Centralized logging configuration for the households importer.

* ``get_logger(name)`` returns ``households.<name>``, a child of one base
  logger configured on first use.
* The base logger writes to a master log file (``logs/households.log``)
  and to stderr. The console shows WARNING and above (rejected lines)
  unless the configured debug flag is set; stdout is left to the report.
"""

from __future__ import annotations

import logging
from logging import Logger, StreamHandler
from pathlib import Path

from households.config import get_config

BASE_LOGGER_NAME = "households"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_base_configured: bool = False


def log_dir() -> Path:
    """Configured log directory; relative paths resolve against the working directory."""
    cfg = get_config()
    return Path(cfg.logging.get("dir") or cfg.paths.get("logs_dir") or "logs").resolve()


def _configure_base_logger() -> Logger:
    global _base_configured

    base_logger = logging.getLogger(BASE_LOGGER_NAME)
    if _base_configured:
        return base_logger

    cfg = get_config()
    debug_enabled = bool(cfg.debug)
    level_name = str(cfg.logging.get("level", "INFO")).upper()
    level = logging.DEBUG if debug_enabled else getattr(logging, level_name, logging.INFO)
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    directory = log_dir()
    directory.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(
        directory / cfg.logging.get("file", "households.log"), encoding="utf-8"
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)

    console = StreamHandler()
    console.setLevel(logging.DEBUG if debug_enabled else logging.WARNING)
    console.setFormatter(formatter)

    base_logger.setLevel(level)
    base_logger.propagate = False
    base_logger.addHandler(file_handler)
    base_logger.addHandler(console)

    _base_configured = True
    return base_logger


def get_logger(name: str | None = None) -> Logger:
    """Return ``households.<name>``, configuring the shared handlers once."""
    base_logger = _configure_base_logger()
    if not name or name == BASE_LOGGER_NAME:
        return base_logger
    if not name.startswith(BASE_LOGGER_NAME + "."):
        name = f"{BASE_LOGGER_NAME}.{name}"
    return logging.getLogger(name)
