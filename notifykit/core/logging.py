"""
Logging setup — console and optional daily file output for the notifykit logger.
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path

from notifykit.core.errors import ConfigError


def setup_logging(
    level: int | str = logging.WARNING,
    log_dir: Path | None = None,
    file_level: int = logging.DEBUG,
) -> logging.Logger:
    """
    Setup notifykit logging.

    Args:
        level: Minimum level for console output (int, digit string, or name like "INFO")
        log_dir: Directory for log files (None = no file output)
        file_level: Minimum level for file output

    Returns:
        The configured logger
    """
    if isinstance(level, str):
        level = _parse_level(level)

    logger = logging.getLogger("notifykit")
    logger.setLevel(logging.DEBUG)

    # Clear existing handlers
    logger.handlers = []

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
    logger.addHandler(console_handler)

    if log_dir is not None:
        log_dir = Path(log_dir).expanduser()
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / f"notifykit_{datetime.now().strftime('%Y%m%d')}.log"
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(file_level)
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logger.addHandler(file_handler)
        logger.info(f"Logging initialized. File: {log_file}")

    return logger


def _parse_level(name: str) -> int:
    """Map "info", "INFO" or "20" to a logging level."""
    name = name.strip()
    if name.isdigit():
        return int(name)
    level = logging.getLevelName(name.upper())
    if not isinstance(level, int):
        raise ConfigError(f"Unknown log level: {name!r}")
    return level
