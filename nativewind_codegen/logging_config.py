"""Unified logging configuration for the code generator."""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

from .settings import CODEGEN_LOG_LEVEL

# Log directory; file logging is enabled only when LOG_DIR is set
LOG_DIR: Optional[Path] = Path(os.environ["LOG_DIR"]) if os.getenv("LOG_DIR") else None

# Prevent duplicate handlers
_configured_loggers: set[str] = set()


def setup_logger(name: str, filename: Optional[str] = None, level: Optional[str] = None) -> logging.Logger:
    """Setup a logger with a console handler and an optional file handler.

    Args:
        name: Logger name (e.g., 'nativewind_codegen')
        filename: Log file name under LOG_DIR (e.g., 'codegen.log')
        level: Level name, defaults to CODEGEN_LOG_LEVEL

    Returns:
        Configured logger instance
    """
    if name in _configured_loggers:
        return logging.getLogger(name)

    log_level = getattr(logging, (level or CODEGEN_LOG_LEVEL).upper(), logging.INFO)

    logger = logging.getLogger(name)
    logger.setLevel(log_level)
    logger.propagate = False  # Prevent duplicate logs

    # File handler
    if filename and LOG_DIR is not None:
        LOG_DIR.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(LOG_DIR / filename, encoding='utf-8')
        fh.setLevel(log_level)
        fh.setFormatter(logging.Formatter(
            "%(asctime)s [%(name)s] [%(levelname)s] %(message)s"
        ))
        logger.addHandler(fh)

    # Console handler
    sh = logging.StreamHandler()
    sh.setLevel(log_level)
    sh.setFormatter(logging.Formatter(
        "%(asctime)s [%(name)s] %(message)s"
    ))
    logger.addHandler(sh)

    _configured_loggers.add(name)
    return logger


def get_codegen_logger(level: Optional[str] = None) -> logging.Logger:
    """Root logger for the package; child loggers inherit its handlers."""
    return setup_logger("nativewind_codegen", "codegen.log", level)
