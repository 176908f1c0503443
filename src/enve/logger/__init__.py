"""
enve Logger Module

Diagnostics for the tool itself. Output goes to stderr so it never mixes with
the rendered environment or the launched command's stdout.

Usage:
    from enve.logger import get_logger

    logger = get_logger()
    logger.debug("Resolved source", source="file", origin=".env")

Environment Variables:
    ENVE_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    ENVE_LOG_FILE: Optional file path for log output
    ENVE_LOG_JSON: Set to "true" for JSON output format
"""

import logging
from typing import Mapping, Optional

from enve.config.settings import LogSettings

from .interface import Logger
from .structured_logger import JsonFormatter, StructuredLogger, TextFormatter


def create_logger(
    name: str = "enve",
    level: Optional[int] = None,
    log_file: Optional[str] = None,
    json_format: Optional[bool] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Logger:
    """Create a new logger instance with the specified configuration.

    Parameters that are not provided are read from ``LogSettings`` (the
    ENVE_LOG_* environment variables).

    Args:
        name: Logger name
        level: Logging level (defaults to WARNING or env var)
        log_file: Optional file path for log output
        json_format: If True, output logs as JSON
        environ: Mapping to read settings from (defaults to os.environ)

    Returns:
        A configured Logger instance
    """
    settings = LogSettings.from_env(environ=environ)

    if level is None:
        resolved = getattr(logging, settings.level, None)
        level = resolved if isinstance(resolved, int) else logging.WARNING

    if log_file is None:
        log_file = settings.file

    if json_format is None:
        json_format = settings.json_format

    return StructuredLogger(
        name=name,
        level=level,
        log_file=log_file,
        json_format=json_format,
    )


def get_logger(name: str = "enve") -> Logger:
    """Get a logger configured from environment variables."""
    return create_logger(name=name)


__all__ = [
    # Interface
    "Logger",
    # Implementation
    "StructuredLogger",
    # Formatters (for custom use)
    "JsonFormatter",
    "TextFormatter",
    # Factory functions
    "create_logger",
    "get_logger",
]
