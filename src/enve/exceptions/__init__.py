"""Exceptions raised by enve.

All exceptions include structured error information:
- code: Machine-readable error identifier
- message: Human-readable error description
- details: Additional context for debugging

Usage:
    from enve.exceptions import EnveError, ParseError

    try:
        ...
    except EnveError as e:
        print(f"error: {e.message}", file=sys.stderr)
"""

from enve.exceptions.base import (
    CommandError,
    EnveError,
    EnvIOError,
    EnvLoadError,
    ExecutableNotFoundError,
    InvalidArgumentError,
    InvalidDirectoryError,
    NotAFileError,
    ParseError,
    PathNotFoundError,
)

__all__ = [
    # Base exception
    "EnveError",
    # Arguments and paths
    "InvalidArgumentError",
    "PathNotFoundError",
    "NotAFileError",
    "InvalidDirectoryError",
    # Loading
    "EnvIOError",
    "ParseError",
    "EnvLoadError",
    # Execution
    "ExecutableNotFoundError",
    "CommandError",
]
