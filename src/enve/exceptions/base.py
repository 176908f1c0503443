"""Base exception classes for enve.

All enve exceptions include structured error information:
- code: Machine-readable error identifier
- message: Human-readable, single-line error description
- details: Additional context for debugging
"""

from typing import Any, Dict, Optional


class EnveError(Exception):
    """Base exception for all enve errors.

    Attributes:
        code: Machine-readable error code (e.g., "FILE_NOT_FOUND")
        message: Human-readable error message
        details: Optional additional context for debugging
    """

    default_code = "ENVE_ERROR"

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        """Initialize error with structured information.

        Args:
            message: Human-readable error message
            code: Machine-readable error code (defaults to the class code)
            details: Optional additional context
        """
        self.code = code or self.default_code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return formatted error string."""
        if self.details:
            return f"{self.code}: {self.message} (details: {self.details})"
        return f"{self.code}: {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for JSON serialization.

        Returns:
            Dictionary with code, message, and details keys.
        """
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class InvalidArgumentError(EnveError):
    """Raised when a command line value is empty, unsupported or conflicting."""

    default_code = "INVALID_ARGUMENT"


class PathNotFoundError(EnveError):
    """Raised when a dotenv file path cannot be accessed."""

    default_code = "FILE_NOT_FOUND"


class NotAFileError(EnveError):
    """Raised when a dotenv file path points to a directory."""

    default_code = "NOT_A_FILE"


class InvalidDirectoryError(EnveError):
    """Raised when a working directory is missing, inaccessible or not a directory."""

    default_code = "INVALID_DIRECTORY"


class EnvIOError(EnveError):
    """Raised when reading a variable source fails."""

    default_code = "IO_ERROR"


class ParseError(EnveError):
    """Raised when dotenv content is malformed.

    Carries the offending character and its position so callers can point
    the user at the exact spot.
    """

    default_code = "PARSE_ERROR"

    def __init__(
        self,
        message: str,
        character: Optional[str] = None,
        line: Optional[int] = None,
        column: Optional[int] = None,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.character = character
        self.line = line
        self.column = column
        super().__init__(message, code=code, details=details)


class EnvLoadError(ParseError):
    """Raised when parsed content cannot be loaded into the environment.

    Wraps a ParseError, keeping its position data and adding the source
    origin and whether overwrite mode was on.
    """

    default_code = "ENV_LOAD_ERROR"

    def __init__(self, origin: str, overwrite: bool, cause: ParseError):
        suffix = " (overwrite)" if overwrite else ""
        self.origin = origin
        self.overwrite = overwrite
        super().__init__(
            f"cannot load env from {origin}{suffix}: {cause.message}",
            character=cause.character,
            line=cause.line,
            column=cause.column,
            details=dict(cause.details),
        )


class ExecutableNotFoundError(EnveError):
    """Raised when the command to run cannot be found on the search path."""

    default_code = "EXECUTABLE_NOT_FOUND"


class CommandError(EnveError):
    """Raised when the child process cannot be spawned."""

    default_code = "CHILD_PROCESS_ERROR"
