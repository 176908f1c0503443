"""enve - Run a program in a modified environment.

Loads variables from a dotenv file or stdin, merges them into the process
environment, then prints the result (text, JSON or XML) or runs a command
with it.

Modules:
- config: Resolution and logging settings
- env: Dotenv parsing, source loading, merging and rendering
- launcher: Running the trailing command
- logger: Structured diagnostics on stderr
- exceptions: Error classes with structured error info
"""

__version__ = "1.0.0"

from enve.config import (
    FileSource,
    LogSettings,
    ResolutionConfig,
    StdinSource,
)

from enve.env import (
    EnvironmentSet,
    EnvironmentVariable,
    EnvLoader,
    Loaded,
    Skipped,
    merge,
    parse,
    render,
)

from enve.exceptions import (
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

from enve.launcher import launch

from enve.logger import (
    Logger,
    StructuredLogger,
    create_logger,
    get_logger,
)

__all__ = [
    "__version__",
    # Config
    "ResolutionConfig",
    "FileSource",
    "StdinSource",
    "LogSettings",
    # Environment
    "EnvironmentVariable",
    "EnvironmentSet",
    "EnvLoader",
    "Loaded",
    "Skipped",
    "parse",
    "merge",
    "render",
    # Launcher
    "launch",
    # Logger
    "Logger",
    "StructuredLogger",
    "create_logger",
    "get_logger",
    # Exceptions
    "EnveError",
    "InvalidArgumentError",
    "PathNotFoundError",
    "NotAFileError",
    "InvalidDirectoryError",
    "EnvIOError",
    "ParseError",
    "EnvLoadError",
    "ExecutableNotFoundError",
    "CommandError",
]
