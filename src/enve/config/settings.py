"""Dataclass-based settings for enve

Two configuration domains live here:
- ResolutionConfig: how one invocation resolves its environment, built once
  from the parsed command line flags
- LogSettings: how the tool reports diagnostics, read from ENVE_* variables
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional, Union

from enve.fs import dir_exists

DEFAULT_ENV_FILE = ".env"
DEFAULT_PREFIX = "ENVE"


@dataclass(frozen=True)
class FileSource:
    """A dotenv file to load

    Attributes:
        path: File path, already resolved against the working directory
        explicit: True when the path was given on the command line
    """

    path: Path
    explicit: bool = False


@dataclass(frozen=True)
class StdinSource:
    """Standard input as the variable source

    Attributes:
        fallback: Source used instead when stdin is a terminal (None means
            inherited-only)
    """

    fallback: Optional[FileSource] = None


Source = Union[FileSource, StdinSource, None]


@dataclass
class ResolutionConfig:
    """Per-invocation environment resolution settings

    Attributes:
        source: FileSource, StdinSource or None (inherited-only)
        overwrite: Parsed variables may replace inherited ones
        fresh_environment: The result holds only parsed variables
        ignore_environment: Start from an empty set
        working_directory: Directory the command runs in (validated)
    """

    source: Source = field(default_factory=lambda: FileSource(Path(DEFAULT_ENV_FILE)))
    overwrite: bool = False
    fresh_environment: bool = False
    ignore_environment: bool = False
    working_directory: Optional[Path] = None

    def __post_init__(self):
        """Validate the working directory"""
        if self.working_directory is not None:
            self.working_directory = dir_exists(self.working_directory)

    @property
    def isolated(self) -> bool:
        """Whether the result excludes every inherited variable"""
        return self.fresh_environment or self.ignore_environment

    @classmethod
    def from_flags(
        cls,
        file: Optional[str] = None,
        stdin: bool = False,
        no_file: bool = False,
        overwrite: bool = False,
        new_environment: bool = False,
        ignore_environment: bool = False,
        chdir: Optional[str] = None,
    ) -> "ResolutionConfig":
        """Build the config from command line flag values

        Args:
            file: Value of --file, None when the flag was not given
            stdin: --stdin
            no_file: --no-file
            overwrite: --overwrite
            new_environment: --new-environment
            ignore_environment: --ignore-environment
            chdir: Value of --chdir, None when the flag was not given

        Raises:
            InvalidDirectoryError: If chdir is not an accessible directory

        The file path is kept as given: a relative path is read from the
        starting directory, never from chdir.
        """
        working_directory = dir_exists(chdir) if chdir is not None else None

        file_source: Optional[FileSource] = None
        if not no_file:
            path = Path(file if file is not None else DEFAULT_ENV_FILE)
            file_source = FileSource(path=path, explicit=file is not None)

        source: Source = StdinSource(fallback=file_source) if stdin else file_source

        return cls(
            source=source,
            overwrite=overwrite,
            fresh_environment=new_environment,
            ignore_environment=ignore_environment,
            working_directory=working_directory,
        )


@dataclass
class LogSettings:
    """Logging configuration

    Attributes:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        file: Optional log file path
        json_format: Emit JSON records instead of text
    """

    level: str = "WARNING"
    file: Optional[str] = None
    json_format: bool = False

    @classmethod
    def from_env(
        cls,
        prefix: str = DEFAULT_PREFIX,
        environ: Optional[Mapping[str, str]] = None,
    ) -> "LogSettings":
        """Load logging settings from environment variables

        Environment variables:
            {prefix}_LOG_LEVEL: Logging level
            {prefix}_LOG_FILE: Log file path
            {prefix}_LOG_JSON: "true" for JSON records
        """
        env = os.environ if environ is None else environ
        return cls(
            level=env.get(f"{prefix}_LOG_LEVEL", "WARNING").upper(),
            file=env.get(f"{prefix}_LOG_FILE") or None,
            json_format=env.get(f"{prefix}_LOG_JSON", "false").lower() == "true",
        )
