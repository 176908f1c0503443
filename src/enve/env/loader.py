"""Environment source resolution.

Decides where the variables of one invocation come from and reads them:

1) stdin, when requested and attached to a pipe or file
2) the dotenv file (default ``.env``)
3) nothing at all: inherited-only (``--no-file``) or empty
   (``--ignore-environment`` without an explicit source)

The outcome is a tagged result, ``Loaded`` or ``Skipped``, that the merge
engine consumes.
"""

from __future__ import annotations

import io
import os
import stat
import sys
from dataclasses import dataclass
from typing import BinaryIO, Callable, Mapping, Optional, Tuple, Union

from enve.config import FileSource, ResolutionConfig, Source, StdinSource
from enve.env.parser import parse
from enve.env.variables import EnvironmentVariable
from enve.exceptions import EnvIOError, EnvLoadError, ParseError
from enve.fs import file_exists
from enve.logger import Logger, get_logger

STDIN_ORIGIN = "stdin"


@dataclass(frozen=True)
class Loaded:
    """Variables read from a source, in source order (duplicates kept)."""

    variables: Tuple[EnvironmentVariable, ...]
    origin: str


@dataclass(frozen=True)
class Skipped:
    """No source was read; ``reason`` is "no-file" or "ignore-environment"."""

    reason: str


SourceResult = Union[Loaded, Skipped]


def stdin_is_piped(stream: BinaryIO) -> bool:
    """True unless ``stream`` is a character device (a terminal)."""
    try:
        mode = os.fstat(stream.fileno()).st_mode
    except (AttributeError, io.UnsupportedOperation):
        # In-memory streams have no descriptor and are readable as is
        return True
    except OSError as e:
        raise EnvIOError(f"cannot read from stdin: {e}") from e
    return not stat.S_ISCHR(mode)


class EnvLoader:
    """Resolve and read the variable source described by a ResolutionConfig."""

    def __init__(
        self,
        config: ResolutionConfig,
        stdin: Optional[BinaryIO] = None,
        environ: Optional[Mapping[str, str]] = None,
        logger: Optional[Logger] = None,
    ) -> None:
        """
        Args:
            config: Resolution settings for this invocation
            stdin: Binary stream to read from (default: sys.stdin.buffer)
            environ: Inherited variables, used to expand ``${NAME}`` references
                when the result is not isolated from them
            logger: Logger for diagnostics
        """
        self.config = config
        self.stdin = stdin
        self.environ = environ
        self.logger = logger or get_logger()

    def load(self) -> SourceResult:
        """Resolve the effective source and read it.

        Raises:
            PathNotFoundError: If the dotenv file cannot be accessed
            NotAFileError: If the dotenv file path is a directory
            EnvIOError: If reading the source fails
            ParseError: If the content is malformed and the result is isolated
            EnvLoadError: If the content is malformed and would be merged
        """
        source: Source = self.config.source

        if isinstance(source, StdinSource):
            stream = self._stdin_stream()
            if stdin_is_piped(stream):
                if source.fallback is not None and source.fallback.explicit:
                    self.logger.warning(
                        "Reading variables from stdin, ignoring --file",
                        file=str(source.fallback.path),
                    )
                return self._read(STDIN_ORIGIN, lambda: stream.read())
            self.logger.debug("stdin is a terminal, not reading it")
            source = source.fallback

        if self.config.ignore_environment and not (
            isinstance(source, FileSource) and source.explicit
        ):
            self.logger.debug("Starting from an empty environment")
            return Skipped("ignore-environment")

        if source is None:
            self.logger.debug("Not loading a dotenv file")
            return Skipped("no-file")

        path = file_exists(source.path)

        def read_file() -> bytes:
            with open(path, "rb") as f:
                return f.read()

        return self._read(f"file '{source.path}'", read_file)

    def _stdin_stream(self) -> BinaryIO:
        if self.stdin is not None:
            return self.stdin
        return sys.stdin.buffer

    def _read(self, origin: str, read: Callable[[], bytes]) -> Loaded:
        try:
            data = read()
        except OSError as e:
            raise EnvIOError(
                f"cannot read from {origin}: {e.strerror or e}",
                details={"origin": origin},
            ) from e

        environ = None if self.config.isolated else self.environ
        try:
            pairs = parse(data, environ=environ)
        except ParseError as e:
            if self.config.isolated:
                raise
            raise EnvLoadError(origin, self.config.overwrite, e) from e

        self.logger.debug("Loaded variables", origin=origin, count=len(pairs))
        return Loaded(
            variables=tuple(EnvironmentVariable(name, value) for name, value in pairs),
            origin=origin,
        )


__all__ = ["EnvLoader", "Loaded", "Skipped", "SourceResult", "stdin_is_piped"]
