"""Running the trailing command with the resolved environment."""

from __future__ import annotations

import os
import shutil
import subprocess
from pathlib import Path
from typing import Mapping, Optional, Sequence

from enve.env.variables import EnvironmentSet
from enve.exceptions import CommandError, ExecutableNotFoundError, InvalidArgumentError
from enve.logger import Logger, get_logger


def find_executable(name: str, environ: Optional[Mapping[str, str]] = None) -> str:
    """Resolve ``name`` against the PATH of ``environ`` (default: os.environ).

    Raises:
        ExecutableNotFoundError: If no executable matches
    """
    env = os.environ if environ is None else environ
    search_path = env.get("PATH", os.defpath)
    found = shutil.which(name, path=search_path)
    if found is None:
        if os.sep in name:
            reason = "no such executable file"
        else:
            reason = f"executable file not found in PATH ({search_path})"
        raise ExecutableNotFoundError(
            f"executable '{name}' was not found: {reason}",
            details={"command": name},
        )
    return found


def launch(
    command: Sequence[str],
    environment: EnvironmentSet,
    working_directory: Optional[Path] = None,
    fresh_environment: bool = False,
    environ: Optional[Mapping[str, str]] = None,
    logger: Optional[Logger] = None,
) -> int:
    """Run ``command`` and wait for it.

    The child shares stdin, stdout and stderr with this process.

    Args:
        command: Executable followed by its arguments
        environment: Resolved variables
        working_directory: Directory to run in (already validated)
        fresh_environment: Give the child exactly ``environment`` and nothing else
        environ: Merged ambient environment (default: os.environ, inherited
            implicitly)

    Returns:
        The child's exit code; 128 + N when it was killed by signal N

    Raises:
        InvalidArgumentError: If ``command`` is empty
        ExecutableNotFoundError: If the executable cannot be found
        CommandError: If the child cannot be started
    """
    logger = logger or get_logger()

    if not command:
        raise InvalidArgumentError("no command was provided")

    executable = find_executable(command[0], environ)

    if fresh_environment:
        child_env: Optional[dict] = environment.to_dict()
    elif environ is None or environ is os.environ:
        child_env = None
    else:
        child_env = dict(environ)

    logger.debug(
        "Launching command",
        executable=executable,
        cwd=str(working_directory) if working_directory else None,
        fresh=fresh_environment,
    )

    try:
        completed = subprocess.run(
            [executable, *command[1:]],
            cwd=working_directory,
            env=child_env,
        )
    except OSError as e:
        raise CommandError(
            f"cannot run '{command[0]}': {e.strerror or e}",
            details={"command": list(command)},
        ) from e

    code = completed.returncode
    if code < 0:
        code = 128 - code

    logger.debug("Command finished", exit_code=code)
    return code


__all__ = ["find_executable", "launch"]
