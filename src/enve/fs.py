"""Path checks shared by the source resolver and the configuration."""

import stat
from pathlib import Path
from typing import Union

from enve.exceptions import InvalidDirectoryError, NotAFileError, PathNotFoundError

PathLike = Union[str, Path]


def file_exists(file_path: PathLike) -> Path:
    """Ensure ``file_path`` names an accessible regular file.

    Returns:
        The path as a Path object

    Raises:
        PathNotFoundError: If the path is empty or cannot be accessed
        NotAFileError: If the path is a directory
    """
    if not str(file_path):
        raise PathNotFoundError("file path was empty or not provided")

    path = Path(file_path)
    try:
        info = path.stat()
    except OSError as e:
        raise PathNotFoundError(
            f"cannot access file '{file_path}': {e.strerror or e}",
            details={"path": str(file_path)},
        ) from e

    if stat.S_ISDIR(info.st_mode):
        raise NotAFileError(
            f"file path is a directory: '{file_path}'",
            details={"path": str(file_path)},
        )
    return path


def dir_exists(dir_path: PathLike) -> Path:
    """Ensure ``dir_path`` names an accessible directory.

    Raises:
        InvalidDirectoryError: If the path is empty, cannot be accessed or is a file
    """
    if not str(dir_path):
        raise InvalidDirectoryError("directory path was empty or not provided")

    path = Path(dir_path)
    try:
        path.stat()
    except OSError as e:
        raise InvalidDirectoryError(
            f"cannot access directory '{dir_path}': {e.strerror or e}",
            details={"path": str(dir_path)},
        ) from e

    if not path.is_dir():
        raise InvalidDirectoryError(
            f"directory path is a file: '{dir_path}'",
            details={"path": str(dir_path)},
        )
    return path
