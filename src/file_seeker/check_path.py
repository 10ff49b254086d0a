# src/file_seeker/check_path.py
import errno
import logging
import os
from pathlib import Path
from typing import Union

from .errors import NotAFileError, PathConversionError, PathResolutionError

logger = logging.getLogger(__name__)

PathInput = Union[str, bytes, "os.PathLike[str]", "os.PathLike[bytes]"]


def canonicalize(src_path: PathInput) -> Path:
    """
    Resolves src_path to its absolute form with symlinks and `.`/`..` removed.

    Raises:
        OSError: the path does not exist or cannot be resolved
            (FileNotFoundError, PermissionError, PathResolutionError, ...).
            An empty path is reported as FileNotFoundError and a path running
            through a regular file as PathResolutionError, never NotADirectoryError.
        PathConversionError: the resolved path cannot be represented as text.
    """
    path_str = os.fsdecode(src_path)
    if not path_str:
        # Path("") would silently become "."
        raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), path_str)

    try:
        full_path = Path(path_str).resolve(strict=True)
    except NotADirectoryError as e:
        # a parent component is a regular file, so the path itself does not exist
        raise PathResolutionError(errno.ENOTDIR, e.strerror or str(e), path_str) from e
    except RuntimeError as e:
        # Python < 3.13 reports symlink loops as RuntimeError
        raise PathResolutionError(errno.ELOOP, str(e), path_str) from e

    _get_path_str(full_path)
    logger.debug(f"Resolved {path_str!r} -> {full_path}")
    return full_path


def _get_path_str(src_path: Path) -> str:
    """Returns src_path as text, or raises PathConversionError if it holds undecodable bytes."""
    path_str = str(src_path)
    try:
        path_str.encode("utf-8")
    except UnicodeEncodeError as e:
        raise PathConversionError(f"Failed to convert path to string: {path_str!r}") from e
    return path_str


def validate_directory(directory_path: PathInput) -> Path:
    """Canonicalizes directory_path and checks that it names an existing directory."""
    full_path = canonicalize(directory_path)
    if not full_path.is_dir():
        raise NotADirectoryError(errno.ENOTDIR, os.strerror(errno.ENOTDIR), str(full_path))
    return full_path


def validate_file(file_path: PathInput) -> Path:
    """Canonicalizes file_path and checks that it names an existing regular file."""
    full_path = canonicalize(file_path)
    if not full_path.is_file():
        raise NotAFileError(str(full_path))
    return full_path
