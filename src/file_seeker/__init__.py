# src/file_seeker/__init__.py
"""Path validation and single-directory file lookup by extension."""

try:
    from importlib.metadata import PackageNotFoundError, version
    __version__ = version("file_seeker")
except PackageNotFoundError:
    __version__ = "0.1.0"  # keep in step with pyproject.toml

from .check_path import canonicalize, validate_directory, validate_file
from .errors import (
    JobsFileError,
    MissingExtensionError,
    NotAFileError,
    PathConversionError,
    PathResolutionError,
)
from .seek_file import extension_of, seek_file_by_extension

__all__ = [
    "__version__",
    "canonicalize",
    "validate_directory",
    "validate_file",
    "seek_file_by_extension",
    "extension_of",
    "JobsFileError",
    "MissingExtensionError",
    "NotAFileError",
    "PathConversionError",
    "PathResolutionError",
]
