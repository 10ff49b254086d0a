# src/file_seeker/errors.py
"""Error types raised by file_seeker.

Everything about a path that cannot be resolved or read is an ``OSError``
(``IOError`` is the same class), so callers can catch the whole family at once
or branch on the concrete subclass.
"""


class PathResolutionError(OSError):
    """The path could not be resolved for a reason the OS did not report (e.g. a symlink loop)."""


class PathConversionError(OSError):
    """The canonical path cannot be represented as text."""


class NotAFileError(OSError):
    """The path exists but is not a regular file."""

    def __init__(self, path: str):
        super().__init__(f"{path} is not a file")
        self.filename = path

    def __str__(self):
        return f"{self.filename} is not a file"


class MissingExtensionError(ValueError):
    """An empty extension filter was given."""

    def __init__(self, message: str = "Extension is not specified."):
        super().__init__(message)


class JobsFileError(Exception):
    """The batch jobs file is missing, unparsable or invalid."""
