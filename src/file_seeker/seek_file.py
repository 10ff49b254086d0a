# src/file_seeker/seek_file.py
import logging
from pathlib import Path
from typing import List, Optional

from .check_path import PathInput, validate_directory
from .errors import MissingExtensionError

logger = logging.getLogger(__name__)


def extension_of(file_name: str) -> Optional[str]:
    """
    Returns the part of file_name after the last dot, without the dot.

    Names without a dot, or whose only dot is the leading one (`.bashrc`),
    have no extension and give None. `archive.tar.gz` gives `gz`.
    """
    stem, dot, extension = file_name.rpartition(".")
    if not dot or not stem:
        return None
    return extension


def seek_file_by_extension(directory_path: PathInput, extension: str) -> List[Path]:
    """
    Lists the regular files directly inside directory_path whose extension is exactly `extension`.

    `extension` is given without the leading dot ("pdf", not ".pdf") and is
    compared case-sensitively. Subdirectories are not descended into. Symlinks
    count when they point at a regular file. The result is in no particular
    order and is empty when nothing matches.

    Raises:
        OSError / NotADirectoryError: directory_path does not validate as a directory.
        MissingExtensionError: `extension` is empty.
        OSError: the directory cannot be listed, or an entry cannot be stat-ed
            (Path.is_file() only treats missing entries as "not a file"; e.g.
            PermissionError on an entry propagates).
    """
    src_dir = validate_directory(directory_path)

    if not extension:
        raise MissingExtensionError()

    files: List[Path] = []
    for entry in src_dir.iterdir():
        # is_file() follows symlinks, so links to regular files are kept
        if entry.is_file() and extension_of(entry.name) == extension:
            files.append(entry)

    logger.debug(f"Found {len(files)} '.{extension}' file(s) in {src_dir}")
    return files
