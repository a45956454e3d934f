"""File operation utilities"""

import os
import posixpath
import stat
import time
from pathlib import Path
from typing import List, Tuple

from ..api.exceptions import ConfigError
from ..constants import ZIP_MIN_YEAR


def format_size(size: int) -> str:
    """
    Format file size in human-readable format

    Args:
        size: Size in bytes

    Returns:
        Formatted size string
    """
    for unit in ['B', 'KB', 'MB', 'GB', 'TB']:
        if size < 1024.0:
            return f"{size:.2f} {unit}"
        size /= 1024.0
    return f"{size:.2f} PB"


def normalize_entry(entry: str) -> str:
    """
    Normalize a manifest entry to a POSIX path relative to the project root

    ``./index.js`` becomes ``index.js``, ``lib/`` becomes ``lib`` and
    ``.`` (the project root itself) becomes an empty string.

    Args:
        entry: Manifest entry as written in the configuration

    Returns:
        Normalized relative path

    Raises:
        ConfigError: If the entry is absolute or escapes the project root
    """
    if not entry:
        raise ConfigError("Invalid configuration: empty entry in zipContents")

    if posixpath.isabs(entry) or os.path.isabs(entry):
        raise ConfigError(
            f"Invalid configuration: zipContents entry '{entry}' must be relative to the project root"
        )

    normalized = posixpath.normpath(entry)
    if normalized == ".." or normalized.startswith("../"):
        raise ConfigError(
            f"Invalid configuration: zipContents entry '{entry}' is outside the project root"
        )

    return "" if normalized == "." else normalized


def _raise_walk_error(error: OSError) -> None:
    raise error


def scan_directory(directory: Path) -> Tuple[List[Path], List[Path]]:
    """
    Recursively list regular files below a directory

    Directory and file names are visited in sorted order so the result is
    stable between runs. Symlinks are followed; a symlinked directory that
    points back at one of its own ancestors is skipped.

    Args:
        directory: Directory to scan

    Returns:
        Tuple of (regular files, skipped paths)

    Raises:
        OSError: If a directory below ``directory`` cannot be listed
    """
    files = []
    skipped = []
    # Real paths of each walked directory and its ancestors
    ancestors = {str(directory): {os.path.realpath(directory)}}

    for root, dirnames, filenames in os.walk(directory, onerror=_raise_walk_error,
                                             followlinks=True):
        root_path = Path(root)
        chain = ancestors.pop(root)

        kept = []
        for name in sorted(dirnames):
            real_path = os.path.realpath(root_path / name)
            if real_path in chain:
                skipped.append(root_path / name)
                continue
            ancestors[os.path.join(root, name)] = chain | {real_path}
            kept.append(name)
        dirnames[:] = kept

        for name in sorted(filenames):
            path = root_path / name
            try:
                mode = os.stat(path).st_mode
            except OSError:
                # Dangling symlink
                skipped.append(path)
                continue

            if stat.S_ISREG(mode):
                files.append(path)
            else:
                skipped.append(path)

    return files, skipped


def zip_date_time(timestamp: float) -> Tuple[int, int, int, int, int, int]:
    """
    Convert a POSIX timestamp to a zip member date_time tuple

    Zip cannot store dates before 1980, earlier timestamps are clamped.

    Args:
        timestamp: Seconds since the epoch

    Returns:
        (year, month, day, hour, minute, second)
    """
    date_time = time.localtime(timestamp)[:6]
    if date_time[0] < ZIP_MIN_YEAR:
        return (ZIP_MIN_YEAR, 1, 1, 0, 0, 0)
    return date_time
