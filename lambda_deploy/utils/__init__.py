"""Utility functions for lambda-deploy"""

from .async_utils import run_async, sync_to_async
from .file_utils import (
    format_size,
    normalize_entry,
    scan_directory,
    zip_date_time,
)

__all__ = [
    "run_async",
    "sync_to_async",
    "format_size",
    "normalize_entry",
    "scan_directory",
    "zip_date_time",
]
