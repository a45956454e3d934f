# lambda_deploy/core/archive/zip_builder.py
"""Zip archive builder"""

import io
import stat
import zipfile
from typing import List

from .base import ArchiveBuilder
from ...constants import ZIP_MIN_YEAR
from ...models.archive import ArchiveEntry
from ...utils.async_utils import sync_to_async

DEFAULT_COMPRESSION_LEVEL = 6


class ZipArchiveBuilder(ArchiveBuilder):
    """Builds deflate-compressed zip archives in memory"""

    format_name = "zip"
    extension = ".zip"

    def __init__(self, compression_level: int = DEFAULT_COMPRESSION_LEVEL):
        super().__init__()
        if not 0 <= compression_level <= 9:
            raise ValueError(f"Invalid zip compression level: {compression_level}")
        self.compression_level = compression_level

    async def _write_archive(self, entries: List[ArchiveEntry]) -> bytes:
        return await sync_to_async(self._write_zip)(entries)

    def _write_zip(self, entries: List[ArchiveEntry]) -> bytes:
        buffer = io.BytesIO()

        with zipfile.ZipFile(buffer, 'w',
                             compression=zipfile.ZIP_DEFLATED,
                             compresslevel=self.compression_level) as zf:
            for entry in entries:
                info = zipfile.ZipInfo(
                    entry.arcname,
                    date_time=entry.date_time or (ZIP_MIN_YEAR, 1, 1, 0, 0, 0)
                )
                info.compress_type = zipfile.ZIP_DEFLATED
                info.external_attr = ((stat.S_IFREG | entry.mode) & 0xFFFF) << 16
                zf.writestr(info, entry.data, compresslevel=self.compression_level)

        return buffer.getvalue()
