# lambda_deploy/core/archive/base.py
"""Archive builder abstract base class"""

import logging
import stat
from abc import ABC, abstractmethod
from collections import OrderedDict
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Sequence, Union

import aiofiles
import aiofiles.os

from ...api.exceptions import MissingManifestEntryError, PackError
from ...constants import ENV_FILE_NAME, ENV_FILE_KEY, DEFAULT_FILE_MODE
from ...models.archive import ArchiveEntry
from ...utils.async_utils import sync_to_async
from ...utils.file_utils import normalize_entry, scan_directory, zip_date_time


class ArchiveBuilder(ABC):
    """Turns a manifest of project-relative paths into an archive buffer

    Subclasses only decide how the collected entries are written
    (``_write_archive``); manifest handling is shared.
    """

    format_name: str = ""
    extension: str = ""

    def __init__(self):
        self.logger = logging.getLogger(self.__class__.__name__)

    async def build(self,
                    project_root: Union[str, Path],
                    manifest: Sequence[str],
                    env_value: str) -> bytes:
        """
        Build the complete archive

        Args:
            project_root: Absolute project root directory
            manifest: Ordered files/directories relative to project root
            env_value: Value written as ``NODE_ENV=<value>`` into ``.env``

        Returns:
            Finalized archive bytes

        Raises:
            MissingManifestEntryError: If a manifest entry does not exist
            PackError: If a file cannot be read
        """
        project_root = Path(project_root)
        self.logger.info(f"Creating {self.format_name} archive from {list(manifest)}")

        entries: Dict[str, ArchiveEntry] = OrderedDict()
        for entry in manifest:
            await self._add_manifest_entry(project_root, entry, entries)

        if ENV_FILE_NAME in entries:
            self.logger.warning(
                f"Manifest provides {ENV_FILE_NAME}, replacing it with the generated one"
            )
            del entries[ENV_FILE_NAME]

        self.logger.debug(f"Adding {ENV_FILE_NAME} to archive")
        entries[ENV_FILE_NAME] = self.create_env_entry(env_value)

        self.logger.debug(f"Writing {len(entries)} entries to archive buffer")
        data = await self._write_archive(list(entries.values()))

        self.logger.info(f"Archive created ({len(entries)} entries, {len(data)} bytes)")
        return data

    @staticmethod
    def create_env_entry(env_value: str) -> ArchiveEntry:
        """Generated environment descriptor entry"""
        return ArchiveEntry(
            arcname=ENV_FILE_NAME,
            data=f"{ENV_FILE_KEY}={env_value}".encode("utf-8"),
            mode=DEFAULT_FILE_MODE,
            date_time=datetime.now().timetuple()[:6],
        )

    async def _add_manifest_entry(self,
                                  project_root: Path,
                                  entry: str,
                                  entries: Dict[str, ArchiveEntry]) -> None:
        """Classify one manifest entry and collect its files"""
        self.logger.debug(f"Adding file or directory to archive: {entry}")

        logical_path = normalize_entry(entry)
        local_path = project_root / logical_path if logical_path else project_root

        try:
            file_stat = await aiofiles.os.stat(local_path)
        except (FileNotFoundError, NotADirectoryError) as e:
            if await aiofiles.os.path.islink(local_path):
                self.logger.info(f"Skipping dangling symlink: {entry}")
                return
            self.logger.error(f"File or directory does not exist: {entry}")
            raise MissingManifestEntryError(entry, str(local_path)) from e
        except OSError as e:
            raise PackError(f"Cannot access {entry}: {e}") from e

        if stat.S_ISREG(file_stat.st_mode):
            entries.pop(logical_path, None)
            entries[logical_path] = await self._read_entry(local_path, logical_path, file_stat)

        elif stat.S_ISDIR(file_stat.st_mode):
            try:
                files, skipped = await sync_to_async(scan_directory)(local_path)
            except OSError as e:
                self.logger.error(f"Cannot read directory {entry}: {e}")
                raise PackError(f"Cannot read directory {entry}: {e}") from e

            for path in skipped:
                self.logger.info(f"Skipping file or directory: {path}")

            for path in files:
                relative = path.relative_to(local_path).as_posix()
                arcname = f"{logical_path}/{relative}" if logical_path else relative
                file_stat = await aiofiles.os.stat(path)
                entries.pop(arcname, None)
                entries[arcname] = await self._read_entry(path, arcname, file_stat)

        else:
            self.logger.info(f"Skipping file or directory: {entry}")

    async def _read_entry(self, path: Path, arcname: str, file_stat) -> ArchiveEntry:
        """Read one file into an archive entry"""
        try:
            async with aiofiles.open(path, 'rb') as f:
                data = await f.read()
        except OSError as e:
            raise PackError(f"Cannot read {path}: {e}") from e

        return ArchiveEntry(
            arcname=arcname,
            data=data,
            mode=stat.S_IMODE(file_stat.st_mode) or DEFAULT_FILE_MODE,
            date_time=zip_date_time(file_stat.st_mtime),
        )

    @abstractmethod
    async def _write_archive(self, entries: List[ArchiveEntry]) -> bytes:
        """
        Write entries into a finalized archive

        Args:
            entries: Entries in insertion order, logical paths unique

        Returns:
            Archive bytes
        """
        pass
