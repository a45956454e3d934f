"""Archive entry model"""

from dataclasses import dataclass
from typing import Optional, Tuple

from ..constants import DEFAULT_FILE_MODE


@dataclass(frozen=True)
class ArchiveEntry:
    """A single member of a deploy archive"""

    arcname: str
    data: bytes
    mode: int = DEFAULT_FILE_MODE
    date_time: Optional[Tuple[int, int, int, int, int, int]] = None

    @property
    def size(self) -> int:
        return len(self.data)
