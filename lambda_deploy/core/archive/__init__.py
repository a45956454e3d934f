"""Archive builders for lambda-deploy"""

from .base import ArchiveBuilder
from .zip_builder import ZipArchiveBuilder
from .factory import ArchiveFactory

__all__ = [
    'ArchiveBuilder',
    'ZipArchiveBuilder',
    'ArchiveFactory',
]
