"""Core functionality for lambda-deploy"""

from .archive import ArchiveBuilder, ZipArchiveBuilder, ArchiveFactory

__all__ = [
    "ArchiveBuilder",
    "ZipArchiveBuilder",
    "ArchiveFactory",
]
