"""Archive builder factory"""

from typing import Dict, List, Type

from .base import ArchiveBuilder
from .zip_builder import ZipArchiveBuilder


class ArchiveFactory:
    """Factory for creating archive builder instances"""

    # Registry of archive formats
    _builders: Dict[str, Type[ArchiveBuilder]] = {
        ZipArchiveBuilder.format_name: ZipArchiveBuilder,
    }

    @classmethod
    def create(cls, format_name: str, **options) -> ArchiveBuilder:
        """Create an archive builder

        Args:
            format_name: Archive format (e.g. "zip")
            **options: Builder specific options

        Returns:
            Archive builder instance

        Raises:
            ValueError: If the format is not supported
        """
        if format_name not in cls._builders:
            raise ValueError(f"Unsupported archive format: {format_name}")
        return cls._builders[format_name](**options)

    @classmethod
    def register_builder(cls, format_name: str, builder_class: Type[ArchiveBuilder]):
        """Register a new archive format

        Args:
            format_name: Archive format name
            builder_class: Builder class
        """
        cls._builders[format_name] = builder_class

    @classmethod
    def get_supported_formats(cls) -> List[str]:
        return list(cls._builders.keys())

    @classmethod
    def is_supported(cls, format_name: str) -> bool:
        return format_name in cls._builders
