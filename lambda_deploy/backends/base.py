# lambda_deploy/backends/base.py
"""Function backend abstract base class"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional


class FunctionBackend(ABC):
    """Abstract base class for serverless function providers"""

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """
        Initialize function backend

        Args:
            config: Backend-specific configuration
        """
        self.config = config or {}
        self._initialized = False

    async def initialize(self) -> None:
        """Initialize backend (e.g., create SDK clients)"""
        if not self._initialized:
            await self._do_initialize()
            self._initialized = True

    @abstractmethod
    async def _do_initialize(self) -> None:
        """Actual initialization logic to be implemented by subclasses"""
        pass

    @abstractmethod
    async def publish_code(self, function_name: str, zip_file: bytes) -> Dict[str, Any]:
        """
        Upload new code and publish it as a new immutable version

        Args:
            function_name: Fully-qualified function name
            zip_file: Archive bytes

        Returns:
            Provider response, at least ``Version``
        """
        pass

    @abstractmethod
    async def update_alias(self,
                           function_name: str,
                           alias_name: str,
                           version: str) -> Dict[str, Any]:
        """
        Point an alias at a version

        Args:
            function_name: Fully-qualified function name
            alias_name: Alias to move
            version: Target version

        Returns:
            Provider response, at least ``Name`` and ``FunctionVersion``
        """
        pass

    async def close(self) -> None:
        """Close backend connections"""
        if self._initialized:
            await self._do_close()
            self._initialized = False

    async def _do_close(self) -> None:
        """Actual cleanup logic to be implemented by subclasses"""
        pass

    async def __aenter__(self):
        """Async context manager entry"""
        await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit"""
        await self.close()
