# lambda_deploy/services/publish_service.py
"""Function publishing service"""

import logging

from ..api.exceptions import PublishFailedError
from ..backends.base import FunctionBackend
from ..models import PublishedVersion
from ..utils.file_utils import format_size


class FunctionPublisher:
    """Publishes archive bytes as a new immutable function version"""

    def __init__(self, backend: FunctionBackend):
        """
        Initialize publisher

        Args:
            backend: Function backend used for the upload
        """
        self.backend = backend
        self.logger = logging.getLogger(self.__class__.__name__)

    async def publish(self, function_name: str, archive: bytes) -> PublishedVersion:
        """
        Upload the archive and publish a new version

        Every successful call creates a new version; earlier versions are
        left untouched. No retry is attempted.

        Args:
            function_name: Fully-qualified function name
            archive: Complete archive bytes

        Returns:
            PublishedVersion: The new version

        Raises:
            PublishFailedError: On any backend failure
        """
        self.logger.info(
            f"Publishing new code for {function_name} ({format_size(len(archive))})"
        )

        try:
            response = await self.backend.publish_code(function_name, archive)
            published = PublishedVersion.from_response(function_name, response)
        except Exception as e:
            self.logger.error(f"Publishing {function_name} failed: {e}")
            raise PublishFailedError(function_name, e) from e

        self.logger.info(
            f"Published version {published.version} of {published.function_name}"
        )
        return published
