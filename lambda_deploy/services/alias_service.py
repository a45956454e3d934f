"""Alias update service"""

import logging

from ..api.exceptions import AliasUpdateFailedError
from ..backends.base import FunctionBackend
from ..constants import EMOJI_ARROW
from ..models import AliasBinding


class AliasMover:
    """Repoints a function alias at a published version"""

    def __init__(self, backend: FunctionBackend):
        self.backend = backend
        self.logger = logging.getLogger(self.__class__.__name__)

    async def move_alias(self, function_name: str, alias_name: str, version: str) -> AliasBinding:
        """
        Point ``alias_name`` of ``function_name`` at ``version``

        Repeating the call with the same arguments gives the same binding.

        Raises:
            AliasUpdateFailedError: On any backend failure
        """
        self.logger.info(f"Updating alias {alias_name} of {function_name} {EMOJI_ARROW} {version}")

        try:
            response = await self.backend.update_alias(function_name, alias_name, version)
            binding = AliasBinding.from_response(function_name, response)
        except Exception as e:
            self.logger.error(f"Updating alias {alias_name} of {function_name} failed: {e}")
            raise AliasUpdateFailedError(function_name, alias_name, version, e) from e

        self.logger.info(
            f"Alias {binding.alias_name} of {function_name} now points at "
            f"version {binding.function_version}"
        )
        return binding
