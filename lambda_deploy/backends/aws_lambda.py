"""AWS Lambda backend implementation"""

import asyncio
import functools
import logging
from typing import Any, Dict, Optional

import boto3

from .base import FunctionBackend
from ..constants import LAMBDA_SERVICE_NAME
from ..models.config import AwsCredentials


class AwsLambdaBackend(FunctionBackend):
    """AWS Lambda implementation built on boto3"""

    def __init__(self, credentials: AwsCredentials, config: Optional[Dict[str, Any]] = None, client=None):
        """
        Initialize Lambda backend

        Args:
            credentials: Explicit AWS credentials, never the default session
            config: Extra options:
                - endpoint_url: Custom endpoint (e.g. local emulators)
            client: Pre-built boto3 Lambda client (tests)
        """
        super().__init__(config)
        self.credentials = credentials
        self.client = client
        self._owns_client = client is None
        self.logger = logging.getLogger(self.__class__.__name__)

    async def _do_initialize(self) -> None:
        """Create the Lambda client"""
        if self.client is not None:
            return

        session = boto3.session.Session(**self.credentials.to_client_kwargs())
        client_kwargs = {}
        if self.config.get('endpoint_url'):
            client_kwargs['endpoint_url'] = self.config['endpoint_url']

        self.client = session.client(LAMBDA_SERVICE_NAME, **client_kwargs)
        self.logger.debug(f"Created Lambda client for region {self.credentials.region}")

    async def publish_code(self, function_name: str, zip_file: bytes) -> Dict[str, Any]:
        """Upload code with UpdateFunctionCode(Publish=True)"""
        await self.initialize()
        return await self._call(
            self.client.update_function_code,
            FunctionName=function_name,
            Publish=True,
            ZipFile=zip_file,
        )

    async def update_alias(self,
                           function_name: str,
                           alias_name: str,
                           version: str) -> Dict[str, Any]:
        """Move alias with UpdateAlias"""
        await self.initialize()
        return await self._call(
            self.client.update_alias,
            FunctionName=function_name,
            Name=alias_name,
            FunctionVersion=version,
        )

    async def _call(self, method, **kwargs) -> Dict[str, Any]:
        # boto3 is synchronous, run in executor
        return await asyncio.get_running_loop().run_in_executor(
            None, functools.partial(method, **kwargs)
        )

    async def _do_close(self) -> None:
        # Injected clients belong to the caller
        if self._owns_client and self.client is not None:
            self.client.close()
            self.client = None
