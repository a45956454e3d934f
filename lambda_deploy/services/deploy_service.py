# lambda_deploy/services/deploy_service.py
"""Deploy service implementation

A deploy is a strictly sequential pipeline:

    IDLE -> ARCHIVING -> PUBLISHING -> ALIAS_MOVING -> COMPLETED

and any stage failure moves to FAILED. The alias is only touched after a
version was published. If the alias update fails, the new version stays
published but not live; nothing is rolled back.
"""

import logging
import time
from pathlib import Path
from typing import Optional, Union

from ..api.exceptions import (
    AliasUpdateFailedError,
    ConfigError,
    DeployError,
    InvalidRequestError,
)
from ..backends import BackendFactory, FunctionBackend
from ..constants import DEFAULT_ARCHIVE_FORMAT
from ..core.archive import ArchiveBuilder, ArchiveFactory
from ..models import (
    AliasBinding,
    AwsCredentials,
    DeployConfig,
    DeployExecutionContext,
    DeployRequest,
    DeployResult,
    DeployState,
    PublishedVersion,
    full_function_name,
)
from .alias_service import AliasMover
from .config_service import ConfigResolver, ConfigService
from .publish_service import FunctionPublisher


class DeployExecutionService:
    """Runs one deploy for one execution context (single use)"""

    def __init__(self,
                 context: DeployExecutionContext,
                 archive_builder: ArchiveBuilder,
                 publisher: FunctionPublisher,
                 alias_mover: AliasMover):
        """
        Initialize execution service

        Args:
            context: Resolved execution context
            archive_builder: Archive builder
            publisher: Function publisher
            alias_mover: Alias mover
        """
        self.context = context
        self.archive_builder = archive_builder
        self.publisher = publisher
        self.alias_mover = alias_mover
        self.state = DeployState.IDLE
        self.published_version: Optional[PublishedVersion] = None
        self.logger = logging.getLogger(self.__class__.__name__)

    async def deploy(self) -> DeployResult:
        """
        Archive, publish, then move the alias

        Returns:
            DeployResult: Function name, alias and the live version

        Raises:
            DeployError: If this instance has already been used
            MissingManifestEntryError: If archiving failed (nothing published)
            PublishFailedError: If publishing failed (alias untouched)
            AliasUpdateFailedError: If the alias update failed after publishing
        """
        if self.state is not DeployState.IDLE:
            raise DeployError(
                f"Deploy of {self.context.full_function_name} already ran "
                f"(state: {self.state.value}); create a new execution service"
            )

        start_time = time.time()
        context = self.context
        function_name = context.full_function_name

        try:
            self._transition(DeployState.ARCHIVING)
            archive = await self.archive_builder.build(
                context.project_root,
                context.zip_contents,
                context.node_env_value
            )

            self._transition(DeployState.PUBLISHING)
            self.published_version = await self.publisher.publish(function_name, archive)
            del archive

            self._transition(DeployState.ALIAS_MOVING)
            binding = await self.alias_mover.move_alias(
                function_name,
                context.live_alias_name,
                self.published_version.version
            )

            self._transition(DeployState.COMPLETED)

        except AliasUpdateFailedError as e:
            self.logger.error(
                f"Version {e.version} of {e.function_name} was published but alias "
                f"{e.alias_name} was not updated. Run 'set-alias' to make it live."
            )
            raise

        finally:
            if self.state is not DeployState.COMPLETED:
                self._transition(DeployState.FAILED)

        return DeployResult(
            function_name=function_name,
            alias_name=context.live_alias_name,
            function_version=binding.function_version,
            commit_hash=context.commit_hash,
            duration=time.time() - start_time,
        )

    def _transition(self, state: DeployState) -> None:
        self.logger.debug(f"{self.context.full_function_name}: {self.state.value} -> {state.value}")
        self.state = state


class DeployService:
    """Resolves deploy requests and runs them"""

    def __init__(self,
                 credentials: AwsCredentials,
                 config: DeployConfig,
                 project_root: Union[str, Path],
                 backend: Optional[FunctionBackend] = None,
                 archive_format: str = DEFAULT_ARCHIVE_FORMAT):
        """
        Initialize deploy service

        Args:
            credentials: Provider credentials
            config: Static deploy configuration
            project_root: Project root directory
            backend: Function backend (created from credentials if omitted)
            archive_format: Archive builder format
        """
        if not ArchiveFactory.is_supported(archive_format):
            raise ConfigError(
                f"Unsupported archive format: {archive_format} "
                f"(supported: {', '.join(ArchiveFactory.get_supported_formats())})"
            )

        self.credentials = credentials
        self.config = config
        self.project_root = Path(project_root)
        self.backend = backend
        self.archive_format = archive_format
        self.resolver = ConfigResolver(config, self.project_root)
        self.logger = logging.getLogger(self.__class__.__name__)

    async def deploy(self, request: DeployRequest) -> DeployResult:
        """
        Deploy one function/environment pair

        Args:
            request: Deploy request

        Returns:
            DeployResult

        Raises:
            InvalidRequestError: Before any other work, on a malformed request
            ConfigError: If the request does not match the configuration
            DeployToolError: Stage errors from the execution service
        """
        self.logger.info(f"Deploy Lambda function {request.to_dict()}")

        request.validate()
        context = self.resolver.resolve(request)

        backend = self._get_backend()
        async with backend:
            execution_service = self._create_execution_service(context, backend)
            result = await execution_service.deploy()

        self.logger.info(f"Deploy Lambda function completed successfully {result.to_dict()}")
        return result

    async def set_alias(self, function_name: str, env_name: str, version: str) -> AliasBinding:
        """
        Point the configured live alias at an existing version

        Used to finish a deploy whose alias update failed, or to go back to
        an older version.

        Args:
            function_name: Function name from the configuration
            env_name: Environment name from the configuration
            version: Published version to make live

        Returns:
            AliasBinding
        """
        if not function_name or not env_name or not version:
            raise InvalidRequestError(
                "Invalid request: function name, environment name and version are required"
            )

        function = self.resolver.find_function(function_name)
        environment = self.resolver.find_environment(function, env_name)

        backend = self._get_backend()
        async with backend:
            return await AliasMover(backend).move_alias(
                full_function_name(function.function_name, environment.env_name),
                environment.live_alias_name,
                version
            )

    def _get_backend(self) -> FunctionBackend:
        if self.backend is not None:
            return self.backend
        return BackendFactory.create(self.credentials)

    def _create_execution_service(self,
                                  context: DeployExecutionContext,
                                  backend: FunctionBackend) -> DeployExecutionService:
        return DeployExecutionService(
            context,
            ArchiveFactory.create(self.archive_format),
            FunctionPublisher(backend),
            AliasMover(backend)
        )


class DeployServiceFactory:
    """Creates a DeployService from files on disk"""

    @staticmethod
    def create(config_dir: Union[str, Path],
               project_root: Union[str, Path],
               archive_format: str = DEFAULT_ARCHIVE_FORMAT,
               backend: Optional[FunctionBackend] = None) -> DeployService:
        """
        Args:
            config_dir: Directory with deployConfig and (optionally) deployCredentials
            project_root: Project root directory
            archive_format: Archive builder format
            backend: Function backend override

        Returns:
            DeployService
        """
        config_service = ConfigService(config_dir)
        credentials = config_service.load_credentials() if backend is None else None
        return DeployService(
            credentials,
            config_service.config,
            project_root,
            backend=backend,
            archive_format=archive_format
        )
