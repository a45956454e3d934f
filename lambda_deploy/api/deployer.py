"""Deployer API for programmatic deploys"""

from pathlib import Path
from typing import Optional, Union

from ..backends import FunctionBackend
from ..constants import DEFAULT_ARCHIVE_FORMAT
from ..models import AliasBinding, DeployRequest, DeployResult
from ..services import DeployService, DeployServiceFactory
from ..utils.async_utils import run_async


class Deployer:
    """Synchronous facade over DeployService"""

    def __init__(self,
                 config_dir: Union[str, Path],
                 project_root: Union[str, Path],
                 archive_format: str = DEFAULT_ARCHIVE_FORMAT,
                 backend: Optional[FunctionBackend] = None):
        """
        Initialize deployer

        Args:
            config_dir: Directory with deployConfig and deployCredentials
            project_root: Project root the manifest is relative to
            archive_format: Archive format
            backend: Function backend override

        Raises:
            ConfigError: If configuration or credentials cannot be loaded
        """
        self.service: DeployService = DeployServiceFactory.create(
            config_dir,
            project_root,
            archive_format=archive_format,
            backend=backend
        )

    def deploy(self, function_name: str, env_name: str, commit_hash: str) -> DeployResult:
        """
        Deploy a function to an environment

        Args:
            function_name: Function name from the configuration
            env_name: Environment name from the configuration
            commit_hash: Full 40 character commit hash

        Returns:
            DeployResult: Deploy result

        Raises:
            InvalidRequestError: If the request is malformed
            ConfigError: If the request does not match the configuration
            MissingManifestEntryError: If a manifest entry is missing
            PublishFailedError: If publishing failed
            AliasUpdateFailedError: If the alias update failed after publishing
        """
        request = DeployRequest(
            function_name=function_name,
            env_name=env_name,
            commit_hash=commit_hash
        )
        return run_async(self.service.deploy(request))

    def set_alias(self, function_name: str, env_name: str, version: str) -> AliasBinding:
        """
        Point the configured live alias at an existing version

        Raises:
            AliasUpdateFailedError: If the alias update failed
        """
        return run_async(self.service.set_alias(function_name, env_name, version))


def deploy(function_name: str,
           env_name: str,
           commit_hash: str,
           config_dir: Union[str, Path],
           project_root: Union[str, Path],
           **options) -> DeployResult:
    """
    Convenience function for a single deploy

    Args:
        function_name: Function name from the configuration
        env_name: Environment name from the configuration
        commit_hash: Full 40 character commit hash
        config_dir: Configuration directory
        project_root: Project root
        **options: Passed to Deployer (archive_format, backend)

    Returns:
        DeployResult: Deploy result
    """
    deployer = Deployer(config_dir, project_root, **options)
    return deployer.deploy(function_name, env_name, commit_hash)
