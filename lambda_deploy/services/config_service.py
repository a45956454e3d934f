"""Configuration loading and resolution"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from ..api.exceptions import ConfigError
from ..constants import (
    ErrorCode,
    CONFIG_FILE_BASENAME,
    CREDENTIALS_FILE_BASENAME,
    CONFIG_FILE_EXTENSIONS,
)
from ..models import (
    AwsCredentials,
    DeployConfig,
    DeployExecutionContext,
    DeployRequest,
    EnvironmentConfig,
    FunctionConfig,
)


class ConfigService:
    """Loads deploy configuration and credentials from a config directory"""

    def __init__(self, config_dir: Union[str, Path]):
        """Initialize config service

        Args:
            config_dir: Directory holding deployConfig and deployCredentials
        """
        self.config_dir = Path(config_dir)
        self.logger = logging.getLogger(self.__class__.__name__)
        self._config: Optional[DeployConfig] = None

    @property
    def config(self) -> DeployConfig:
        """Get deploy configuration (lazy load)"""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    def find_file(self, basename: str) -> Optional[Path]:
        """Find ``<basename>.yaml|.yml|.json`` in the config directory"""
        for extension in CONFIG_FILE_EXTENSIONS:
            path = self.config_dir / f"{basename}{extension}"
            if path.is_file():
                return path
        return None

    def load_config(self) -> DeployConfig:
        """Load deploy configuration

        Returns:
            Loaded configuration

        Raises:
            ConfigError: If the file is missing or malformed
        """
        path = self.find_file(CONFIG_FILE_BASENAME)
        if path is None:
            raise ConfigError(
                f"Configuration file not found: {self.config_dir / CONFIG_FILE_BASENAME}"
                f"{{{','.join(CONFIG_FILE_EXTENSIONS)}}}"
            )

        self.logger.debug(f"Loading deploy configuration from {path}")
        return DeployConfig.from_dict(self._read_document(path))

    def load_credentials(self) -> AwsCredentials:
        """Load credentials, falling back to the AWS environment variables

        Raises:
            ConfigError: If no usable credentials are found
        """
        path = self.find_file(CREDENTIALS_FILE_BASENAME)
        if path is None:
            self.logger.debug("No credentials file, using AWS environment variables")
            return AwsCredentials.from_env()

        self.logger.debug(f"Loading credentials from {path}")
        return AwsCredentials.from_dict(self._read_document(path))

    def _read_document(self, path: Path) -> Dict[str, Any]:
        with open(path, 'r', encoding='utf-8') as f:
            content = f.read()

        # Simple environment variable expansion
        content = os.path.expandvars(content)

        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid configuration file {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Invalid configuration file {path}: expected a mapping")
        return data


class ConfigResolver:
    """Resolves a deploy request against the static configuration"""

    def __init__(self, config: DeployConfig, project_root: Union[str, Path]):
        self.config = config
        self.project_root = Path(project_root).resolve()

    def resolve(self, request: DeployRequest) -> DeployExecutionContext:
        """
        Build the execution context for one deploy

        Args:
            request: Validated deploy request

        Returns:
            DeployExecutionContext

        Raises:
            ConfigError: If the function or environment is missing or ambiguous
        """
        function = self.find_function(request.function_name)
        environment = self.find_environment(function, request.env_name)

        return DeployExecutionContext(
            function_name=function.function_name,
            env_name=environment.env_name,
            node_env_value=environment.resolved_node_env_value,
            live_alias_name=environment.live_alias_name,
            commit_hash=request.commit_hash,
            project_root=self.project_root,
            zip_contents=tuple(function.zip_contents),
        )

    def find_function(self, function_name: str) -> FunctionConfig:
        matches = [f for f in self.config.functions if f.function_name == function_name]
        if len(matches) > 1:
            raise ConfigError(
                f"Invalid configuration: multiple lambda functions named {function_name}",
                ErrorCode.FUNCTION_NOT_FOUND,
            )
        if not matches:
            raise ConfigError(
                f"Invalid configuration: no lambda function named {function_name}",
                ErrorCode.FUNCTION_NOT_FOUND,
            )
        return matches[0]

    def find_environment(self, function: FunctionConfig, env_name: str) -> EnvironmentConfig:
        matches = [e for e in function.environments if e.env_name == env_name]
        if len(matches) > 1:
            raise ConfigError(
                f"Invalid configuration: lambda function {function.function_name} "
                f"has multiple environments named {env_name}",
                ErrorCode.ENVIRONMENT_NOT_FOUND,
            )
        if not matches:
            raise ConfigError(
                f"Invalid configuration: lambda function {function.function_name} "
                f"has no environment named {env_name}",
                ErrorCode.ENVIRONMENT_NOT_FOUND,
            )
        return matches[0]
