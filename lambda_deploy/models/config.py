"""Configuration data models"""

import os
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..api.exceptions import ConfigError
from ..constants import (
    ErrorCode,
    ENV_AWS_ACCESS_KEY,
    ENV_AWS_SECRET_KEY,
    ENV_AWS_SESSION_TOKEN,
    ENV_AWS_REGIONS,
)


def _require(data: Dict[str, Any], key: str, where: str) -> Any:
    """Fetch a mandatory key or raise ConfigError"""
    if not isinstance(data, dict):
        raise ConfigError(f"Invalid configuration: {where} must be a mapping")
    value = data.get(key)
    if value is None or value == "":
        raise ConfigError(f"Invalid configuration: {where} is missing '{key}'")
    return value


@dataclass
class EnvironmentConfig:
    """One deploy environment of a function"""

    env_name: str
    live_alias_name: str
    node_env_value: Optional[str] = None

    @property
    def resolved_node_env_value(self) -> str:
        """NODE_ENV value, defaulting to the environment name"""
        return self.node_env_value or self.env_name

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        data = {
            "envName": self.env_name,
            "liveAliasName": self.live_alias_name,
        }
        if self.node_env_value:
            data["nodeEnvValue"] = self.node_env_value
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'EnvironmentConfig':
        """Create from dictionary"""
        return cls(
            env_name=str(_require(data, "envName", "environment")),
            live_alias_name=str(_require(data, "liveAliasName", "environment")),
            node_env_value=data.get("nodeEnvValue"),
        )


@dataclass
class FunctionConfig:
    """Packaging rules and environments for one logical function"""

    function_name: str
    zip_contents: List[str] = field(default_factory=list)
    environments: List[EnvironmentConfig] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "functionName": self.function_name,
            "zipContents": list(self.zip_contents),
            "environments": [env.to_dict() for env in self.environments],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'FunctionConfig':
        """Create from dictionary"""
        name = str(_require(data, "functionName", "lambda function"))

        zip_contents = data.get("zipContents", [])
        if not isinstance(zip_contents, list) or not all(isinstance(e, str) for e in zip_contents):
            raise ConfigError(
                f"Invalid configuration: zipContents of {name} must be a list of paths"
            )

        environments = data.get("environments", [])
        if not isinstance(environments, list):
            raise ConfigError(
                f"Invalid configuration: environments of {name} must be a list"
            )

        return cls(
            function_name=name,
            zip_contents=zip_contents,
            environments=[EnvironmentConfig.from_dict(env) for env in environments],
        )


@dataclass
class DeployConfig:
    """Static deploy configuration (all functions)"""

    functions: List[FunctionConfig] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {"lambdaFunctions": [f.to_dict() for f in self.functions]}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'DeployConfig':
        """Create from dictionary"""
        functions = _require(data, "lambdaFunctions", "deploy configuration")
        if not isinstance(functions, list):
            raise ConfigError("Invalid configuration: lambdaFunctions must be a list")
        return cls(functions=[FunctionConfig.from_dict(f) for f in functions])


@dataclass
class AwsCredentials:
    """Explicit AWS credentials for the Lambda client"""

    access_key_id: str
    secret_access_key: str = field(repr=False)
    region: str
    session_token: Optional[str] = field(default=None, repr=False)
    provider: str = "aws"

    def to_client_kwargs(self) -> Dict[str, Any]:
        """Keyword arguments for a boto3 session"""
        kwargs = {
            "aws_access_key_id": self.access_key_id,
            "aws_secret_access_key": self.secret_access_key,
            "region_name": self.region,
        }
        if self.session_token:
            kwargs["aws_session_token"] = self.session_token
        return kwargs

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AwsCredentials':
        """Create from ``{awsCredentials: {...}}`` or the inner mapping"""
        if isinstance(data, dict) and "awsCredentials" in data:
            data = data["awsCredentials"]
        try:
            return cls(
                access_key_id=str(_require(data, "accessKeyId", "awsCredentials")),
                secret_access_key=str(_require(data, "secretAccessKey", "awsCredentials")),
                region=str(_require(data, "region", "awsCredentials")),
                session_token=data.get("sessionToken"),
            )
        except ConfigError as e:
            raise ConfigError(str(e), ErrorCode.CREDENTIALS_MISSING) from e

    @classmethod
    def from_env(cls, environ: Optional[Dict[str, str]] = None) -> 'AwsCredentials':
        """Create from the standard AWS environment variables"""
        environ = os.environ if environ is None else environ

        region = None
        for name in ENV_AWS_REGIONS:
            if environ.get(name):
                region = environ[name]
                break

        access_key = environ.get(ENV_AWS_ACCESS_KEY)
        secret_key = environ.get(ENV_AWS_SECRET_KEY)
        if not all([access_key, secret_key, region]):
            raise ConfigError(
                "No credentials file found and AWS credentials are not set in the "
                f"environment ({ENV_AWS_ACCESS_KEY}, {ENV_AWS_SECRET_KEY}, "
                f"{' or '.join(ENV_AWS_REGIONS)})",
                ErrorCode.CREDENTIALS_MISSING,
            )

        return cls(
            access_key_id=access_key,
            secret_access_key=secret_key,
            region=region,
            session_token=environ.get(ENV_AWS_SESSION_TOKEN),
        )
