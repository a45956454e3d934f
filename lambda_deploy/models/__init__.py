"""Data models for lambda-deploy"""

from .request import DeployRequest
from .config import DeployConfig, FunctionConfig, EnvironmentConfig, AwsCredentials
from .context import DeployExecutionContext, full_function_name
from .result import DeployState, PublishedVersion, AliasBinding, DeployResult
from .archive import ArchiveEntry

__all__ = [
    # Request models
    "DeployRequest",

    # Config models
    "DeployConfig",
    "FunctionConfig",
    "EnvironmentConfig",
    "AwsCredentials",

    # Context models
    "DeployExecutionContext",
    "full_function_name",

    # Result models
    "DeployState",
    "PublishedVersion",
    "AliasBinding",
    "DeployResult",

    # Archive models
    "ArchiveEntry",
]
