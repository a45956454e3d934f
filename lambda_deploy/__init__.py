"""Lambda Deploy - Package a project and publish it to an AWS Lambda alias.

Builds a zip archive from a configured list of files and directories,
publishes it as a new function version and moves the live alias to it.
"""

from .__version__ import __version__, __version_info__, __license__

# Core API
from .api.deployer import Deployer, deploy

# Services
from .services import DeployService, DeployServiceFactory, DeployExecutionService

# Data models
from .models import (
    DeployRequest,
    DeployConfig,
    DeployExecutionContext,
    DeployResult,
    DeployState,
    PublishedVersion,
    AliasBinding,
)

# Exceptions
from .api.exceptions import (
    DeployToolError,
    ValidationError,
    InvalidRequestError,
    ConfigError,
    PackError,
    MissingManifestEntryError,
    PublishError,
    PublishFailedError,
    DeployError,
    AliasUpdateFailedError,
)

__all__ = [
    # Version information
    "__version__",
    "__version_info__",
    "__license__",

    # Main classes
    "Deployer",
    "DeployService",
    "DeployServiceFactory",
    "DeployExecutionService",

    # Core API functions
    "deploy",

    # Data models
    "DeployRequest",
    "DeployConfig",
    "DeployExecutionContext",
    "DeployResult",
    "DeployState",
    "PublishedVersion",
    "AliasBinding",

    # Exceptions
    "DeployToolError",
    "ValidationError",
    "InvalidRequestError",
    "ConfigError",
    "PackError",
    "MissingManifestEntryError",
    "PublishError",
    "PublishFailedError",
    "DeployError",
    "AliasUpdateFailedError",
]
