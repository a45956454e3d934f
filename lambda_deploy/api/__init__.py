# lambda_deploy/api/__init__.py
"""API layer for lambda-deploy"""

from .deployer import Deployer, deploy
from .exceptions import (
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
    # Main classes
    "Deployer",

    # Convenience functions
    "deploy",

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
