# lambda_deploy/services/__init__.py
"""Business logic services for lambda-deploy"""

from .publish_service import FunctionPublisher
from .alias_service import AliasMover
from .config_service import ConfigService, ConfigResolver
from .deploy_service import DeployExecutionService, DeployService, DeployServiceFactory

__all__ = [
    "FunctionPublisher",
    "AliasMover",
    "ConfigService",
    "ConfigResolver",
    "DeployExecutionService",
    "DeployService",
    "DeployServiceFactory",
]
