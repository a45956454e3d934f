# lambda_deploy/backends/__init__.py
"""Function backends for lambda-deploy"""

from .base import FunctionBackend
from .aws_lambda import AwsLambdaBackend
from .factory import BackendFactory

__all__ = [
    'FunctionBackend',
    'AwsLambdaBackend',
    'BackendFactory',
]
