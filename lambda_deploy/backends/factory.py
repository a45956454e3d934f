"""Function backend factory"""

from typing import Any, Dict, List, Optional, Type

from .base import FunctionBackend
from .aws_lambda import AwsLambdaBackend
from ..models.config import AwsCredentials


class BackendFactory:
    """Factory for creating function backend instances"""

    # Registry of function providers
    _backends: Dict[str, Type[FunctionBackend]] = {
        "aws": AwsLambdaBackend,
    }

    @classmethod
    def create(cls,
               credentials: AwsCredentials,
               config: Optional[Dict[str, Any]] = None) -> FunctionBackend:
        """Create backend for the credentials' provider

        Args:
            credentials: Provider credentials
            config: Backend specific options

        Returns:
            Function backend instance

        Raises:
            ValueError: If the provider is not supported
        """
        provider = credentials.provider
        if provider not in cls._backends:
            raise ValueError(f"Unsupported function provider: {provider}")
        return cls._backends[provider](credentials, config)

    @classmethod
    def register_backend(cls, provider: str, backend_class: Type[FunctionBackend]):
        """Register a new provider

        Args:
            provider: Provider name
            backend_class: Backend class taking (credentials, config)
        """
        cls._backends[provider] = backend_class

    @classmethod
    def get_supported_providers(cls) -> List[str]:
        return list(cls._backends.keys())
