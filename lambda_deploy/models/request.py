"""Deploy request model"""

from dataclasses import dataclass
from typing import Any, Dict

from ..api.exceptions import InvalidRequestError
from ..constants import COMMIT_HASH_LENGTH


@dataclass(frozen=True)
class DeployRequest:
    """What the caller asked to deploy"""

    function_name: str
    env_name: str
    commit_hash: str

    def validate(self) -> 'DeployRequest':
        """Check the request before any config, filesystem or network access

        Returns:
            The request itself, for chaining

        Raises:
            InvalidRequestError: If a field is missing or malformed
        """
        if not self.function_name:
            raise InvalidRequestError("Invalid request: function name is required")
        if not self.env_name:
            raise InvalidRequestError("Invalid request: environment name is required")
        if not self.commit_hash or len(self.commit_hash) != COMMIT_HASH_LENGTH:
            raise InvalidRequestError(
                f"Invalid request: commit hash must be a full length git hash "
                f"of {COMMIT_HASH_LENGTH} characters"
            )
        return self

    def to_dict(self) -> Dict[str, Any]:
        """Convert to wire format"""
        return {
            "functionName": self.function_name,
            "envName": self.env_name,
            "commitHash": self.commit_hash,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'DeployRequest':
        """Create from wire format"""
        return cls(
            function_name=data.get("functionName") or "",
            env_name=data.get("envName") or "",
            commit_hash=data.get("commitHash") or "",
        )
