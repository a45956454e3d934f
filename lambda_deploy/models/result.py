"""Operation result models"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


class DeployState(Enum):
    """Deploy orchestrator state"""
    IDLE = "idle"
    ARCHIVING = "archiving"
    PUBLISHING = "publishing"
    ALIAS_MOVING = "alias_moving"
    COMPLETED = "completed"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self in (DeployState.COMPLETED, DeployState.FAILED)


@dataclass(frozen=True)
class PublishedVersion:
    """Immutable function version created by a publish"""

    function_name: str
    version: str
    code_sha256: Optional[str] = None
    code_size: Optional[int] = None

    @classmethod
    def from_response(cls, function_name: str, response: Dict[str, Any]) -> 'PublishedVersion':
        """Create from an UpdateFunctionCode response"""
        return cls(
            function_name=response.get("FunctionName") or function_name,
            version=str(response["Version"]),
            code_sha256=response.get("CodeSha256"),
            code_size=response.get("CodeSize"),
        )


@dataclass(frozen=True)
class AliasBinding:
    """Alias pointer after an update"""

    function_name: str
    alias_name: str
    function_version: str
    alias_arn: Optional[str] = None

    @classmethod
    def from_response(cls, function_name: str, response: Dict[str, Any]) -> 'AliasBinding':
        """Create from an UpdateAlias response"""
        return cls(
            function_name=function_name,
            alias_name=response["Name"],
            function_version=str(response["FunctionVersion"]),
            alias_arn=response.get("AliasArn"),
        )


@dataclass(frozen=True)
class DeployResult:
    """Result of a successful deploy"""

    function_name: str
    alias_name: str
    function_version: str
    commit_hash: Optional[str] = None
    duration: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to wire format"""
        return {
            "FunctionName": self.function_name,
            "AliasName": self.alias_name,
            "FunctionVersion": self.function_version,
        }
