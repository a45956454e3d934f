"""Execution context for a single deploy"""

from dataclasses import dataclass
from pathlib import Path
from typing import Tuple

from ..constants import FUNCTION_NAME_SEPARATOR


def full_function_name(function_name: str, env_name: str) -> str:
    """Fully-qualified function identifier: ``<function>_<env>``"""
    return f"{function_name}{FUNCTION_NAME_SEPARATOR}{env_name}"


@dataclass(frozen=True)
class DeployExecutionContext:
    """Resolved, immutable parameters of one deploy invocation"""

    function_name: str
    env_name: str
    node_env_value: str
    live_alias_name: str
    commit_hash: str
    project_root: Path
    zip_contents: Tuple[str, ...]

    @property
    def full_function_name(self) -> str:
        return full_function_name(self.function_name, self.env_name)
