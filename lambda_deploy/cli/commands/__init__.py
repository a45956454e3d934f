"""CLI commands"""

from . import deploy
from . import alias

__all__ = [
    "deploy",
    "alias",
]
