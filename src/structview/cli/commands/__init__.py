"""
CLI Commands Package.

Each command is implemented in its own module for maintainability.
"""

from . import prepare
from . import stats
from . import tree

__all__ = [
    "prepare",
    "stats",
    "tree",
]
