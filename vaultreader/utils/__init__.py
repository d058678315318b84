"""vaultreader utility functions.

Each file in this package exports exactly one function, following
the single file == function/class rule.
"""

from .expand_path import expand_path
from .get_logger import get_logger

__all__ = [
    "expand_path",
    "get_logger",
]
