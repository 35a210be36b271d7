"""LaunchWarden utility functions.

Each file in this package exports exactly one function, following
the single file == function/class rule.
"""

from .get_launchwarden_home import get_launchwarden_home
from .get_logger import get_logger

__all__ = [
    "get_launchwarden_home",
    "get_logger",
]
