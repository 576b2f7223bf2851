"""
Logging package for ``famtree``.

Use ``get_logger(__name__)`` in modules to inherit shared handlers and write to a
module-specific log file.
"""

from .logger import enable_debug, get_logger

__all__ = [
    "enable_debug",
    "get_logger",
]
