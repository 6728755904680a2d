"""
Logging package for ``households``.

Use ``get_logger("<module>")`` in modules to inherit the shared handlers.
"""

from .logger import get_logger, log_dir

__all__ = [
    "get_logger",
    "log_dir",
]
