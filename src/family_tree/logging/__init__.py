"""
Logging package for ``family_tree``.

Use ``get_logger(__name__)`` in modules; the CLI calls ``configure_logging``
to add the log file.
"""

from .logger import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
]
