"""
Core building blocks shared across the family tree packages.
"""

from family_tree.core.exceptions import FormatError, NotFoundError, TreeError

__all__ = [
    "FormatError",
    "NotFoundError",
    "TreeError",
]
