from __future__ import annotations

from typing import Optional


class TreeError(Exception):
    """Base exception for family tree failures."""


class FormatError(TreeError, ValueError):
    """Raised when an input line cannot be split into a parent and children."""

    def __init__(self, message: str, line: str = "", lineno: int = 0):
        if lineno:
            message = f"Line {lineno}: {message}"
        super().__init__(message)
        self.line = line
        self.lineno = lineno


class NotFoundError(TreeError, LookupError):
    """Raised when a referenced name does not exist in the tree."""

    def __init__(self, message: str, name: Optional[str] = None, lineno: int = 0):
        if lineno:
            message = f"Line {lineno}: {message}"
        super().__init__(message)
        self.name = name
        self.lineno = lineno
