# mdrender/markdown/exceptions.py
"""Errors raised at the boundary of the markdown rendering pipeline."""


class CodeBlockError(Exception):
    """Base class for code block rendering errors."""


class InvalidInput(CodeBlockError, ValueError):
    """Raised when diagram or code block input cannot be decoded as UTF-8 text."""
