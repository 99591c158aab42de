"""
Errors - Exceptions raised by the JSON scribe.

Sink failures are never wrapped: whatever the sink raises reaches the caller
unchanged.
"""

from typing import Optional


class ScribeError(Exception):
    """Base class for errors raised by jsonscribe."""


class StructuralMisuseError(ScribeError, RuntimeError):
    """
    A construct was closed or written to in a way its nesting does not allow.

    Raised when closing with no open construct, when a handle closes at the
    wrong depth, or when a handle is used after its ``then()``.
    """

    def __init__(self, message: str, cursor: Optional[int] = None, expected: Optional[int] = None):
        super().__init__(message)
        self.cursor = cursor
        self.expected = expected
