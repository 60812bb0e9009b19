"""Errors raised by canvasmatrix.

Everything derives from CanvasMatrixError, so callers driving a drawing
context or replaying a script can catch one type. The ``context`` dict
carries the offending operation name, arguments or script step and is
appended to the message, e.g.::

    translate takes 2 argument(s), got 1 [operation=translate, args=[1]]
"""

from typing import Any


class CanvasMatrixError(Exception):
    """Base exception for all canvasmatrix errors.

    Args:
        message: Human-readable error description
        context: Optional details such as ``operation``, ``args`` or ``step``
    """

    def __init__(self, message: str, context: dict[str, Any] | None = None):
        super().__init__(message)
        self.context = context or {}

    def __str__(self) -> str:
        message = super().__str__()
        if not self.context:
            return message
        details = ", ".join(f"{key}={value}" for key, value in self.context.items())
        return f"{message} [{details}]"


class InvalidArgumentError(CanvasMatrixError):
    """Raised for an object that is not a drawing context, or for transform
    arguments of the wrong count or type."""


class InvalidOperationError(CanvasMatrixError):
    """Raised when an operation name has no registered handler."""


class ScriptError(CanvasMatrixError):
    """Raised when a replay script cannot be loaded or one of its steps fails."""
