"""Operation registry and dispatch for transform-mutating calls.

Each drawing context method that changes the current transform has a
handler registered under the method's name. ``process`` looks the handler
up and folds the call into a running matrix.

Usage:
    from canvasmatrix.operations import process

    m = process(IDENTITY, "translate", (10, 20))
    m = process(m, "rotate", (math.pi / 2,))
"""

import math
from abc import ABC, abstractmethod
from numbers import Real
from typing import Any, Sequence

from canvasmatrix.exceptions import InvalidArgumentError, InvalidOperationError
from canvasmatrix.matrix import (
    IDENTITY,
    Matrix,
    multiply,
    rotate,
    scale,
    transform,
    translate,
)


class OperationHandler(ABC):
    """Abstract base class for transform operation handlers."""

    # Drawing context method name (e.g., "translate", "setTransform")
    name: str = ""

    # Number of arguments the operation takes; None means arguments are ignored
    arity: int | None = 0

    def apply(self, current: Matrix, args: Sequence[Any]) -> Matrix:
        """Fold one call of this operation into ``current``.

        Calls with a non-finite argument leave the matrix unchanged, the
        same way a canvas ignores them.

        Raises:
            InvalidArgumentError: If the argument count or types are wrong
        """
        if self.arity is None:
            return self.compute(current, ())
        values = self.coerce(args)
        if not all(math.isfinite(v) for v in values):
            return current
        return self.compute(current, values)

    def coerce(self, args: Sequence[Any]) -> tuple[float, ...]:
        """Check the argument count and convert each argument to float."""
        if len(args) != self.arity:
            raise InvalidArgumentError(
                f"{self.name} takes {self.arity} argument(s), got {len(args)}",
                context={"operation": self.name, "args": list(args)},
            )
        values = []
        for arg in args:
            if isinstance(arg, bool) or not isinstance(arg, Real):
                raise InvalidArgumentError(
                    f"{self.name} arguments must be numbers, got {type(arg).__name__}",
                    context={"operation": self.name, "args": list(args)},
                )
            values.append(float(arg))
        return tuple(values)

    @abstractmethod
    def compute(self, current: Matrix, values: tuple[float, ...]) -> Matrix:
        """Return the new matrix for already validated arguments."""


class ComposingHandler(OperationHandler):
    """Handler for operations composed on top of the current transform."""

    @abstractmethod
    def primitive(self, values: tuple[float, ...]) -> Matrix:
        """Build the matrix for this operation alone."""

    def compute(self, current: Matrix, values: tuple[float, ...]) -> Matrix:
        return multiply(current, self.primitive(values))


class OperationRegistry:
    """Registry for transform operation handlers.

    Usage:
        @OperationRegistry.register
        class TranslateHandler(ComposingHandler):
            name = "translate"
            ...

        handler = OperationRegistry.get("translate")
    """

    _handlers: dict[str, OperationHandler] = {}

    @classmethod
    def register(cls, handler_class: type[OperationHandler]) -> type[OperationHandler]:
        """Register a handler class under its ``name`` (usable as a decorator)."""
        cls._handlers[handler_class.name] = handler_class()
        return handler_class

    @classmethod
    def get(cls, name: str) -> OperationHandler:
        """Get the handler for an operation name.

        Raises:
            InvalidOperationError: If no handler is registered for the name
        """
        if name not in cls._handlers:
            available = ", ".join(sorted(cls._handlers))
            raise InvalidOperationError(
                f"Unknown transform operation: '{name}'. Available: {available}",
                context={"operation": name},
            )
        return cls._handlers[name]

    @classmethod
    def all_names(cls) -> list[str]:
        """Get all registered operation names, sorted."""
        return sorted(cls._handlers)

    @classmethod
    def is_registered(cls, name: str) -> bool:
        return name in cls._handlers


@OperationRegistry.register
class ResetTransformHandler(OperationHandler):
    name = "resetTransform"
    arity = None

    def compute(self, current: Matrix, values: tuple[float, ...]) -> Matrix:
        return IDENTITY


@OperationRegistry.register
class SetTransformHandler(OperationHandler):
    name = "setTransform"
    arity = 6

    def compute(self, current: Matrix, values: tuple[float, ...]) -> Matrix:
        return transform(*values)


@OperationRegistry.register
class TranslateHandler(ComposingHandler):
    name = "translate"
    arity = 2

    def primitive(self, values: tuple[float, ...]) -> Matrix:
        return translate(*values)


@OperationRegistry.register
class RotateHandler(ComposingHandler):
    name = "rotate"
    arity = 1

    def primitive(self, values: tuple[float, ...]) -> Matrix:
        return rotate(*values)


@OperationRegistry.register
class ScaleHandler(ComposingHandler):
    name = "scale"
    arity = 2

    def primitive(self, values: tuple[float, ...]) -> Matrix:
        return scale(*values)


@OperationRegistry.register
class TransformHandler(ComposingHandler):
    name = "transform"
    arity = 6

    def primitive(self, values: tuple[float, ...]) -> Matrix:
        return transform(*values)


def process(current: Matrix, name: str, args: Sequence[Any] = ()) -> Matrix:
    """
    Apply one transform-mutating call to a running matrix.

    ``resetTransform`` and ``setTransform`` replace the matrix outright;
    ``translate``, ``rotate``, ``scale`` and ``transform`` return
    ``multiply(current, primitive)``.

    Args:
        current: The matrix before the call
        name: Drawing context method name
        args: Arguments the method was called with

    Returns:
        The matrix after the call

    Raises:
        InvalidOperationError: If ``name`` is not a transform operation
        InvalidArgumentError: If ``args`` do not fit the operation
    """
    handler = OperationRegistry.get(name)
    return handler.apply(current, tuple(args))
