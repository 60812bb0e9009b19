"""getTransform shim for drawing contexts that cannot report their transform.

A drawing context is any object with a ``canvas`` attribute and the
canvas transform methods (``save``, ``restore``, ``translate``, ``scale``,
``rotate``, ``transform``, ``setTransform``, ``resetTransform``). When
such an object has no ``getTransform`` of its own, ``augment_context``
wraps those methods so every call is also recorded in a
``TransformState``, and installs a ``getTransform`` that reads it.

Usage:
    from canvasmatrix import augment_context

    ctx = augment_context(ctx)
    ctx.translate(10, 0)
    ctx.getTransform()  # (1.0, 0.0, 0.0, 1.0, 10.0, 0.0)
"""

import functools
import inspect
from dataclasses import dataclass, field
from typing import Any, Callable

from canvasmatrix.constants import CANVAS_ATTRIBUTE, GET_TRANSFORM, WRAPPED_METHODS
from canvasmatrix.exceptions import InvalidArgumentError
from canvasmatrix.logging_config import get_logger
from canvasmatrix.matrix import Matrix
from canvasmatrix.state import TransformState

logger = get_logger(__name__)


@dataclass
class ContextCheck:
    """Result of inspecting an object before augmentation.

    Attributes:
        valid: True if the object can be handed to ``augment_context``
        native: True if the object already provides ``getTransform``
        missing: Transform methods the object lacks
        errors: Reasons the object was rejected
    """

    valid: bool = True
    native: bool = False
    missing: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    def add_error(self, message: str) -> None:
        """Add an error and mark the check as failed."""
        self.errors.append(message)
        self.valid = False


def check_context(context: Any) -> ContextCheck:
    """
    Inspect ``context`` for the drawing context capabilities the shim needs.

    An object that already has a callable ``getTransform`` only needs the
    ``canvas`` attribute, since it will be left alone.

    Args:
        context: Candidate drawing context

    Returns:
        ContextCheck describing what was found
    """
    result = ContextCheck()

    if context is None:
        result.add_error("Context is None")
        return result

    if not hasattr(context, CANVAS_ATTRIBUTE):
        result.add_error(
            f"{type(context).__name__} has no '{CANVAS_ATTRIBUTE}' attribute"
        )
        return result

    if callable(getattr(context, GET_TRANSFORM, None)):
        result.native = True
        return result

    result.missing = [
        name for name in WRAPPED_METHODS if not callable(getattr(context, name, None))
    ]
    if result.missing:
        result.add_error(f"Missing transform methods: {', '.join(result.missing)}")

    if not hasattr(context, "__dict__"):
        result.add_error(f"{type(context).__name__} does not accept new attributes")

    return result


def _signature(original: Callable) -> inspect.Signature | None:
    try:
        return inspect.signature(original)
    except (TypeError, ValueError):
        # Some builtins and C extension methods expose no signature
        return None


def _tracked_args(
    signature: inspect.Signature | None, args: tuple, kwargs: dict
) -> tuple:
    """Return a call's arguments in positional order for tracking.

    Keyword arguments are mapped onto the host method's parameters. When
    they cannot be mapped the positional arguments are returned as given.
    """
    if not kwargs or signature is None:
        return args
    try:
        bound = signature.bind(*args, **kwargs)
    except TypeError:
        return args

    values = []
    for param in signature.parameters.values():
        if param.name not in bound.arguments:
            continue
        if param.kind == param.VAR_POSITIONAL:
            values.extend(bound.arguments[param.name])
        elif param.kind != param.VAR_KEYWORD:
            values.append(bound.arguments[param.name])
    return tuple(values)


def _wrap_method(name: str, original: Callable, state: TransformState) -> Callable:
    """Wrap one context method so its calls are also recorded in ``state``.

    The host method always receives the call unchanged. Calls whose
    arguments the tracker cannot interpret leave the matrix as it was.
    """
    signature = _signature(original)

    @functools.wraps(original)
    def wrapper(*args, **kwargs):
        tracked = _tracked_args(signature, args, kwargs)
        try:
            state.preview(name, tracked)
        except InvalidArgumentError as e:
            logger.debug("Not tracking %s call: %s", name, e)
            tracked = None

        result = original(*args, **kwargs)

        if tracked is not None:
            state.apply(name, tracked)
        return result

    return wrapper


def _make_get_transform(state: TransformState) -> Callable[[], Matrix]:
    def getTransform() -> Matrix:
        """Return the current transform as ``(a, b, c, d, e, f)``."""
        return state.current

    return getTransform


def augment_context(context: Any) -> Any:
    """
    Give ``context`` a ``getTransform`` method if it lacks one.

    Contexts that already provide ``getTransform`` are returned untouched,
    so calling this twice on the same object is harmless.

    Args:
        context: Drawing context to augment in place

    Returns:
        The same context object

    Raises:
        InvalidArgumentError: If ``context`` is not a usable drawing context
    """
    check = check_context(context)
    if not check.valid:
        raise InvalidArgumentError(
            f"Not a drawing context: {'; '.join(check.errors)}",
            context={"type": type(context).__name__},
        )

    if check.native:
        logger.debug(
            "%s already provides %s, leaving it unchanged",
            type(context).__name__,
            GET_TRANSFORM,
        )
        return context

    state = TransformState()
    wrappers = {
        name: _wrap_method(name, getattr(context, name), state)
        for name in WRAPPED_METHODS
    }
    for name, wrapper in wrappers.items():
        setattr(context, name, wrapper)
    setattr(context, GET_TRANSFORM, _make_get_transform(state))

    logger.debug(
        "Augmented %s with %s (%d methods wrapped)",
        type(context).__name__,
        GET_TRANSFORM,
        len(wrappers),
    )
    return context
