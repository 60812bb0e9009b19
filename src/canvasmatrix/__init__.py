"""canvasmatrix - 2D affine transforms and a getTransform shim for drawing contexts."""

import logging

from canvasmatrix.augment import ContextCheck, augment_context, check_context
from canvasmatrix.exceptions import (
    CanvasMatrixError,
    InvalidArgumentError,
    InvalidOperationError,
    ScriptError,
)
from canvasmatrix.matrix import (
    IDENTITY,
    Matrix,
    apply_to_point,
    identity,
    multiply,
    rotate,
    scale,
    transform,
    translate,
)
from canvasmatrix.operations import process
from canvasmatrix.state import TransformState

__version__ = "0.1.0"
__all__ = [
    "__version__",
    # Matrix algebra
    "Matrix",
    "IDENTITY",
    "identity",
    "transform",
    "translate",
    "scale",
    "rotate",
    "multiply",
    "apply_to_point",
    "process",
    # Context shim
    "TransformState",
    "ContextCheck",
    "check_context",
    "augment_context",
    # Errors
    "CanvasMatrixError",
    "InvalidArgumentError",
    "InvalidOperationError",
    "ScriptError",
]

# Prevent "No handler found" warnings when used as a library
logging.getLogger("canvasmatrix").addHandler(logging.NullHandler())
