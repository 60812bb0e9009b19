"""Centralized constants for canvasmatrix."""

# Methods whose calls change the current transform of a drawing context
MATRIX_OPERATIONS = (
    "resetTransform",
    "setTransform",
    "translate",
    "rotate",
    "scale",
    "transform",
)

# Methods that push/pop the transform stack
STACK_OPERATIONS = ("save", "restore")

# Every method replaced on an augmented context, in wrapping order
WRAPPED_METHODS = (
    "save",
    "restore",
    "translate",
    "scale",
    "rotate",
    "transform",
    "setTransform",
    "resetTransform",
)

# Attribute that marks a drawing context and the method the shim provides
CANVAS_ATTRIBUTE = "canvas"
GET_TRANSFORM = "getTransform"

# Replay script format version
SCRIPT_VERSION = 1
