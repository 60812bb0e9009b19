"""Replay script loading for canvasmatrix.

A replay script is a YAML file listing drawing context calls in order:

    version: 1
    steps:
      - translate: [10, 20]
      - save
      - rotate: 0.5
      - restore

Replaying it folds every call into a TransformState, the same way an
augmented context tracks live calls.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from canvasmatrix.constants import MATRIX_OPERATIONS, SCRIPT_VERSION, STACK_OPERATIONS
from canvasmatrix.exceptions import CanvasMatrixError, ScriptError
from canvasmatrix.logging_config import get_logger
from canvasmatrix.state import TransformState

logger = get_logger(__name__)

KNOWN_OPERATIONS = STACK_OPERATIONS + MATRIX_OPERATIONS


@dataclass
class Step:
    """A single recorded drawing context call."""
    operation: str
    args: list[float] = field(default_factory=list)

    def __str__(self) -> str:
        return f"{self.operation}({', '.join(str(a) for a in self.args)})"


@dataclass
class Script:
    """Parsed replay script."""
    version: int = SCRIPT_VERSION
    steps: list[Step] = field(default_factory=list)


def parse_step(data: Any, index: int | None = None) -> Step:
    """Parse one step entry.

    Accepted forms:
        save                      bare operation name, no arguments
        rotate: 0.5               single argument
        translate: [10, 20]       argument list
        resetTransform: ~         explicit no arguments

    Raises:
        ScriptError: If the entry has another shape or names an unknown operation
    """
    if isinstance(data, str):
        operation, raw_args = data, None
    elif isinstance(data, dict) and len(data) == 1:
        operation, raw_args = next(iter(data.items()))
    else:
        raise ScriptError(
            f"Step must be an operation name or a single-key mapping, got: {data!r}",
            context={"step": index},
        )

    if operation not in KNOWN_OPERATIONS:
        raise ScriptError(
            f"Unknown operation '{operation}'. Available: {', '.join(KNOWN_OPERATIONS)}",
            context={"step": index},
        )

    if raw_args is None:
        args = []
    elif isinstance(raw_args, list):
        args = raw_args
    else:
        args = [raw_args]

    return Step(operation=operation, args=args)


def load_script(script_path: Path) -> Script:
    """Load and parse a replay script file."""
    if not script_path.exists():
        raise FileNotFoundError(f"Script file not found: {script_path}")

    with open(script_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if not isinstance(data, dict):
        raise ScriptError("Script must be a YAML dictionary")

    if "steps" not in data:
        raise ScriptError("Script must contain a 'steps' section")

    version = data.get("version", SCRIPT_VERSION)
    # YAML "true" would otherwise compare equal to 1
    if isinstance(version, bool) or version != SCRIPT_VERSION:
        raise ScriptError(
            f"Unsupported script version: {version}",
            context={"supported": SCRIPT_VERSION},
        )

    raw_steps = data["steps"] or []
    if not isinstance(raw_steps, list):
        raise ScriptError("'steps' must be a list")

    steps = [parse_step(entry, index) for index, entry in enumerate(raw_steps)]
    return Script(version=version, steps=steps)


def replay(steps: list[Step], state: TransformState | None = None) -> TransformState:
    """
    Fold a sequence of steps into a transform state.

    Args:
        steps: Steps to apply, in order
        state: State to continue from; a fresh identity state if None

    Returns:
        The state after the last step

    Raises:
        ScriptError: If a step's arguments do not fit its operation
    """
    if state is None:
        state = TransformState()

    for index, step in enumerate(steps):
        try:
            matrix = state.apply(step.operation, step.args)
        except CanvasMatrixError as e:
            raise ScriptError(
                f"Step {index + 1} ({step}) failed: {e}",
                context={"step": index},
            ) from e
        logger.debug("Step %d: %s -> %s", index + 1, step, matrix)

    return state
