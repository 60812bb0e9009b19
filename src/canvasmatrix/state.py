"""Tracked transform state: the current matrix and its save/restore stack."""

from dataclasses import dataclass, field
from typing import Any, Sequence

from canvasmatrix.matrix import IDENTITY, Matrix
from canvasmatrix.operations import process


@dataclass
class TransformState:
    """Current transform of one drawing context.

    Attributes:
        current: Matrix reported by ``getTransform``
        stack: Snapshots pushed by ``save``, most recent last
    """

    current: Matrix = IDENTITY
    stack: list[Matrix] = field(default_factory=list)

    @property
    def depth(self) -> int:
        """Number of unmatched ``save`` calls."""
        return len(self.stack)

    def save(self) -> None:
        self.stack.append(self.current)

    def restore(self) -> None:
        """Pop the last snapshot; does nothing when the stack is empty."""
        if self.stack:
            self.current = self.stack.pop()

    def preview(self, name: str, args: Sequence[Any] = ()) -> Matrix:
        """Return the matrix a call would produce without recording it.

        ``save`` leaves the matrix as is and ``restore`` yields the top
        snapshot (or the current matrix when nothing was saved).
        """
        if name == "save":
            return self.current
        if name == "restore":
            return self.stack[-1] if self.stack else self.current
        return process(self.current, name, args)

    def apply(self, name: str, args: Sequence[Any] = ()) -> Matrix:
        """Record one drawing context call and return the new current matrix.

        Raises:
            InvalidOperationError: If ``name`` is not a tracked method
            InvalidArgumentError: If ``args`` do not fit the operation
        """
        if name == "save":
            self.save()
        elif name == "restore":
            self.restore()
        else:
            self.current = process(self.current, name, args)
        return self.current
