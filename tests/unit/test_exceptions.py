"""Tests for canvasmatrix.exceptions module."""

import pytest

from canvasmatrix.exceptions import (
    CanvasMatrixError,
    InvalidArgumentError,
    InvalidOperationError,
    ScriptError,
)
from canvasmatrix.operations import process


class TestCanvasMatrixError:
    """Test message and context rendering."""

    def test_message_only(self):
        assert str(CanvasMatrixError("bad matrix")) == "bad matrix"
        assert CanvasMatrixError("bad matrix").context == {}

    def test_context_appended(self):
        error = CanvasMatrixError("bad step", context={"step": 2, "operation": "rotate"})
        assert str(error) == "bad step [step=2, operation=rotate]"

    @pytest.mark.parametrize(
        "error_class", [InvalidArgumentError, InvalidOperationError, ScriptError]
    )
    def test_subclasses_share_base(self, error_class):
        assert issubclass(error_class, CanvasMatrixError)

    def test_argument_error_names_operation(self):
        with pytest.raises(InvalidArgumentError) as exc_info:
            process((1, 0, 0, 1, 0, 0), "translate", [1])
        assert str(exc_info.value) == (
            "translate takes 2 argument(s), got 1 [operation=translate, args=[1]]"
        )
