"""Tests for canvasmatrix.state module."""

import pytest

from canvasmatrix.exceptions import InvalidArgumentError, InvalidOperationError
from canvasmatrix.matrix import IDENTITY
from canvasmatrix.state import TransformState


class TestTransformState:
    """Test save/restore stack handling."""

    def test_initial_state(self):
        state = TransformState()
        assert state.current == IDENTITY
        assert state.stack == []
        assert state.depth == 0

    def test_states_do_not_share_stacks(self):
        first = TransformState()
        second = TransformState()
        first.save()
        assert second.depth == 0

    def test_save_pushes_current(self):
        state = TransformState()
        state.apply("translate", [1, 2])
        state.save()
        assert state.stack == [(1, 0, 0, 1, 1, 2)]
        assert state.current == (1, 0, 0, 1, 1, 2)

    def test_restore_pops(self):
        state = TransformState()
        state.save()
        state.apply("scale", [2, 2])
        state.restore()
        assert state.current == IDENTITY
        assert state.depth == 0

    def test_restore_on_empty_stack_is_noop(self):
        state = TransformState()
        state.apply("translate", [5, 5])
        state.restore()
        assert state.current == (1, 0, 0, 1, 5, 5)

    def test_nested_save_restore(self):
        state = TransformState()
        state.apply("translate", [1, 0])
        state.save()
        state.apply("translate", [1, 0])
        state.save()
        state.apply("translate", [1, 0])
        assert state.current[4] == 3
        state.restore()
        assert state.current[4] == 2
        state.restore()
        assert state.current[4] == 1

    def test_apply_returns_new_current(self):
        state = TransformState()
        assert state.apply("scale", [2, 3]) == (2, 0, 0, 3, 0, 0)

    def test_reset_keeps_stack(self):
        state = TransformState()
        state.apply("scale", [2, 2])
        state.save()
        state.apply("resetTransform")
        assert state.current == IDENTITY
        state.restore()
        assert state.current == (2, 0, 0, 2, 0, 0)


class TestPreview:
    """Test computing a call's result without recording it."""

    def test_preview_does_not_change_state(self):
        state = TransformState()
        assert state.preview("translate", [1, 2]) == (1, 0, 0, 1, 1, 2)
        assert state.current == IDENTITY

    def test_preview_restore(self):
        state = TransformState()
        state.save()
        state.apply("scale", [2, 2])
        assert state.preview("restore") == IDENTITY
        assert state.depth == 1

    def test_preview_restore_empty(self):
        state = TransformState(current=(2, 0, 0, 2, 0, 0))
        assert state.preview("restore") == (2, 0, 0, 2, 0, 0)

    def test_preview_save(self):
        state = TransformState()
        assert state.preview("save") == IDENTITY
        assert state.depth == 0

    def test_preview_raises_for_bad_call(self):
        state = TransformState()
        with pytest.raises(InvalidArgumentError):
            state.preview("translate", [1])
        with pytest.raises(InvalidOperationError):
            state.preview("clip")
