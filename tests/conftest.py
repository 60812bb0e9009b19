"""Shared fixtures for canvasmatrix tests."""

import shutil
import tempfile
from pathlib import Path

import pytest
import yaml

from canvasmatrix.constants import WRAPPED_METHODS


# === Path/Directory Fixtures ===

@pytest.fixture
def temp_dir():
    """Create a temporary directory for test outputs."""
    tmp = Path(tempfile.mkdtemp())
    yield tmp
    shutil.rmtree(tmp, ignore_errors=True)


# === Drawing Context Fixtures ===

class SpyContext:
    """Stand-in drawing context that records every transform call.

    Each call is appended to ``calls`` as ``(name, args)`` and returns
    ``"<name>-result"`` so pass-through of return values can be checked.
    """

    def __init__(self):
        self.canvas = object()
        self.calls = []

    def _record(self, name, args):
        self.calls.append((name, args))
        return f"{name}-result"

    def save(self, *args):
        return self._record("save", args)

    def restore(self, *args):
        return self._record("restore", args)

    def translate(self, *args):
        return self._record("translate", args)

    def scale(self, *args):
        return self._record("scale", args)

    def rotate(self, *args):
        return self._record("rotate", args)

    def transform(self, *args):
        return self._record("transform", args)

    def setTransform(self, *args):
        return self._record("setTransform", args)

    def resetTransform(self, *args):
        return self._record("resetTransform", args)


class NativeContext:
    """Drawing context that already reports its own transform."""

    def __init__(self):
        self.canvas = object()

    def getTransform(self):
        return (1, 0, 0, 1, 0, 0)


@pytest.fixture
def spy_context():
    """Create an unaugmented context that records its calls."""
    return SpyContext()


@pytest.fixture
def native_context():
    """Create a context with a native getTransform."""
    return NativeContext()


@pytest.fixture
def augmented_context(spy_context):
    """Create a spy context that has been through augment_context."""
    from canvasmatrix.augment import augment_context

    return augment_context(spy_context)


@pytest.fixture
def wrapped_method_names():
    return list(WRAPPED_METHODS)


# === Script Fixtures ===

@pytest.fixture
def scenario_script_dict():
    """Replay script for translate, scale, save, rotate, restore."""
    return {
        "version": 1,
        "steps": [
            {"translate": [1, 2]},
            {"scale": [2, 2]},
            "save",
            {"rotate": 1.5707963267948966},
            "restore",
        ],
    }


@pytest.fixture
def scenario_script_file(temp_dir, scenario_script_dict):
    """Write the scenario replay script to a temporary file."""
    script_path = temp_dir / "steps.yaml"
    with open(script_path, "w") as f:
        yaml.dump(scenario_script_dict, f)
    return script_path


# === PDF Fixtures ===

@pytest.fixture
def temp_pdf(temp_dir):
    """Create a temporary two-page PDF for testing."""
    from pypdf import PdfWriter

    pdf_path = temp_dir / "test.pdf"
    writer = PdfWriter()
    for _ in range(2):
        writer.add_blank_page(width=612, height=792)  # Letter size
    with open(pdf_path, "wb") as f:
        writer.write(f)
    return pdf_path
