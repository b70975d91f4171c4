"""Pytest configuration for gpl2clr tests."""

import os

import pytest

EXAMPLES_DIR = os.path.join(os.path.dirname(os.path.dirname(__file__)), "examples")


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "macos: marks tests requiring AppKit through PyObjC"
    )


# Skip macOS tests if PyObjC is not available
def pytest_collection_modifyitems(config, items):
    """Skip tests that write real color lists when AppKit is missing."""
    try:
        import AppKit

        AppKit  # added not to raise a qa error.
    except ImportError:
        skip_macos = pytest.mark.skip(reason="AppKit (PyObjC) not available")
        for item in items:
            if "macos" in item.keywords:
                item.add_marker(skip_macos)


@pytest.fixture
def basic_palette_path():
    """Path to the sample palette shipped in examples/."""
    return os.path.join(EXAMPLES_DIR, "palettes", "basic.gpl")


class RecordingWriter:
    """Color list writer double that records calls and writes a marker file."""

    def __init__(self, fail=False):
        self.fail = fail
        self.calls = []

    def write(self, list_name, entries, path):
        self.calls.append((list_name, list(entries), path))
        if self.fail:
            raise OSError("disk full")
        with open(path, "wb") as f:
            f.write(b"clr")


@pytest.fixture
def recording_writer():
    return RecordingWriter()


@pytest.fixture
def failing_writer():
    return RecordingWriter(fail=True)
