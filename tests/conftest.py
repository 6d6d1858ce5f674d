"""Test configuration and fixtures for dir2prompt."""

from pathlib import Path

import pytest


def pytest_addoption(parser):
    """Add custom command-line options for tests."""
    parser.addoption("--run-cli-tests", action="store_true", default=False, help="Run CLI integration tests (slow)")


@pytest.fixture
def make_tree(tmp_path):
    """Create files below a temporary root from a mapping of relative path to content.

    String values are written as UTF-8 text, bytes values as-is.
    """

    def _make(files):
        for relative_path, content in files.items():
            path = tmp_path / relative_path
            path.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(content, bytes):
                path.write_bytes(content)
            else:
                path.write_text(content, encoding="utf-8")
        return Path(tmp_path)

    return _make
