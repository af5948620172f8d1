"""Shared test fixtures and utilities."""

from pathlib import Path

import pytest
from typer.testing import CliRunner


@pytest.fixture
def runner():
    """Create a CliRunner for in-process testing."""
    return CliRunner()


@pytest.fixture
def make_project(tmp_path):
    """Factory fixture to lay out a project directory.

    Names ending in "/" become directories; everything else is a file.
    """
    def _make(*names: str, root: Path = None) -> Path:
        root = root or tmp_path / "project"
        root.mkdir(parents=True, exist_ok=True)
        for name in names:
            path = root / name.rstrip("/")
            if name.endswith("/"):
                path.mkdir(parents=True, exist_ok=True)
            else:
                path.parent.mkdir(parents=True, exist_ok=True)
                path.write_text("")
        return root
    return _make
