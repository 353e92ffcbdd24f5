import os
import shutil
import tempfile
from pathlib import Path as StdPath

import pytest

from pathkit.core.flavor import POSIX, WINDOWS


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep PATHKIT_* settings from the shell or a .env file out of tests."""
    for name in list(os.environ):
        if name.startswith('PATHKIT_'):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def posix():
    return POSIX


@pytest.fixture
def windows():
    return WINDOWS


@pytest.fixture
def temp_workspace():
    """Create a temporary directory for test files."""
    temp_dir = tempfile.mkdtemp()
    yield StdPath(temp_dir)
    shutil.rmtree(temp_dir)


@pytest.fixture
def sample_tree(temp_workspace):
    """Create a small directory tree for listing tests."""
    root = temp_workspace / "sample"
    root.mkdir()

    (root / "src").mkdir()
    (root / "docs").mkdir()
    (root / ".cache").mkdir()

    (root / "README.md").write_text("# Sample\n")
    (root / "setup.py").write_text("from setuptools import setup\n")
    (root / "notes.txt").write_text("notes\n")
    (root / ".hidden.txt").write_text("secret\n")
    (root / "src" / "main.py").write_text("print('hi')\n")

    return root
