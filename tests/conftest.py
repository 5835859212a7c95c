"""
Pytest configuration and fixtures for test isolation.
"""
import pytest
from pathlib import Path

from click.testing import CliRunner

from bundler.utils.logging_config import logging_config


def pytest_configure(config):
    config.addinivalue_line("markers", "integration: runs the CLI in a subprocess")


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop log handlers a CLI invocation bound to a now-closed stderr."""
    yield
    logging_config.reset()


@pytest.fixture
def runner():
    return CliRunner()


def write_files(root: Path, files: dict) -> Path:
    """Create ``files`` (relative path -> content) below ``root``."""
    for relative, content in files.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8", newline="")
    return root


@pytest.fixture
def source_tree(tmp_path):
    """A small project with sources, a build directory and unrelated files."""
    root = tmp_path / "project"
    write_files(root, {
        "a.py": "x=1\n",
        "b.js": "let y=2;\n\n",
        "src/Main.java": "class Main {}\n",
        "src/util.ts": "export const z = 3;\n",
        "src/Program.CS": "class Program {}\n",
        "bin/Debug.cs": "// compiled\n",
        "obj/debug/gen.py": "generated = True\n",
        "docs/readme.md": "# readme\n",
    })
    return root


@pytest.fixture
def make_tree():
    return write_files
