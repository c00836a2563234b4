"""Test configuration and fixtures for dir2md."""

import pytest


def pytest_addoption(parser):
    """Add custom command-line options for tests."""
    parser.addoption("--run-cli-tests", action="store_true", default=False, help="Run CLI integration tests (slow)")


@pytest.fixture
def sample_project(tmp_path):
    """Create a small project tree with text, binary and ignored files."""
    root = tmp_path / "project"
    (root / "src" / "pkg").mkdir(parents=True)
    (root / "docs").mkdir()
    (root / "node_modules" / "left-pad").mkdir(parents=True)
    (root / "empty_dir").mkdir()

    (root / "README.md").write_text("# Sample\n")
    (root / "setup.py").write_text("from setuptools import setup\n")
    (root / "src" / "main.py").write_text("def main():\n    return 0\n")
    (root / "src" / "pkg" / "util.go").write_text("package pkg\n")
    (root / "docs" / "guide.md").write_text("Guide\n")
    (root / "node_modules" / "left-pad" / "index.js").write_text("module.exports = {}\n")
    (root / "logo.png").write_bytes(b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR")
    (root / "data.bin").write_bytes(bytes(range(256)))
    (root / ".env").write_text("SECRET=1\n")
    return root
