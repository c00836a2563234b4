"""Directory to Markdown documentation utilities.

This package provides tools for turning a project directory into a single
Markdown document (tree listing plus file contents) and for zipping a working
directory while honoring its .gitignore patterns.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("dir2md")
except PackageNotFoundError:
    __version__ = "unknown"
