"""Translation of .gitignore lines into archive exclude rules.

Each usable line becomes two zip-style exclude rules: the pattern itself and
the pattern with ``/*`` appended, so that a matching directory is excluded
together with everything inside it.

Negated lines (``!pattern``) are not understood and are translated like any
other line. The resulting rules exclude paths literally named ``!pattern``,
so the re-inclusion the line asked for does not happen.
"""

import logging
from pathlib import Path
from typing import Iterable, List

from dir2md.types import PathType

logger = logging.getLogger(__name__)

GITIGNORE_NAME = ".gitignore"

# The version-control metadata directory is never archived
VCS_EXCLUDE_RULES = (".git", ".git/*")


def translate_line(line: str) -> List[str]:
    """Translate one .gitignore line into exclude rules.

    Args:
        line: A line from a .gitignore file, with or without its newline.

    Returns:
        Two rules for a pattern line, or no rules for blank and comment lines.

    Example:
        >>> translate_line("build/")
        ['build', 'build/*']
        >>> translate_line("*.log")
        ['*.log', '*.log/*']
        >>> translate_line("# comment")
        []
        >>> translate_line("")
        []
    """
    line = line.rstrip("\r\n")
    if not line or line.startswith("#"):
        return []
    if line.startswith("!"):
        logger.warning("Negated pattern %r is not supported and is treated literally", line)
    pattern = line[:-1] if line.endswith("/") else line
    return [pattern, f"{pattern}/*"]


def translate_lines(lines: Iterable[str]) -> List[str]:
    """Translate every line of a .gitignore file, keeping their order.

    Example:
        >>> translate_lines(["# build output", "dist/", "", "*.pyc"])
        ['dist', 'dist/*', '*.pyc', '*.pyc/*']
    """
    rules: List[str] = []
    for line in lines:
        rules.extend(translate_line(line))
    return rules


def load_exclude_rules(gitignore_path: PathType = GITIGNORE_NAME) -> List[str]:
    """Build the full exclude rule list for an archive.

    The version-control rules always come first, followed by the rules
    translated from the .gitignore file when it exists.

    Args:
        gitignore_path: Location of the .gitignore file.

    Returns:
        The exclude rules.

    Raises:
        OSError: If the file exists but cannot be read.
    """
    rules = list(VCS_EXCLUDE_RULES)
    path = Path(gitignore_path)
    if not path.is_file():
        logger.debug("No %s found, only excluding version control metadata", path)
        return rules

    with open(path, "r", encoding="utf-8", errors="replace") as f:
        rules.extend(translate_lines(f.read().splitlines()))
    return rules
