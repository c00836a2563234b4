"""Keep/drop decisions for candidate files during a documentation scan."""

import logging
import os
from pathlib import Path
from typing import Callable, Iterable, Optional

from dir2md.file_system_tree.content_sniffer import sniff_content
from dir2md.patterns import PatternList
from dir2md.types import ContentKind, PathType

logger = logging.getLogger(__name__)

ContentSniffer = Callable[[PathType], ContentKind]


def relative_to_root(root: Path, path: PathType) -> str:
    """Strip the scan root prefix from a path and normalize separators.

    Example:
        >>> relative_to_root(Path("/work/project"), "/work/project/src/main.py")
        'src/main.py'
    """
    relative = os.path.relpath(os.fspath(path), os.fspath(root))
    return relative.replace(os.sep, "/")


class InclusionFilter:
    """Decides whether a file found during the scan gets documented.

    The decision is made in three steps:

    1. If any exclude pattern matches the relative path, the file is dropped.
    2. Otherwise, if include patterns were given, the file is kept only when at
       least one of them matches.
    3. Otherwise the file is kept unless content sniffing reports it as binary.
       A file that cannot be sniffed at all is dropped as well.

    Excludes therefore always win over includes. Patterns are only ever tested
    against paths relative to the scan root.

    Attributes:
        root (Path): The scan root.
        includes (PatternList): Include patterns (may be empty).
        excludes (PatternList): Exclude patterns (may be empty).

    Example:
        >>> from dir2md.patterns import parse_patterns
        >>> keep = InclusionFilter(
        ...     "/repo", includes=parse_patterns("*.py"), excludes=parse_patterns("tests/*")
        ... )
        >>> keep.keep("/repo/app/main.py"), keep.keep("/repo/tests/test_main.py")
        (True, False)
    """

    def __init__(
        self,
        root: PathType,
        includes: Optional[PatternList] = None,
        excludes: Optional[PatternList] = None,
        *,
        sniffer: ContentSniffer = sniff_content,
        always_drop: Iterable[PathType] = (),
    ) -> None:
        """Initialize the filter.

        Args:
            root: The scan root; candidate paths are made relative to it.
            includes: Include patterns. None or an empty list means "no include list".
            excludes: Exclude patterns. None or an empty list excludes nothing.
            sniffer: Content classifier used when no include list was given.
            always_drop: Absolute paths that are never kept, such as the output
                document when it is written inside the scan root.
        """
        self.root = Path(root)
        self.includes = includes if includes is not None else PatternList()
        self.excludes = excludes if excludes is not None else PatternList()
        self._sniffer = sniffer
        self._always_drop = {os.path.abspath(p) for p in always_drop}

    def keep(self, path: PathType) -> bool:
        """Return True if the file at ``path`` should be documented."""
        if os.path.abspath(path) in self._always_drop:
            logger.debug("Skipping output document %s", path)
            return False

        relative_path = relative_to_root(self.root, path)

        excluded_by = self.excludes.first_match(relative_path)
        if excluded_by is not None:
            logger.debug("Excluded %s (%s %r)", relative_path, excluded_by.kind, excluded_by.pattern)
            return False

        if self.includes:
            included_by = self.includes.first_match(relative_path)
            if included_by is None:
                logger.debug("Not included: %s", relative_path)
                return False
            return True

        try:
            kind = self._sniffer(path)
        except OSError as e:
            logger.warning("Could not classify %s: %s", relative_path, e)
            return False
        if kind is ContentKind.BINARY:
            logger.debug("Skipping binary file %s", relative_path)
            return False
        return True
