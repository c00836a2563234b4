"""Zip archive creation with zip-style exclude rules."""

import logging
import os
import zipfile
from dataclasses import dataclass
from fnmatch import fnmatchcase
from pathlib import Path
from typing import Iterator, Optional, Sequence, Tuple

from dir2md.exceptions import ScanDirectoryError
from dir2md.types import PathType

logger = logging.getLogger(__name__)

ARCHIVE_NAME = "archive.zip"


@dataclass(frozen=True)
class ArchiveResult:
    """Summary of a written archive.

    Attributes:
        path: Location of the archive.
        files_added: Number of file members.
        directories_added: Number of directory members.
        size_bytes: Size of the archive on disk.
    """

    path: Path
    files_added: int
    directories_added: int
    size_bytes: int


def is_excluded(member_name: str, rules: Sequence[str]) -> bool:
    """Check an archive member name against exclude rules.

    Rules use zip's wildcard semantics: ``*`` matches any run of characters
    including ``/``, and the whole member name has to match. Directory members
    end with ``/`` and are also checked without it.

    Example:
        >>> rules = ["build", "build/*", "*.log", "*.log/*"]
        >>> is_excluded("build/", rules), is_excluded("build/out/app.bin", rules)
        (True, True)
        >>> is_excluded("logs/server.log", rules), is_excluded("src/build.py", rules)
        (True, False)
    """
    candidates = [member_name]
    if member_name.endswith("/"):
        candidates.append(member_name.rstrip("/"))
    return any(fnmatchcase(candidate, rule) for candidate in candidates for rule in rules)


class ArchiveWriter:
    """Writes a deflate-compressed zip of a directory, honoring exclude rules.

    Members are added in sorted order, directories as explicit entries. The
    archive being written is never added to itself. Symbolic links to
    directories are stored as directory entries without descending into them;
    symbolic links to files are stored with the contents of their target.

    Attributes:
        root (Path): Directory whose contents are archived.
        exclude_rules (Tuple[str, ...]): Zip-style exclude rules.

    Example:
        >>> writer = ArchiveWriter(".", ["build", "build/*"])  # doctest: +SKIP
        >>> result = writer.write("archive.zip")  # doctest: +SKIP
        >>> result.files_added  # doctest: +SKIP
        17
    """

    def __init__(self, root: PathType, exclude_rules: Sequence[str] = ()) -> None:
        self.root = Path(root)
        if not self.root.is_dir():
            raise ScanDirectoryError(str(root))
        self.exclude_rules = tuple(exclude_rules)

    def iter_members(self, skip: Optional[Path] = None) -> Iterator[Tuple[Path, str]]:
        """Yield ``(path, member_name)`` pairs for everything that goes into the archive.

        Args:
            skip: A file that must never be archived, normally the archive itself.
        """
        skip_path = skip.resolve() if skip is not None else None

        for current, dirnames, filenames in os.walk(self.root):
            dirnames.sort()
            current_path = Path(current)
            relative_dir = current_path.relative_to(self.root).as_posix()
            prefix = "" if relative_dir == "." else f"{relative_dir}/"

            for dirname in list(dirnames):
                member_name = f"{prefix}{dirname}/"
                if is_excluded(member_name, self.exclude_rules):
                    logger.debug("Excluded %s", member_name)
                    continue
                yield current_path / dirname, member_name

            for filename in sorted(filenames):
                file_path = current_path / filename
                if skip_path is not None and file_path.resolve() == skip_path:
                    continue
                member_name = f"{prefix}{filename}"
                if is_excluded(member_name, self.exclude_rules):
                    logger.debug("Excluded %s", member_name)
                    continue
                yield file_path, member_name

    def write(self, output: PathType = ARCHIVE_NAME) -> ArchiveResult:
        """Write the archive, replacing any existing file at ``output``.

        Files that cannot be read are skipped with a warning.

        Args:
            output: Where to write the archive.

        Returns:
            Summary of what was written.
        """
        output_path = Path(output)
        files_added = 0
        directories_added = 0

        logger.info("Creating archive: %s", output_path)
        with zipfile.ZipFile(output_path, "w", compression=zipfile.ZIP_DEFLATED, strict_timestamps=False) as archive:
            for path, member_name in self.iter_members(skip=output_path):
                try:
                    archive.write(path, member_name)
                except OSError as e:
                    logger.warning("Skipping %s: %s", member_name, e)
                    continue
                if member_name.endswith("/"):
                    directories_added += 1
                else:
                    files_added += 1

        return ArchiveResult(
            path=output_path,
            files_added=files_added,
            directories_added=directories_added,
            size_bytes=output_path.stat().st_size,
        )
