from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dir2md.types import ContentKind


@dataclass(frozen=True)
class FileEntry:
    """A file selected for documentation.

    Attributes:
        path: Absolute path to the file.
        relative_path: Path relative to the scan root, with forward slashes.
        kind: Content classification, or None when sniffing failed.
        sniff_error: OSError raised while sniffing the file, if any.
    """

    path: Path
    relative_path: str
    kind: Optional[ContentKind] = None
    sniff_error: Optional[OSError] = None

    @property
    def is_documentable(self) -> bool:
        """True when the file's contents can be written into a code fence."""
        return self.kind is not None and self.kind.is_documentable
