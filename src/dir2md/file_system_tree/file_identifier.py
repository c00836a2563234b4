"""Device/inode identity of directories, used to stop symlink cycles."""

import os
from dataclasses import dataclass
from typing import Optional

from dir2md.types import PathType


@dataclass(frozen=True)
class FileIdentifier:
    """Identity of a file or directory by device ID and inode number.

    Two paths that resolve to the same directory (for example a directory and
    a symlink pointing at it) share one identifier, which is what lets the
    tree builder notice that a symlink leads back into its own ancestry.

    Attributes:
        device_id (int): The ``st_dev`` value from stat information.
        inode_number (int): The ``st_ino`` value from stat information.

    Example:
        >>> FileIdentifier(1, 42) == FileIdentifier(1, 42)
        True
        >>> len({FileIdentifier(1, 42), FileIdentifier(1, 42), FileIdentifier(2, 42)})
        2
    """

    device_id: int
    inode_number: int

    @classmethod
    def for_path(cls, path: PathType) -> Optional["FileIdentifier"]:
        """Stat a path, following symlinks, and return its identifier.

        Returns:
            The identifier, or None when the path cannot be stat'ed (for
            example a dangling symlink or a permission problem).
        """
        try:
            stat_info = os.stat(path)
        except OSError:
            return None
        return cls(stat_info.st_dev, stat_info.st_ino)
