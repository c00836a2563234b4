"""Node representation for directories and files in the documentation tree."""

from pathlib import Path
from typing import Any, Optional

from anytree import Node


class TreeNode(Node):  # type: ignore
    """Node class representing a file or directory in the documentation tree.

    Extends anytree.Node with what the renderer and the document writer need
    to know about an entry. Children are attached in display order
    (directories first, then files, each sorted by name), so iterating over
    ``children`` already gives the rendered order.

    Attributes:
        name (str): The base name of the file or directory.
        file_path (Path): Path of the entry on disk.
        relative_path (str): Path relative to the scan root ("" for the root).
        is_dir (bool): True for directories, including followed directory symlinks.
        is_loop (bool): True for a directory symlink that leads back into its own
            ancestry. Such nodes are never descended into.

    Example:
        >>> root = TreeNode("project", file_path=Path("/tmp/project"), is_dir=True)
        >>> child = TreeNode("main.py", parent=root, file_path=Path("/tmp/project/main.py"), relative_path="main.py")
        >>> [c.name for c in root.children]
        ['main.py']
        >>> child.is_dir, child.is_loop
        (False, False)
    """

    def __init__(
        self,
        name: str,
        parent: Optional["TreeNode"] = None,
        *,
        file_path: Path,
        relative_path: str = "",
        is_dir: bool = False,
        is_loop: bool = False,
        **kwargs: Any,
    ) -> None:
        super().__init__(name, parent, **kwargs)
        self.file_path = file_path
        self.relative_path = relative_path
        self.is_dir = is_dir
        self.is_loop = is_loop

    @property
    def display_name(self) -> str:
        """Name as shown in the rendered tree."""
        if self.is_loop:
            return f"{self.name}/ → [loop detected]"
        if self.is_dir:
            return f"{self.name}/"
        return self.name

    def has_files(self) -> bool:
        """True if any file node exists at or below this node."""
        if not self.is_dir:
            return True
        return any(not node.is_dir for node in self.descendants)
