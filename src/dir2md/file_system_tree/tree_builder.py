"""Building the filtered documentation tree and listing the files it holds.

The builder is a pure function of the filesystem state and the filter: it
returns a TreeNode hierarchy and never writes output itself. Rendering and
document writing consume the returned structure.
"""

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING, Iterator, List, Optional, Set

from anytree import PreOrderIter

from dir2md.exceptions import ScanDirectoryError
from dir2md.file_system_tree.content_sniffer import sniff_content
from dir2md.file_system_tree.file_entry import FileEntry
from dir2md.file_system_tree.file_identifier import FileIdentifier
from dir2md.file_system_tree.tree_node import TreeNode
from dir2md.types import PathType

if TYPE_CHECKING:
    from dir2md.inclusion_filter import ContentSniffer, InclusionFilter

logger = logging.getLogger(__name__)


def root_display_name(root: Path) -> str:
    """Name of the scan root as shown on the first tree line.

    Example:
        >>> root_display_name(Path("/"))
        '/'
    """
    resolved = root.resolve()
    return resolved.name or str(resolved)


def build_tree(
    root: PathType,
    file_filter: Optional["InclusionFilter"] = None,
    *,
    prune_empty: bool = False,
) -> TreeNode:
    """Build the documentation tree for a scan root.

    At every level the immediate children are listed, split into directories
    and files, and each group is sorted by name; directories come first.
    Directories are always part of the tree (unless ``prune_empty`` is set and
    nothing below them is kept); files only when ``file_filter`` keeps them.

    Symbolic links to directories are followed. A link that resolves to a
    directory already on the current descent path becomes a loop node and is
    not descended into, so cyclic link structures terminate.

    Args:
        root: The scan root.
        file_filter: Decides which files are kept. None keeps every file.
        prune_empty: Drop directories that contain no kept file at any depth.

    Returns:
        The root node of the tree. Its ``relative_path`` is the empty string.

    Raises:
        ScanDirectoryError: If ``root`` does not exist or is not a directory.

    Example:
        >>> tree = build_tree("src")  # doctest: +SKIP
        >>> [child.display_name for child in tree.children]  # doctest: +SKIP
        ['pkg/', 'setup.py']
    """
    root_path = Path(root)
    if not root_path.is_dir():
        raise ScanDirectoryError(str(root))

    tree = TreeNode(root_display_name(root_path), file_path=root_path, is_dir=True)
    root_id = FileIdentifier.for_path(root_path)
    ancestry: Set[FileIdentifier] = {root_id} if root_id is not None else set()
    _add_children(tree, file_filter, ancestry)

    if prune_empty:
        _prune_empty_directories(tree)
    return tree


def _add_children(node: TreeNode, file_filter: Optional["InclusionFilter"], ancestry: Set[FileIdentifier]) -> None:
    """Recursively attach the children of a directory node."""
    try:
        with os.scandir(node.file_path) as it:
            entries = sorted(it, key=lambda e: e.name)
    except OSError as e:
        logger.warning("Could not list %s: %s", node.relative_path or node.file_path, e)
        return

    directories: List[os.DirEntry] = []
    files: List[os.DirEntry] = []
    for entry in entries:
        try:
            if entry.is_dir():
                directories.append(entry)
            elif entry.is_file():
                files.append(entry)
        except OSError as e:
            logger.warning("Could not stat %s: %s", entry.path, e)

    for entry in directories:
        child_relative = _join(node.relative_path, entry.name)
        child_path = Path(entry.path)
        file_id = FileIdentifier.for_path(child_path)

        if file_id is not None and file_id in ancestry:
            logger.warning("Symlink loop at %s, not descending", child_relative)
            TreeNode(
                entry.name, parent=node, file_path=child_path, relative_path=child_relative, is_dir=True, is_loop=True
            )
            continue

        child = TreeNode(entry.name, parent=node, file_path=child_path, relative_path=child_relative, is_dir=True)
        if file_id is not None:
            ancestry.add(file_id)
        try:
            _add_children(child, file_filter, ancestry)
        finally:
            if file_id is not None:
                ancestry.discard(file_id)

    for entry in files:
        if file_filter is not None and not file_filter.keep(entry.path):
            continue
        TreeNode(
            entry.name,
            parent=node,
            file_path=Path(entry.path),
            relative_path=_join(node.relative_path, entry.name),
        )


def _join(parent_relative: str, name: str) -> str:
    return f"{parent_relative}/{name}" if parent_relative else name


def _prune_empty_directories(tree: TreeNode) -> None:
    for child in list(tree.children):
        if not child.is_dir:
            continue
        if child.has_files():
            _prune_empty_directories(child)
        else:
            child.parent = None


def iter_files(tree: TreeNode) -> Iterator[TreeNode]:
    """Yield the file nodes of a tree ordered by relative path.

    The order is plain string order of the relative paths, so ``a.py`` comes
    before ``src/b.py``, which comes before ``z.py``. It differs from the
    directories-first order used for rendering.
    """
    files = [node for node in PreOrderIter(tree) if not node.is_dir]
    yield from sorted(files, key=lambda node: node.relative_path)


def iter_file_entries(tree: TreeNode, sniffer: Optional["ContentSniffer"] = None) -> Iterator[FileEntry]:
    """Yield a classified FileEntry for every file in the tree, in relative path order.

    Args:
        tree: A tree produced by build_tree.
        sniffer: Content classifier. Defaults to sniff_content.

    Yields:
        One FileEntry per file. When sniffing fails the entry has no kind and
        carries the error instead.
    """
    classify = sniffer if sniffer is not None else sniff_content
    for node in iter_files(tree):
        try:
            kind = classify(node.file_path)
        except OSError as e:
            logger.warning("Could not classify %s: %s", node.relative_path, e)
            yield FileEntry(node.file_path, node.relative_path, sniff_error=e)
        else:
            yield FileEntry(node.file_path, node.relative_path, kind=kind)
