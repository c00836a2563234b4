"""ASCII-art rendering of a documentation tree."""

from typing import Iterator

from anytree import ContStyle, RenderTree

from dir2md.file_system_tree.tree_node import TreeNode


def render_tree(tree: TreeNode) -> Iterator[str]:
    """Generate the tree diagram one line at a time.

    The first line is the root name followed by ``/``. Every other entry gets
    ``├── `` or, for the last sibling at its level, ``└── ``; entries below a
    last sibling are indented with four spaces instead of ``│   ``. Children
    are rendered in the order the builder attached them.

    Args:
        tree: Root node returned by build_tree.

    Yields:
        Lines of the diagram, without trailing newlines.

    Example:
        >>> from pathlib import Path
        >>> root = TreeNode("project", file_path=Path("project"), is_dir=True)
        >>> src = TreeNode("src", parent=root, file_path=Path("project/src"), is_dir=True)
        >>> _ = TreeNode("main.py", parent=src, file_path=Path("project/src/main.py"))
        >>> _ = TreeNode("README.md", parent=root, file_path=Path("project/README.md"))
        >>> print("\\n".join(render_tree(root)))
        project/
        ├── src/
        │   └── main.py
        └── README.md
    """
    for prefix, _fill, node in RenderTree(tree, style=ContStyle()):
        yield f"{prefix}{node.display_name}"


def tree_text(tree: TreeNode) -> str:
    """Return the complete diagram as one string, lines joined by newlines."""
    return "\n".join(render_tree(tree))
