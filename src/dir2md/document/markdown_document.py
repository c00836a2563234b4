"""Markdown formatting of the project documentation.

The document is produced in pieces so that it can be written out while the
files are read one after another:

1. header      - title, timestamp, scanned directory, pattern strings
2. tree        - fenced ASCII diagram of the filtered tree
3. file        - one numbered section per documented file
4. footer      - summary with the file count
"""

import logging
from typing import Iterable, Optional

from dir2md.document.language import language_for
from dir2md.file_system_tree.file_entry import FileEntry

logger = logging.getLogger(__name__)

BINARY_PLACEHOLDER = "[Binary file or unreadable content]"
READ_ERROR_PLACEHOLDER = "[Error: Could not read file]"
TOOL_NAME = "Project Documentation Generator"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

FENCE = "```"


class MarkdownDocument:
    """Formats the pieces of a project documentation document.

    Every method returns a string ready to be written; nothing here touches
    the output file. File contents are read as UTF-8 with undecodable bytes
    replaced, so any file that was classified as text can be embedded.

    Attributes:
        encoding (str): Encoding used to read documented files.

    Example:
        >>> doc = MarkdownDocument()
        >>> print(doc.format_footer(2, "2024-01-01 10:00:00"), end="")
        <BLANKLINE>
        ## ✨ Summary
        <BLANKLINE>
        - **Total Files Documented:** 2
        - **Generated:** 2024-01-01 10:00:00
        - **Tool:** Project Documentation Generator
        <BLANKLINE>
        ---
        <BLANKLINE>
        *This documentation was automatically generated. Please review the content before use.*
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    def format_header(
        self,
        timestamp: str,
        directory: str,
        includes: Optional[str] = None,
        excludes: Optional[str] = None,
    ) -> str:
        """Format the title block.

        The include and exclude lines are always present; they are left empty
        when the corresponding patterns were not given.

        Args:
            timestamp: Generation time, already formatted.
            directory: Absolute path of the scanned directory.
            includes: Raw include pattern string, if any.
            excludes: Raw exclude pattern string, if any.
        """
        include_line = f"Includes: `{includes}`" if includes else ""
        exclude_line = f"Excludes: `{excludes}`" if excludes else ""
        return (
            "# 📋 Project Documentation\n"
            "\n"
            f"Generated on: {timestamp}\n"
            f"Directory: `{directory}`\n"
            f"{include_line}\n"
            f"{exclude_line}\n"
            "\n"
            "---\n"
            "\n"
        )

    def format_tree(self, tree_lines: Iterable[str]) -> str:
        """Format the tree section, followed by the heading of the file contents section.

        The first line is the root. The lines below it always take at least one
        line of the block, so a root without children is followed by an empty line.
        """
        root_line, *child_lines = tree_lines
        children = "\n".join(child_lines)
        return (
            "## 🌳 1. PROJECT TREE\n"
            "\n"
            f"{FENCE}\n"
            f"{root_line}\n"
            f"{children}\n"
            f"{FENCE}\n"
            "\n"
            "---\n"
            "\n"
            "## 📄 2. FILE CONTENTS\n"
            "\n"
        )

    def format_file(self, number: int, entry: FileEntry) -> str:
        """Format the section of one documented file.

        Binary files and files that could not be classified get a placeholder
        in an untagged fence. Text files get a fence tagged with the language
        of their extension; if reading them fails the fence holds an error
        placeholder instead of the contents.

        Args:
            number: Sequential number of the file, starting at 1.
            entry: The classified file.
        """
        heading = f"### 📄 File {number}: `{entry.relative_path}`\n\n"

        if not entry.is_documentable:
            body = f"{FENCE}\n{BINARY_PLACEHOLDER}\n{FENCE}\n"
        else:
            content = self.read_content(entry)
            if content is None:
                content = f"{READ_ERROR_PLACEHOLDER}\n"
            body = f"{FENCE}{language_for(entry.relative_path)}\n{content}\n{FENCE}\n"

        return f"{heading}{body}\n---\n\n"

    def read_content(self, entry: FileEntry) -> Optional[str]:
        """Read a documented file, returning None if it cannot be read."""
        try:
            with open(entry.path, "r", encoding=self.encoding, errors="replace", newline="") as f:
                return f.read()
        except OSError as e:
            logger.warning("Could not read %s: %s", entry.relative_path, e)
            return None

    def format_footer(self, file_count: int, timestamp: str) -> str:
        """Format the closing summary."""
        return (
            "\n"
            "## ✨ Summary\n"
            "\n"
            f"- **Total Files Documented:** {file_count}\n"
            f"- **Generated:** {timestamp}\n"
            f"- **Tool:** {TOOL_NAME}\n"
            "\n"
            "---\n"
            "\n"
            "*This documentation was automatically generated. Please review the content before use.*\n"
        )
