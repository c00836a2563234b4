"""Project documentation generation with streaming output.

This module ties the pieces together: the configuration decides what is
scanned, the inclusion filter and tree builder decide what is documented,
and the Markdown document formats the result piece by piece.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Callable, Iterator, List, Optional

from dir2md.config import GeneratorConfig
from dir2md.document.markdown_document import TIMESTAMP_FORMAT, MarkdownDocument
from dir2md.exceptions import ScanDirectoryError
from dir2md.file_system_tree.content_sniffer import sniff_content
from dir2md.file_system_tree.tree_builder import build_tree, iter_file_entries
from dir2md.file_system_tree.tree_node import TreeNode
from dir2md.file_system_tree.tree_renderer import render_tree
from dir2md.inclusion_filter import ContentSniffer, InclusionFilter

logger = logging.getLogger(__name__)


class DocumentGenerator:
    """Streaming generator of a project documentation document.

    The tree is built lazily on first use and reused afterwards, so the tree
    section and the file sections always describe the same set of files.
    The document can be streamed only once; the file count is final after
    streaming has finished.

    Attributes:
        config (GeneratorConfig): The run configuration.
        root (Path): Absolute path of the scan root.

    Example:
        >>> config = GeneratorConfig.from_strings(directory="src", includes="*.py")  # doctest: +SKIP
        >>> generator = DocumentGenerator(config)  # doctest: +SKIP
        >>> with open("docs.md", "w") as f:  # doctest: +SKIP
        ...     for chunk in generator.stream_document():
        ...         _ = f.write(chunk)
        >>> generator.file_count  # doctest: +SKIP
        12

    Raises:
        ScanDirectoryError: If the configured directory does not exist.
    """

    def __init__(
        self,
        config: GeneratorConfig,
        *,
        sniffer: ContentSniffer = sniff_content,
        clock: Callable[[], datetime] = datetime.now,
        document: Optional[MarkdownDocument] = None,
    ) -> None:
        """Initialize the generator.

        Args:
            config: What to scan and where the document goes.
            sniffer: Content classifier, used both for filtering and for
                choosing between contents and the binary placeholder.
            clock: Source of the timestamps written into the document.
            document: Formatter for the document pieces.

        Raises:
            ScanDirectoryError: If the configured directory does not exist.
        """
        if not config.directory.is_dir():
            raise ScanDirectoryError(config.directory_label)

        self.config = config
        self.root = config.directory.resolve()
        self._sniffer = sniffer
        self._clock = clock
        self._document = document if document is not None else MarkdownDocument()
        self._filter = InclusionFilter(
            config.directory,
            includes=config.includes,
            excludes=config.excludes,
            sniffer=sniffer,
            always_drop=[config.output],
        )
        self._tree: Optional[TreeNode] = None
        self._file_count = 0
        self._streamed = False

    @property
    def tree(self) -> TreeNode:
        """The filtered tree of the scan root, built on first access."""
        if self._tree is None:
            logger.debug("Building tree for %s", self.root)
            self._tree = build_tree(self.config.directory, self._filter, prune_empty=self.config.prune_empty)
        return self._tree

    @property
    def file_count(self) -> int:
        """Number of file sections produced so far."""
        return self._file_count

    def tree_lines(self) -> List[str]:
        return list(render_tree(self.tree))

    def _timestamp(self) -> str:
        return self._clock().strftime(TIMESTAMP_FORMAT)

    def stream_document(self) -> Iterator[str]:
        """Stream the document: header, tree, one section per file, footer.

        Raises:
            RuntimeError: If the document has already been streamed.
        """
        if self._streamed:
            raise RuntimeError("Document has already been streamed")
        self._streamed = True

        yield self._document.format_header(
            self._timestamp(),
            str(self.root),
            includes=self.config.includes.source,
            excludes=self.config.excludes.source,
        )
        yield self._document.format_tree(self.tree_lines())

        for entry in iter_file_entries(self.tree, self._sniffer):
            self._file_count += 1
            logger.debug("Documenting %s", entry.relative_path)
            yield self._document.format_file(self._file_count, entry)

        yield self._document.format_footer(self._file_count, self._timestamp())

    def render(self) -> str:
        """Return the complete document as a single string."""
        return "".join(self.stream_document())
