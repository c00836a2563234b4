"""Safe output writing for the documentation generator.

This module provides a writing interface that checks for interruption
before every write and keeps track of how much has been written.
"""

import types
from pathlib import Path
from typing import IO, Optional, Type

from dir2md.cli.signal_handler import InterruptHandler
from dir2md.types import PathType


class SafeWriter:
    """Interrupt-aware writer for the output document.

    The output file is opened (and truncated) once, written in order, and
    closed when the context manager exits, also when an error aborts the run.

    Attributes:
        path (Path): The output file.
        bytes_written (int): Number of encoded bytes written so far.

    Example:
        >>> import tempfile, os
        >>> with tempfile.TemporaryDirectory() as tmp:
        ...     with SafeWriter(os.path.join(tmp, "out.md")) as writer:
        ...         writer.write("# Title\\n")
        ...     writer.bytes_written
        8
    """

    def __init__(self, path: PathType, interrupt_handler: Optional[InterruptHandler] = None, encoding: str = "utf-8"):
        """Initialize the safe writer.

        Args:
            path: File to write the output to.
            interrupt_handler: Checked before every write; None disables the check.
            encoding: Encoding of the output file.

        Raises:
            OSError: If the file cannot be opened for writing.
        """
        self.path = Path(path)
        self.bytes_written = 0
        self._encoding = encoding
        self._interrupt_handler = interrupt_handler
        self._file: Optional[IO[bytes]] = self.path.open("wb")

    def write(self, data: str) -> None:
        """Write a piece of the document.

        Args:
            data: Text to write.

        Raises:
            KeyboardInterrupt: If SIGINT was received since the last write.
            ValueError: If the writer has been closed.
            OSError: If an I/O error occurs during writing.
        """
        if self._file is None:
            raise ValueError("Cannot write to closed SafeWriter")

        if self._interrupt_handler is not None:
            self._interrupt_handler.check()

        encoded = data.encode(self._encoding)
        self._file.write(encoded)
        self.bytes_written += len(encoded)

    @property
    def closed(self) -> bool:
        return self._file is None

    def close(self) -> None:
        """Close the output file. Closing twice is a no-op."""
        if self._file is None:
            return
        file_obj, self._file = self._file, None
        file_obj.close()

    def __enter__(self) -> "SafeWriter":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[types.TracebackType],
    ) -> None:
        """Close the file.

        If closing fails while an exception is already propagating, the
        original exception is kept.
        """
        try:
            self.close()
        except OSError:
            if exc_type is None:
                raise
