"""Signal handling utilities for the dir2md command-line tools.

This module lets a run be interrupted with Ctrl+C between two writes, so the
document on disk always ends at a section boundary.
"""

import signal
import types
from threading import Event
from typing import Any, Optional, Type

INTERRUPTED_EXIT_CODE = 130


class InterruptHandler:
    """Records SIGINT instead of raising KeyboardInterrupt mid-write.

    Use it as a context manager around the work. The first SIGINT only sets
    ``interrupted``; a second one falls through to the original handler, so
    a stuck run can still be killed with another Ctrl+C.

    Attributes:
        interrupted: Event that is set when SIGINT has been received.

    Example:
        >>> handler = InterruptHandler()
        >>> with handler:
        ...     handler.handle_sigint(signal.SIGINT, None)
        >>> handler.interrupted.is_set()
        True
    """

    def __init__(self) -> None:
        self.interrupted = Event()
        self._original_handler: Any = None

    def handle_sigint(self, signum: int, frame: Optional[types.FrameType]) -> None:
        """Handle SIGINT.

        Args:
            signum: The signal number.
            frame: The current stack frame.
        """
        self.interrupted.set()
        if self._original_handler is not None:
            signal.signal(signal.SIGINT, self._original_handler)

    def check(self) -> None:
        """Raise KeyboardInterrupt if SIGINT has been received."""
        if self.interrupted.is_set():
            raise KeyboardInterrupt()

    def __enter__(self) -> "InterruptHandler":
        self._original_handler = signal.getsignal(signal.SIGINT)
        signal.signal(signal.SIGINT, self.handle_sigint)
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[types.TracebackType],
    ) -> None:
        if self._original_handler is not None:
            signal.signal(signal.SIGINT, self._original_handler)
            self._original_handler = None
