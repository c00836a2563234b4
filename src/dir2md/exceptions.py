class Dir2MdError(Exception):
    """
    Base class for the errors dir2md raises to signal a fatal condition.

    Per-file problems (binary or unreadable files) are never raised; they are
    reported inline in the generated document instead. Subclasses of this
    exception abort the whole run and are mapped to exit codes by the CLI.

    Example:
        >>> issubclass(ScanDirectoryError, Dir2MdError)
        True
    """

    pass


class ScanDirectoryError(Dir2MdError):
    """
    Exception raised when the directory to scan does not exist or is not a directory.

    Attributes:
        directory (str): The directory as it was given by the caller.

    Example:
        >>> error = ScanDirectoryError("missing/dir")
        >>> str(error)
        "Directory 'missing/dir' does not exist!"
    """

    def __init__(self, directory: str) -> None:
        """
        Initialize the exception with the offending directory.

        Args:
            directory (str): The directory as it was given by the caller.
        """
        self.directory = directory
        super().__init__(f"Directory '{directory}' does not exist!")


class InvalidPatternError(Dir2MdError, ValueError):
    """
    Exception raised when an include/exclude pattern cannot be used for matching.

    The empty pattern is always rejected, since it would otherwise match every
    path through the substring rule.

    Attributes:
        pattern (str): The rejected pattern.

    Example:
        >>> error = InvalidPatternError("", "empty pattern")
        >>> str(error)
        "Invalid pattern '': empty pattern"
        >>> isinstance(error, ValueError)
        True
    """

    def __init__(self, pattern: str, reason: str) -> None:
        """
        Initialize the exception with the rejected pattern and the reason.

        Args:
            pattern (str): The rejected pattern.
            reason (str): Why the pattern was rejected.
        """
        self.pattern = pattern
        super().__init__(f"Invalid pattern '{pattern}': {reason}")
