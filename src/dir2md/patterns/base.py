from abc import ABC, abstractmethod


class PatternMatcher(ABC):
    """
    Abstract base class for one classified include/exclude pattern.

    Every pattern given on the command line is classified into exactly one
    concrete matcher. Each matcher applies its own matching rule to a path
    relative to the scan root, using forward slashes as separators.

    Attributes:
        pattern (str): The pattern text exactly as it was given.

    Example:
        >>> class EverythingMatcher(PatternMatcher):
        ...     kind = "everything"
        ...     def matches(self, path: str) -> bool:
        ...         return True
        >>> matcher = EverythingMatcher("*")
        >>> matcher.matches("any/path.txt")
        True
        >>> matcher
        EverythingMatcher('*')
    """

    #: Short name of the matching rule, used in log output.
    kind: str = "abstract"

    def __init__(self, pattern: str) -> None:
        self.pattern = pattern

    @abstractmethod
    def matches(self, path: str) -> bool:
        """
        Determine whether a relative path matches this pattern.

        Args:
            path (str): Path relative to the scan root, with forward slashes.

        Returns:
            bool: True if the path matches, False otherwise.
        """
        pass

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PatternMatcher):
            return NotImplemented
        return type(self) is type(other) and self.pattern == other.pattern

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.pattern))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.pattern!r})"
