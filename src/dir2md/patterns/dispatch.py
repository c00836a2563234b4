"""Pattern classification and comma-separated pattern lists."""

from dataclasses import dataclass
from typing import Iterator, Optional, Sequence, Tuple, Type

from dir2md.exceptions import InvalidPatternError

from .base import PatternMatcher
from .matchers import DotSuffix, DoubleStarGlob, ExtensionGlob, SingleLevelGlob, Substring


def classify(pattern: str) -> PatternMatcher:
    """Classify a pattern into the matcher variant that will be used for it.

    The rules are tried in a fixed priority order, and the first one whose
    shape test passes wins:

    1. contains ``**``          -> DoubleStarGlob
    2. contains ``/``           -> SingleLevelGlob
    3. starts with ``.``        -> DotSuffix
    4. contains ``.``           -> ExtensionGlob
    5. anything else            -> Substring

    Args:
        pattern: The pattern text. Must not be empty.

    Returns:
        The matcher for the pattern.

    Raises:
        InvalidPatternError: If the pattern is empty.

    Example:
        >>> classify("**/*.java")
        DoubleStarGlob('**/*.java')
        >>> classify("src/*.c")
        SingleLevelGlob('src/*.c')
        >>> classify(".gitignore")
        DotSuffix('.gitignore')
        >>> classify("*.log")
        ExtensionGlob('*.log')
        >>> classify("build")
        Substring('build')
    """
    if not pattern:
        raise InvalidPatternError(pattern, "empty patterns match nothing meaningful")

    matcher_class: Type[PatternMatcher]
    if "**" in pattern:
        matcher_class = DoubleStarGlob
    elif "/" in pattern:
        matcher_class = SingleLevelGlob
    elif pattern.startswith("."):
        matcher_class = DotSuffix
    elif "." in pattern:
        matcher_class = ExtensionGlob
    else:
        matcher_class = Substring
    return matcher_class(pattern)


def matches(path: str, pattern: str) -> bool:
    """Check a single relative path against a single pattern.

    Example:
        >>> matches("config/.env", ".env")
        True
        >>> matches("envvar", ".env")
        False
    """
    return classify(pattern).matches(path)


@dataclass(frozen=True)
class PatternList:
    """Immutable, ordered list of classified patterns.

    Attributes:
        matchers: The classified patterns, in the order they were given.
        source: The raw text the list was parsed from, or None if no list was given.

    Example:
        >>> patterns = parse_patterns("*.py, docs/*.md")
        >>> len(patterns)
        2
        >>> patterns.matches_any("tool/run.py")
        True
        >>> patterns.matches_any("README.md")
        False
    """

    matchers: Tuple[PatternMatcher, ...] = ()
    source: Optional[str] = None

    def __len__(self) -> int:
        return len(self.matchers)

    def __iter__(self) -> Iterator[PatternMatcher]:
        return iter(self.matchers)

    def __bool__(self) -> bool:
        return bool(self.matchers)

    @property
    def patterns(self) -> Tuple[str, ...]:
        return tuple(m.pattern for m in self.matchers)

    def first_match(self, path: str) -> Optional[PatternMatcher]:
        """Return the first matcher that accepts the path, or None."""
        for matcher in self.matchers:
            if matcher.matches(path):
                return matcher
        return None

    def matches_any(self, path: str) -> bool:
        return self.first_match(path) is not None

    @classmethod
    def from_patterns(cls, patterns: Sequence[str], source: Optional[str] = None) -> "PatternList":
        return cls(tuple(classify(p) for p in patterns), source)


def parse_patterns(text: Optional[str]) -> PatternList:
    """Parse a comma-separated pattern argument.

    Entries are stripped of surrounding whitespace and empty entries (for
    example from a trailing comma) are dropped. Every remaining entry is
    classified immediately.

    Args:
        text: The raw argument value, or None when the option was not given.

    Returns:
        The parsed pattern list. An absent or blank argument gives an empty list.

    Example:
        >>> parse_patterns(" *.py ,, node_modules/** ").patterns
        ('*.py', 'node_modules/**')
        >>> bool(parse_patterns(None))
        False
    """
    if text is None or not text.strip():
        return PatternList(source=text or None)
    entries = [entry.strip() for entry in text.split(",")]
    return PatternList.from_patterns([entry for entry in entries if entry], source=text)
