"""The five pattern matcher variants, in the order they are tried during classification."""

from fnmatch import fnmatchcase

from .base import PatternMatcher


class DoubleStarGlob(PatternMatcher):
    """Shell glob for patterns containing ``**``.

    The whole relative path must match. ``**`` gets no special treatment: like
    ``*`` it matches any run of characters, including ``/``, so the slashes
    written around it still have to be present in the path.

    Example:
        >>> matcher = DoubleStarGlob("src/**/*.go")
        >>> matcher.matches("src/a/b/c.go")
        True
        >>> matcher.matches("src/c.go"), matcher.matches("lib/a.go")
        (False, False)
        >>> DoubleStarGlob("node_modules/**").matches("node_modules/pkg/index.js")
        True
    """

    kind = "double-star glob"

    def matches(self, path: str) -> bool:
        return fnmatchcase(path, self.pattern)


class SingleLevelGlob(PatternMatcher):
    """Shell glob for patterns containing a ``/``.

    The whole relative path must match the pattern. There is no recursive
    ``**`` handling here; ``*`` and ``?`` behave as in ``fnmatch``.

    Example:
        >>> SingleLevelGlob("docs/*.md").matches("docs/index.md")
        True
        >>> SingleLevelGlob("docs/*.md").matches("src/docs/index.md")
        False
    """

    kind = "single-level glob"

    def matches(self, path: str) -> bool:
        return fnmatchcase(path, self.pattern)


class DotSuffix(PatternMatcher):
    """Suffix test for patterns starting with a dot.

    Meant for dotfiles, but any relative path ending with the pattern text matches.

    Example:
        >>> matcher = DotSuffix(".env")
        >>> matcher.matches("config/.env"), matcher.matches(".env"), matcher.matches("envvar")
        (True, True, False)
    """

    kind = "dot suffix"

    def matches(self, path: str) -> bool:
        return path.endswith(self.pattern)


class ExtensionGlob(PatternMatcher):
    """Shell glob for extension-style patterns such as ``*.py``.

    Matches against the whole relative path, so ``*`` also spans directories.

    Example:
        >>> ExtensionGlob("*.py").matches("src/pkg/module.py")
        True
        >>> ExtensionGlob("*.py").matches("setup.cfg")
        False
    """

    kind = "extension glob"

    def matches(self, path: str) -> bool:
        return fnmatchcase(path, self.pattern)


class Substring(PatternMatcher):
    """Fallback rule: the pattern text appears anywhere in the relative path.

    Example:
        >>> Substring("node_modules").matches("web/node_modules/react/index.js")
        True
        >>> Substring("vendor").matches("src/main.go")
        False
    """

    kind = "substring"

    def matches(self, path: str) -> bool:
        return self.pattern in path
