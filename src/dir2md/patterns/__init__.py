"""Include/exclude pattern matching with five shape-based matching rules."""

from .base import PatternMatcher
from .dispatch import PatternList, classify, matches, parse_patterns
from .matchers import DotSuffix, DoubleStarGlob, ExtensionGlob, SingleLevelGlob, Substring

__all__ = [
    "DotSuffix",
    "DoubleStarGlob",
    "ExtensionGlob",
    "PatternList",
    "PatternMatcher",
    "SingleLevelGlob",
    "Substring",
    "classify",
    "matches",
    "parse_patterns",
]
