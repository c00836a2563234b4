"""Run configuration for the documentation generator."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dir2md.patterns import PatternList, parse_patterns

DEFAULT_DIRECTORY = "."
DEFAULT_OUTPUT = "project_documentation.md"


@dataclass(frozen=True)
class GeneratorConfig:
    """Everything one documentation run needs, fixed before the scan starts.

    Attributes:
        directory: The scan root.
        output: Path of the Markdown document to write.
        includes: Parsed include patterns; empty when none were given.
        excludes: Parsed exclude patterns; empty when none were given.
        prune_empty: Hide directories that hold no documented file.
        directory_arg: The scan root exactly as the user typed it, if known.
        output_arg: The output path exactly as the user typed it, if known.

    Example:
        >>> config = GeneratorConfig.from_strings(directory="./src", includes="*.py,*.md")
        >>> config.includes.patterns
        ('*.py', '*.md')
        >>> config.output.name
        'project_documentation.md'
        >>> config.directory_label
        './src'
    """

    directory: Path = Path(DEFAULT_DIRECTORY)
    output: Path = Path(DEFAULT_OUTPUT)
    includes: PatternList = field(default_factory=PatternList)
    excludes: PatternList = field(default_factory=PatternList)
    prune_empty: bool = False
    directory_arg: Optional[str] = None
    output_arg: Optional[str] = None

    @property
    def directory_label(self) -> str:
        """The scan root as shown in progress and error messages."""
        return self.directory_arg if self.directory_arg is not None else str(self.directory)

    @property
    def output_label(self) -> str:
        """The output path as shown in progress messages."""
        return self.output_arg if self.output_arg is not None else str(self.output)

    @classmethod
    def from_strings(
        cls,
        directory: str = DEFAULT_DIRECTORY,
        output: str = DEFAULT_OUTPUT,
        includes: Optional[str] = None,
        excludes: Optional[str] = None,
        prune_empty: bool = False,
    ) -> "GeneratorConfig":
        """Build a configuration from raw option values, keeping the raw paths for display."""
        return cls(
            directory=Path(directory),
            output=Path(output),
            includes=parse_patterns(includes),
            excludes=parse_patterns(excludes),
            prune_empty=prune_empty,
            directory_arg=directory,
            output_arg=output,
        )
