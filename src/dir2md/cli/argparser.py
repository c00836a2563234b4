"""Command-line argument parsing for the dir2md tools.

This module defines the command-line interfaces of the documentation
generator and the archiver, handling argument parsing and validation.
"""

import argparse
import sys
from typing import NoReturn, Optional, Sequence

from dir2md import __version__
from dir2md.archiver import ARCHIVE_NAME
from dir2md.config import DEFAULT_DIRECTORY, DEFAULT_OUTPUT, GeneratorConfig

USAGE_ERROR_EXIT_CODE = 1


class UsageErrorParser(argparse.ArgumentParser):
    """ArgumentParser that exits with status 1 on usage errors.

    argparse itself uses status 2. Both tools report unknown options, like
    every other fatal error, with status 1.
    """

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(USAGE_ERROR_EXIT_CODE, f"{self.prog}: error: {message}\n")


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the documentation generator's argument parser.

    Returns:
        An ArgumentParser instance configured with dir2md's options.
    """
    description = """
    dir2md: Project Documentation Generator.

    Scans a directory, filters its files with include/exclude patterns, and
    writes one Markdown document holding a tree of the project followed by the
    contents of every matched file in a language-tagged code block.

    Pattern rules (the first rule whose shape fits the pattern is used):
    - contains "**"        glob over the relative path ("**" acts like "*")
    - contains "/"         glob over the relative path
    - starts with "."      the relative path ends with the pattern
    - contains "."         glob over the relative path (e.g. "*.py")
    - anything else        the pattern occurs anywhere in the relative path

    Excludes always win over includes. Without includes, every file that is
    not binary is documented.
    """

    epilog = """
    Examples:
      # Document the current directory
      dir2md

      # Skip dependencies and logs
      dir2md --dir=./my-project --excludes="node_modules/**,*.log"

      # Only Python and JavaScript sources
      dir2md --includes="*.py,*.js" --excludes="__pycache__/**,*.pyc"

      # Java sources of a subdirectory into a custom file
      dir2md --dir=./src --includes="**/*.java" --output=java_docs.md
    """

    parser = UsageErrorParser(
        prog="dir2md",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"dir2md {__version__}", help="Show the version and exit"
    )
    parser.add_argument(
        "--dir",
        dest="directory",
        metavar="DIRECTORY",
        default=DEFAULT_DIRECTORY,
        help="Directory to scan (default: current directory).",
    )
    parser.add_argument(
        "--includes",
        metavar="PATTERNS",
        help='Comma-separated list of include patterns (default: all files), e.g. "*.py,*.js,*.md".',
    )
    parser.add_argument(
        "--excludes",
        metavar="PATTERNS",
        help='Comma-separated list of exclude patterns (default: none), e.g. "node_modules/**,*.log".',
    )
    parser.add_argument(
        "--output",
        metavar="FILE",
        default=DEFAULT_OUTPUT,
        help=f"Output markdown file (default: {DEFAULT_OUTPUT}).",
    )
    parser.add_argument(
        "--prune-empty",
        action="store_true",
        help="Leave directories without any documented file out of the tree.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every include/exclude decision to stderr.",
    )

    return parser


def create_archive_parser() -> argparse.ArgumentParser:
    """Create the archiver's argument parser, which takes no functional options."""
    parser = UsageErrorParser(
        prog="dir2md-zip",
        description=(
            f"Zip the current directory into {ARCHIVE_NAME}, excluding the .git directory and "
            "everything matched by the patterns in .gitignore."
        ),
        allow_abbrev=False,
    )
    parser.add_argument(
        "-V", "--version", action="version", version=f"dir2md-zip {__version__}", help="Show the version and exit"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every excluded path to stderr.")
    return parser


def parse_config(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse the generator's arguments.

    Args:
        argv: Arguments to parse. Defaults to ``sys.argv[1:]``.

    Returns:
        The parsed namespace.
    """
    return create_parser().parse_args(argv)


def config_from_args(args: argparse.Namespace) -> GeneratorConfig:
    """Turn parsed arguments into a run configuration."""
    return GeneratorConfig.from_strings(
        directory=args.directory,
        output=args.output,
        includes=args.includes,
        excludes=args.excludes,
        prune_empty=args.prune_empty,
    )
