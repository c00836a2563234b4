"""Command-line interface for the dir2md documentation generator.

This module provides the ``dir2md`` command, which writes a Markdown document
describing a project directory: a tree of the files followed by the contents
of each documented file.

Exit Codes:
    0: Successful completion
    1: Missing scan directory, unknown option, invalid pattern or runtime error
    130: Interrupted by SIGINT (Ctrl+C)

Example:
    # Document the current directory into project_documentation.md
    $ dir2md

    # Document only Python files of ./src, skipping tests
    $ dir2md --dir=./src --includes="*.py" --excludes="tests/**"
"""

import logging
import sys
from typing import Optional, Sequence

from humanfriendly import format_size

from dir2md.cli.argparser import config_from_args, parse_config
from dir2md.cli.safe_writer import SafeWriter
from dir2md.cli.signal_handler import INTERRUPTED_EXIT_CODE, InterruptHandler
from dir2md.exceptions import InvalidPatternError, ScanDirectoryError
from dir2md.generator import DocumentGenerator

logger = logging.getLogger(__name__)


def configure_logging(verbose: bool) -> None:
    """Send library log records to stderr, at DEBUG level when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Main entry point for the dir2md command-line interface.

    Args:
        argv: Command-line arguments without the program name. Defaults to
            ``sys.argv[1:]``.

    Exit codes:
        0: Successful completion
        1: Missing scan directory, unknown option, invalid pattern or runtime error
        130: Interrupted by SIGINT (Ctrl+C)
    """
    args = parse_config(argv)
    configure_logging(args.verbose)

    try:
        config = config_from_args(args)
    except InvalidPatternError as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        sys.exit(1)

    print("🔄 Generating project documentation...")
    print(f"📂 Directory: {config.directory_label}")
    print(f"📝 Output: {config.output_label}")

    try:
        generator = DocumentGenerator(config)
    except ScanDirectoryError as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        with InterruptHandler() as interrupts, SafeWriter(config.output, interrupts) as writer:
            for chunk in generator.stream_document():
                writer.write(chunk)
    except KeyboardInterrupt:
        print("\n⚠️ Interrupted, the documentation is incomplete.", file=sys.stderr)
        sys.exit(INTERRUPTED_EXIT_CODE)
    except Exception as e:
        logger.debug("Documentation run failed", exc_info=True)
        print(f"❌ Error: {e}", file=sys.stderr)
        sys.exit(1)

    print("✅ Documentation generated successfully!")
    print(f"📄 Output file: {config.output_label} ({format_size(writer.bytes_written)})")
    print(f"📊 Total files documented: {generator.file_count}")


if __name__ == "__main__":
    main()
