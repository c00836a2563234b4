"""Command-line interface for the dir2md archiver.

``dir2md-zip`` zips the current directory into ``archive.zip``. The ``.git``
directory is always left out, and every pattern in ``.gitignore`` is turned
into two exclude rules (the pattern and the pattern followed by ``/*``).

Exit Codes:
    0: Successful completion
    1: Unknown option or runtime error
    130: Interrupted by SIGINT (Ctrl+C)
"""

import logging
import sys
from typing import Optional, Sequence

from humanfriendly import format_size

from dir2md.archiver import ARCHIVE_NAME, ArchiveWriter
from dir2md.cli.argparser import create_archive_parser
from dir2md.cli.main import configure_logging
from dir2md.cli.signal_handler import INTERRUPTED_EXIT_CODE
from dir2md.gitignore import GITIGNORE_NAME, load_exclude_rules

logger = logging.getLogger(__name__)


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Main entry point for the dir2md-zip command-line interface.

    Args:
        argv: Command-line arguments without the program name. Defaults to
            ``sys.argv[1:]``.
    """
    args = create_archive_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        rules = load_exclude_rules(GITIGNORE_NAME)
        print(f"📦 Creating {ARCHIVE_NAME} with {len(rules)} exclude rules...")
        result = ArchiveWriter(".", rules).write(ARCHIVE_NAME)
    except KeyboardInterrupt:
        print("\n⚠️ Interrupted, the archive is incomplete.", file=sys.stderr)
        sys.exit(INTERRUPTED_EXIT_CODE)
    except Exception as e:
        logger.debug("Archive creation failed", exc_info=True)
        print(f"❌ Error: {e}", file=sys.stderr)
        sys.exit(1)

    print(
        f"✅ Created {result.path}: {result.files_added} files, "
        f"{result.directories_added} directories, {format_size(result.size_bytes)}"
    )


if __name__ == "__main__":
    main()
