"""Command line interface for TreeWalkLib.

Usage:
    treewalk print PATH             # List every entry below PATH
    treewalk prune PATH --yes       # Delete PATH and everything below it
    treewalk -v print PATH          # Same, with debug logging on stderr
"""

import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .api import print_tree, prune_tree
from .config import LoggingConfig, configure_logging
from .errors import WalkError

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_WALK_ERROR = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="treewalk",
        description="Walk a directory tree without recursion, printing or pruning it.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="Increase log output (-v info, -vv debug)")
    parser.add_argument("--restore-cwd", action="store_true",
                        help="Return to the starting directory when the walk ends")

    commands = parser.add_subparsers(dest="command", required=True)

    show = commands.add_parser("print", help="Print one line per entry")
    show.add_argument("path", help="Directory to walk")
    show.add_argument("--follow-symlinks", action="store_true",
                      help="Classify entries through symbolic links")
    show.add_argument("--separator", default="/",
                      help="Separator used when building entry paths")

    prune = commands.add_parser("prune", help="Delete a directory tree, leaf first")
    prune.add_argument("path", help="Directory to delete")
    prune.add_argument("--yes", action="store_true",
                       help="Confirm the deletion")

    return parser


def _log_level(verbose: int) -> str:
    if verbose >= 2:
        return "DEBUG"
    if verbose == 1:
        return "INFO"
    return "WARNING"


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the treewalk console script."""
    args = build_parser().parse_args(argv)
    configure_logging(LoggingConfig(level=_log_level(args.verbose)))

    try:
        if args.command == "print":
            print_tree(args.path, stream=sys.stdout, separator=args.separator, keep_records=False,
                       follow_symlinks=args.follow_symlinks, restore_cwd=args.restore_cwd)
        elif args.command == "prune":
            if not args.yes:
                print(f"Refusing to delete {args.path!r} without --yes", file=sys.stderr)
                return EXIT_USAGE
            pruned = prune_tree(args.path, restore_cwd=args.restore_cwd)
            logger.info("Removed %d files and %d directories",
                        pruned.files_removed, pruned.directories_removed)
    except WalkError as e:
        logger.error("%s", e)
        return EXIT_WALK_ERROR
    except ValueError as e:
        logger.error("%s", e)
        return EXIT_USAGE

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
