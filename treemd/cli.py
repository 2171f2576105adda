# treemd/cli.py

"""Command line entry point: ``treemd [directory] [-e EXT,...] [-s]``."""


from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from treemd.document import generate_document
from treemd.errors import TreemdError
from treemd.tokens import count_tokens

logger = logging.getLogger(__name__)

EPILOG = """\
Usage examples:
  $ treemd
  $ treemd /path/to/directory
  $ treemd -e py,md
  $ treemd /path/to/directory -e py,md
  $ treemd -s
  $ treemd | pbcopy

Caveats:
  - This tool respects the git ignore rules of the scanned directory.
  - It always excludes .git, .gitignore, .dockerignore and package-lock.json.
  - Only text files are included in the output.
"""


def split_extensions(value: str | None) -> list[str]:
    if not value:
        return []
    return [e for e in value.split(",") if e.strip()]


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="treemd",
        description="Generate a markdown representation of a directory structure and file contents",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("directory", nargs="?", default=".", help="Directory to scan (default: current directory).")
    p.add_argument(
        "-e",
        "--extensions",
        type=str,
        default=None,
        help="Comma-separated list of file extensions to include.",
    )
    p.add_argument("-s", "--silent", action="store_true", help="Suppress token count output.")
    p.add_argument(
        "--sort",
        action="store_true",
        help="List entries in case-insensitive name order instead of filesystem order.",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Log scan decisions to stderr.")
    return p


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(levelname)s %(name)s: %(message)s",
        )

    try:
        output = generate_document(
            args.directory,
            extensions=split_extensions(args.extensions),
            sort_entries=args.sort,
        )
    except (TreemdError, OSError) as exc:
        logger.debug("Scan of %s failed", args.directory, exc_info=True)
        sys.stderr.write(f"Error: {exc}\n")
        return 1

    sys.stdout.write(output + "\n")

    if not args.silent:
        try:
            tokens = count_tokens(output)
        except (OSError, ValueError) as exc:
            # The encoding is downloaded on first use.
            logger.debug("Token count failed", exc_info=True)
            sys.stderr.write(f"Error: Cannot count tokens: {exc}\n")
            return 1
        sys.stderr.write(f"Token count: {tokens}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
