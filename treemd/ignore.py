# treemd/ignore.py

"""
Git ignore-set resolution.

This module asks git which paths under a directory are ignored, and returns
them relative to that directory so the scanner can test membership with the
same relative paths it computes while walking.

The resolver is fail-open: when the directory is not inside a git work tree,
when git is missing, or when any query fails, the result is an empty set.
Ignore status only refines filtering, it must never abort a scan.
"""


from __future__ import annotations

import logging
import os
import subprocess
from pathlib import Path, PurePosixPath

logger = logging.getLogger(__name__)


def _git(root: Path, *args: str) -> str:
    out = subprocess.run(
        ["git", *args],
        cwd=str(root),
        capture_output=True,
        check=True,
    )
    # Same decoding as os.listdir, so undecodable names still match.
    return os.fsdecode(out.stdout)


def _ignored_entries(porcelain: str) -> list[str]:
    """
    Extract ignored paths from ``git status --porcelain -z`` output.

    Records are NUL-separated ``XY PATH`` items. Rename and copy records carry
    an extra NUL-separated source path which is skipped.
    """

    entries: list[str] = []
    records = iter(porcelain.split("\0"))
    for record in records:
        if len(record) < 4:
            continue
        status, path = record[:2], record[3:]
        if status == "!!":
            entries.append(path)
        elif status[0] in "RC":
            next(records, None)
    return entries


def _query_ignored(root: Path) -> frozenset[str]:
    """
    Query git for the ignored paths under ``root``.

    Raises on any failure; :func:`resolve` is the fail-open wrapper.
    """

    root = root.resolve()
    if _git(root, "rev-parse", "--is-inside-work-tree").strip() != "true":
        raise ValueError(f"Not inside a git work tree: {root}")

    toplevel = Path(_git(root, "rev-parse", "--show-toplevel").strip()).resolve()
    prefix = PurePosixPath(root.relative_to(toplevel).as_posix())

    porcelain = _git(
        root,
        "status",
        "--porcelain",
        "-z",
        "--ignored",
        "--untracked-files=all",
        "--",
        str(root),
    )

    ignored: set[str] = set()
    for entry in _ignored_entries(porcelain):
        # Ignored directories are reported with a trailing slash.
        path = PurePosixPath(entry.rstrip("/"))
        if prefix != PurePosixPath("."):
            if not path.is_relative_to(prefix) or path == prefix:
                continue
            path = path.relative_to(prefix)
        ignored.add(path.as_posix())
    return frozenset(ignored)


def resolve(root: Path) -> frozenset[str]:
    """
    Return the paths under ``root`` that git considers ignored.

    Paths are POSIX-style and relative to ``root`` (``"build"``,
    ``"src/generated.py"``). Directories are reported without a trailing slash.

    Any failure is deliberately mapped to an empty set: outside a git work
    tree, or with a broken git setup, the scan goes on with the built-in
    exclusions only.

    Parameters
    ----------
    root : pathlib.Path
        Directory being scanned.

    Returns
    -------
    frozenset[str]
        Ignored paths relative to ``root``; empty when unknown.
    """

    try:
        ignored = _query_ignored(Path(root))
    except (OSError, ValueError, subprocess.SubprocessError) as exc:
        logger.debug("No git ignore information for %s: %s", root, exc)
        return frozenset()
    logger.debug("git reports %d ignored path(s) under %s", len(ignored), root)
    return ignored
