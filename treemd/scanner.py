# treemd/scanner.py

"""
Directory scanning and inclusion decisions.

This module walks a directory tree and decides, for every entry, whether it
belongs in the document. It produces two parallel, pre-ordered outputs:

- an outline of ``#``-prefixed lines, one per included file and per directory
  that has at least one included descendant,
- the list of ``(name, text)`` content entries for the included files.

An entry is excluded when its bare name is one of :data:`ALWAYS_EXCLUDED`, or
when its path relative to the scan root is in the git ignored set. Excluded
directories are never descended into. Directories whose subtree yields no
content are pruned, transitively, so the outline never shows an empty branch.

Filesystem errors are not swallowed here: they surface as
:class:`~treemd.errors.ScanError` naming the failing path.
"""


from __future__ import annotations

import logging
import os
import stat
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, NamedTuple

from treemd.content import ContentEntry, is_text_file, read_text
from treemd.errors import ScanError
from treemd.ignore import resolve
from treemd.tree import SEPARATOR

logger = logging.getLogger(__name__)

#: Entry names excluded everywhere, whatever git says about them.
ALWAYS_EXCLUDED: frozenset[str] = frozenset(
    {
        ".git",
        ".gitignore",
        ".dockerignore",
        "package-lock.json",
    }
)


def normalize_extensions(extensions: Iterable[str]) -> frozenset[str]:
    """Strip whitespace and leading dots: ``[".py", " md"]`` -> ``{"py", "md"}``."""
    return frozenset(e.strip().lstrip(".") for e in extensions if e.strip().lstrip("."))


@dataclass(frozen=True)
class InclusionPolicy:
    """
    Which files a scan includes.

    A file is included when its extension is allowed *and* ``is_text`` accepts
    it. The extension test runs first, so files with a disallowed extension
    are never opened.

    Attributes
    ----------
    extensions : frozenset[str]
        Allowed extensions without the leading dot. Empty allows everything.
    is_text : Callable[[pathlib.Path], bool]
        Text-detection predicate.
    sort_entries : bool
        Visit directory entries in case-insensitive name order instead of the
        order the filesystem lists them in.
    """

    extensions: frozenset[str] = frozenset()
    is_text: Callable[[Path], bool] = is_text_file
    sort_entries: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "extensions", normalize_extensions(self.extensions))

    def allows_extension(self, name: str) -> bool:
        return not self.extensions or Path(name).suffix[1:] in self.extensions

    def includes(self, path: Path) -> bool:
        return self.allows_extension(path.name) and self.is_text(path)


class ScanResult(NamedTuple):
    """Outline lines and content entries, both in pre-order."""

    outline: list[str]
    contents: list[ContentEntry]


def outline_line(name: str, depth: int) -> str:
    """
    Outline node for ``name`` at ``depth``; depth 0 is a child of the root.

    The ``#`` run and the name are separated by ``/``, which cannot occur in
    an entry name, so names starting with ``#`` keep their depth.
    """
    return "#" * (depth + 2) + SEPARATOR + name


def should_exclude(name: str, relative: str, ignored: frozenset[str]) -> bool:
    return name in ALWAYS_EXCLUDED or relative in ignored


def _list_dir(directory: Path, sort_entries: bool) -> list[str]:
    try:
        names = os.listdir(directory)
    except OSError as exc:
        raise ScanError(directory, f"Cannot list directory ({exc.strerror or exc})") from exc
    if sort_entries:
        names.sort(key=str.casefold)
    return names


def _mode(path: Path) -> int:
    # Follows symlinks: a link to a directory is walked as a directory.
    try:
        return path.stat().st_mode
    except OSError as exc:
        raise ScanError(path, f"Cannot stat entry ({exc.strerror or exc})") from exc


def _include_file(path: Path, policy: InclusionPolicy) -> bool:
    try:
        return policy.includes(path)
    except OSError as exc:
        raise ScanError(path, f"Cannot inspect file ({exc.strerror or exc})") from exc


def _read(path: Path) -> str:
    try:
        return read_text(path)
    except OSError as exc:
        raise ScanError(path, f"Cannot read file ({exc.strerror or exc})") from exc


def scan(
    root: Path,
    current: Path | None = None,
    policy: InclusionPolicy | None = None,
    ignored: frozenset[str] | None = None,
    depth: int = 0,
) -> ScanResult:
    """
    Recursively collect the outline and contents of a directory.

    On the first call (``ignored`` is ``None``) git is asked once for the
    ignored paths under ``root``; the resulting set is passed down unchanged
    to every recursive call.

    For each entry of ``current``:

    - skip it (and its subtree) if its name is in :data:`ALWAYS_EXCLUDED` or
      its root-relative path is in ``ignored``;
    - for a directory, scan it one level deeper and keep it only if that
      yields content, emitting its outline node followed by its own outline;
    - for a file, keep it if ``policy`` includes it, emitting an outline node
      and a content entry.

    The file nodes of the outline are therefore always in the same order as
    the content entries.

    Parameters
    ----------
    root : pathlib.Path
        Scan root. Relative paths and ignore lookups are computed from it.
    current : pathlib.Path | None, optional
        Directory to list. Defaults to ``root``. Must be ``root`` or lie
        lexically beneath it.
    policy : InclusionPolicy | None, optional
        File inclusion policy. Defaults to ``InclusionPolicy()``.
    ignored : frozenset[str] | None, optional
        Root-relative POSIX paths to exclude. Resolved from git when ``None``.
    depth : int, default=0
        Nesting level of ``current``'s children in the outline.

    Returns
    -------
    ScanResult
        ``(outline, contents)``.

    Raises
    ------
    ScanError
        If an entry cannot be listed, stat-ed, inspected or read.
    """

    root = Path(root).absolute()
    current = root if current is None else Path(current).absolute()
    if policy is None:
        policy = InclusionPolicy()
    if ignored is None:
        ignored = resolve(root)

    outline: list[str] = []
    contents: list[ContentEntry] = []

    for name in _list_dir(current, policy.sort_entries):
        path = current / name
        relative = path.relative_to(root).as_posix()

        if should_exclude(name, relative, ignored):
            logger.debug("Excluded %s", relative)
            continue

        mode = _mode(path)
        if stat.S_ISDIR(mode):
            sub = scan(root, path, policy, ignored, depth + 1)
            if sub.contents:
                outline.append(outline_line(name, depth))
                outline.extend(sub.outline)
                contents.extend(sub.contents)
            else:
                logger.debug("Pruned %s: no included files", relative)
        elif not stat.S_ISREG(mode):
            logger.debug("Skipped %s: not a regular file", relative)
        elif _include_file(path, policy):
            outline.append(outline_line(name, depth))
            contents.append(ContentEntry(name, _read(path)))
        else:
            logger.debug("Skipped %s", relative)

    return ScanResult(outline, contents)
