# treemd/content.py

"""
File content utilities.

This module holds the content side of a treemd document:

- a fast heuristic telling text files from binary ones,
- the ``(name, text)`` entries collected by the scanner,
- the Markdown formatting of those entries as fenced blocks.
"""


from __future__ import annotations

from pathlib import Path
from typing import Iterable, NamedTuple

TEXT_BYTES = frozenset({7, 8, 9, 10, 12, 13, 27} | set(range(32, 127)) | set(range(128, 256)))


class ContentEntry(NamedTuple):
    """A file included in the document: its bare name and decoded text."""

    name: str
    text: str


def is_text_file(path: Path, *, sample_size: int = 8192) -> bool:
    """
    Heuristically determine whether a file holds text.

    The detection reads a small byte sample and classifies the file as binary
    if it contains a NUL byte, or if more than 30% of the sampled bytes are
    control characters outside the usual whitespace set. Bytes above 0x7F are
    accepted so that UTF-8 encoded text is not mistaken for binary data.

    Empty files are text.

    Parameters
    ----------
    path : pathlib.Path
        Path to a regular file.
    sample_size : int, default=8192
        Number of bytes read from the start of the file.

    Returns
    -------
    bool
        ``True`` if the file looks like text, ``False`` otherwise.

    Raises
    ------
    OSError
        If the file cannot be opened or read.
    """

    with path.open("rb") as f:
        sample = f.read(sample_size)

    if b"\x00" in sample:
        return False

    non_text = sum(b not in TEXT_BYTES for b in sample)
    return non_text / max(len(sample), 1) <= 0.30


def read_text(path: Path) -> str:
    """Read a file as UTF-8, replacing undecodable byte sequences."""
    return path.read_text(encoding="utf-8", errors="replace")


def format_entry(entry: ContentEntry) -> list[str]:
    return [f"**{entry.name}:**", "```", entry.text, "```", ""]


def format_contents(contents: Iterable[ContentEntry]) -> str:
    """
    Render content entries as consecutive fenced Markdown blocks.

    Each entry becomes its bold file name, an opening fence, the file text, a
    closing fence and an empty line. Entries keep the order they were given
    in.
    """

    lines: list[str] = []
    for entry in contents:
        lines.extend(format_entry(entry))
    return "\n".join(lines)
