# treemd/document.py

"""
Markdown document assembly.

A treemd document has two sections: the file tree, drawn from the scan
outline inside a code fence, and the files content, one fenced block per
included file, in the same order as the files appear in the tree.
"""


from __future__ import annotations

from pathlib import Path
from typing import Iterable

from treemd.content import format_contents
from treemd.scanner import InclusionPolicy, ScanResult, scan
from treemd.tree import draw_outline


def render_document(root: Path, result: ScanResult) -> str:
    """
    Render a scan result as a Markdown document.

    Parameters
    ----------
    root : pathlib.Path
        Scanned directory; its base name labels the tree root.
    result : ScanResult
        Outline and contents returned by :func:`treemd.scanner.scan`.

    Returns
    -------
    str
        The document, without a trailing newline.
    """

    tree = draw_outline(result.outline, Path(root).name)
    lines = ["# File tree", "```", tree, "```", "", "# Files content"]
    body = format_contents(result.contents)
    if body:
        lines.append(body)
    return "\n".join(lines)


def generate_document(
    directory: Path | str = ".",
    *,
    extensions: Iterable[str] = (),
    sort_entries: bool = False,
) -> str:
    """
    Scan ``directory`` and return its treemd document.

    Parameters
    ----------
    directory : pathlib.Path | str, default="."
        Directory to scan. Resolved to an absolute path first.
    extensions : Iterable[str], optional
        Allowed file extensions, with or without a leading dot. Empty allows
        every text file.
    sort_entries : bool, default=False
        Visit entries in case-insensitive name order.

    Raises
    ------
    ScanError
        If the directory or one of its entries cannot be read.
    """

    root = Path(directory).resolve()
    policy = InclusionPolicy(extensions=frozenset(extensions), sort_entries=sort_entries)
    return render_document(root, scan(root, root, policy))
