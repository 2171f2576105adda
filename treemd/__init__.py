"""
treemd — directory trees and file contents as one Markdown document.

This package walks a directory, leaves out what git ignores, a few fixed
names and binary files, and renders:
- the remaining hierarchy as a Unicode tree,
- the contents of every included file as fenced blocks.

The result is meant to be pasted into a language model prompt or archived.
"""

from __future__ import annotations

from .content import ContentEntry, is_text_file
from .document import generate_document, render_document
from .errors import ScanError, TreemdError
from .ignore import resolve
from .scanner import ALWAYS_EXCLUDED, InclusionPolicy, ScanResult, scan
from .tree import draw_outline, draw_tree, outline_to_tree

__all__ = [
    "ALWAYS_EXCLUDED",
    "ContentEntry",
    "InclusionPolicy",
    "ScanError",
    "ScanResult",
    "TreemdError",
    "draw_outline",
    "draw_tree",
    "generate_document",
    "is_text_file",
    "outline_to_tree",
    "render_document",
    "resolve",
    "scan",
]
