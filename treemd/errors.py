# treemd/errors.py

"""Exceptions raised by treemd."""

from __future__ import annotations

from pathlib import Path


class TreemdError(Exception):
    """Base class for errors reported to the user by treemd."""


class ScanError(TreemdError):
    """
    A filesystem entry could not be listed, inspected or read during a scan.

    Attributes
    ----------
    path : pathlib.Path
        The entry that failed.
    """

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{reason}: {path}")
