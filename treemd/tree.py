# treemd/tree.py

"""
Outline to tree rendering.

The scanner describes the hierarchy as a flat outline in which every line is
an entry name prefixed by ``#`` characters, one more per nesting level,
and a ``/`` separator (``"###/main.py"``). This module turns such an outline into an ``anytree`` node hierarchy and draws it
with tree-style connectors (``├──``, ``└──``, ``│``), like the Unix ``tree``
command.
"""


from __future__ import annotations

from typing import Iterable

from anytree import ContStyle, Node, RenderTree

#: Prefix length of the root label; scanner lines start at two.
ROOT_DEPTH = 1

#: Separates the ``#`` run from the entry name in an outline line.
SEPARATOR = "/"


def parse_line(line: str) -> tuple[int, str]:
    """
    Split an outline line into its ``#`` count and its entry name.

    Raises
    ------
    ValueError
        If the line is not a run of ``#`` followed by ``/`` and a name.
    """
    marks, sep, name = line.partition(SEPARATOR)
    if not sep or not marks or marks.strip("#"):
        raise ValueError(f"Malformed outline line: {line!r}")
    return len(marks), name


def outline_to_tree(outline: Iterable[str], root_name: str) -> Node:
    """
    Build a node hierarchy from ``#``-prefixed outline lines.

    Each line is attached to the closest preceding line with a shorter
    prefix. Lines with a prefix not longer than the root's are rejected.

    Parameters
    ----------
    outline : Iterable[str]
        Outline lines in pre-order, as produced by :func:`treemd.scanner.scan`.
    root_name : str
        Label of the root node.

    Returns
    -------
    anytree.Node
        The root node. Every node has a ``depth_marks`` attribute holding its
        prefix length.

    Raises
    ------
    ValueError
        If a line does not nest below the root.
    """

    root = Node(root_name, depth_marks=ROOT_DEPTH)
    stack = [root]

    for line in outline:
        marks, name = parse_line(line)
        if marks <= ROOT_DEPTH:
            raise ValueError(f"Outline line does not nest below the root: {line!r}")
        while stack[-1].depth_marks >= marks:
            stack.pop()
        stack.append(Node(name, parent=stack[-1], depth_marks=marks))

    return root


def draw_tree(node: Node) -> str:
    """Render a node hierarchy as a Unicode tree string."""
    return "\n".join(f"{pre}{n.name}" for pre, _, n in RenderTree(node, style=ContStyle()))


def draw_outline(outline: Iterable[str], root_name: str) -> str:
    """Shortcut for ``draw_tree(outline_to_tree(outline, root_name))``."""
    return draw_tree(outline_to_tree(outline, root_name))
