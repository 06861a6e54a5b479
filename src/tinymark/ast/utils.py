#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/tinymark/ast/utils.py
"""Utility functions for walking AST nodes.

Examples
--------
Count the inline nodes of a parsed document:

    >>> from tinymark import parse
    >>> from tinymark.ast import Strong
    >>> from tinymark.ast.utils import iter_nodes
    >>> doc = parse("Some **bold** and **more**")
    >>> sum(isinstance(node, Strong) for node in iter_nodes(doc))
    2

"""

from __future__ import annotations

from typing import Iterator

from tinymark.ast.nodes import Node, get_node_children


def iter_nodes(node: Node) -> Iterator[Node]:
    """Yield ``node`` and all of its descendants depth-first, in source order.

    Parameters
    ----------
    node : Node
        Root of the subtree to walk

    Yields
    ------
    Node
        Each node of the subtree, parents before children

    """
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(get_node_children(current)))


def count_nodes(node: Node) -> int:
    """Return the number of nodes in the subtree rooted at ``node``."""
    return sum(1 for _ in iter_nodes(node))


__all__ = [
    "iter_nodes",
    "count_nodes",
]
