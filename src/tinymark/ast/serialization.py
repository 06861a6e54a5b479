#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/tinymark/ast/serialization.py
"""JSON serialization for AST nodes.

This module converts parse trees into plain dictionaries and JSON text so the
structure produced by the parser can be inspected from the command line or
compared in tests.

Each node becomes a dict with a ``node_type`` key followed by its fields.
Child nodes are serialized recursively; tuples become lists.

Examples
--------
    >>> from tinymark import parse
    >>> from tinymark.ast.serialization import ast_to_json
    >>> print(ast_to_json(parse("# Title"), include_spans=False))

"""

from __future__ import annotations

import json
from dataclasses import fields
from typing import Any

from tinymark.ast.nodes import Node, SourceLocation


def _serialize_value(value: Any, include_spans: bool) -> Any:
    if isinstance(value, Node):
        return ast_to_dict(value, include_spans=include_spans)
    if isinstance(value, SourceLocation):
        return {"line": value.line, "column": value.column, "offset": value.offset}
    if isinstance(value, tuple):
        return [_serialize_value(item, include_spans) for item in value]
    return value


def ast_to_dict(node: Node, include_spans: bool = True) -> dict[str, Any]:
    """Convert an AST node (and its subtree) to a dictionary.

    Parameters
    ----------
    node : Node
        Node to serialize
    include_spans : bool, default = True
        Whether to include the ``span`` and ``source_location`` fields

    Returns
    -------
    dict
        JSON-compatible representation of the node

    Raises
    ------
    TypeError
        If ``node`` is not an AST node

    """
    if not isinstance(node, Node):
        raise TypeError(f"Cannot serialize object of type {type(node).__name__}")

    result: dict[str, Any] = {"node_type": node.kind}
    for node_field in fields(node):  # type: ignore[arg-type]
        if not include_spans and node_field.name in ("span", "source_location"):
            continue
        value = getattr(node, node_field.name)
        if node_field.name == "source_location" and value is None:
            continue
        result[node_field.name] = _serialize_value(value, include_spans)
    return result


def ast_to_json(node: Node, indent: int | None = 2, include_spans: bool = True) -> str:
    """Serialize an AST node to a JSON string.

    Parameters
    ----------
    node : Node
        Node to serialize
    indent : int or None, default = 2
        JSON indentation; None for compact output
    include_spans : bool, default = True
        Whether to include source spans and locations

    Returns
    -------
    str
        JSON text

    """
    return json.dumps(ast_to_dict(node, include_spans=include_spans), indent=indent, ensure_ascii=False)


__all__ = [
    "ast_to_dict",
    "ast_to_json",
]
