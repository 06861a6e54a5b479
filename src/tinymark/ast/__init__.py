#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/tinymark/ast/__init__.py
"""Abstract Syntax Tree (AST) module for tinymark.

This module provides the immutable node tree produced by the markup parser
and consumed by renderers, together with the visitor base class and
serialization helpers.

Examples
--------
Build a small document by hand and render it:

    >>> from tinymark.ast import Document, EndOfInput, Heading, Text
    >>> from tinymark.renderers.html import HtmlRenderer
    >>> doc = Document(children=(Heading(level=1, text="Title", content=(Text("Title"),)), EndOfInput()))
    >>> HtmlRenderer().render_blocks(doc)
    ['<h1>Title</h1>']

"""

from tinymark.ast.nodes import (
    BlankLine,
    Block,
    BlockQuote,
    Code,
    CodeFence,
    Document,
    Emphasis,
    EndOfInput,
    EscapeSequence,
    Heading,
    Image,
    Inline,
    Line,
    Link,
    ListItem,
    Node,
    OrderedList,
    Paragraph,
    QuoteLine,
    SourceLocation,
    Strikethrough,
    Strong,
    Text,
    ThematicBreak,
    Underline,
    UnorderedList,
    get_node_children,
)
from tinymark.ast.serialization import ast_to_dict, ast_to_json
from tinymark.ast.utils import count_nodes, iter_nodes
from tinymark.ast.visitors import NodeVisitor

__all__ = [
    # Base
    "Node",
    "SourceLocation",
    "Block",
    "Inline",
    # Block nodes
    "Document",
    "Heading",
    "Paragraph",
    "Line",
    "BlockQuote",
    "QuoteLine",
    "UnorderedList",
    "OrderedList",
    "ListItem",
    "CodeFence",
    "ThematicBreak",
    "BlankLine",
    "EndOfInput",
    # Inline nodes
    "Text",
    "Strong",
    "Emphasis",
    "Underline",
    "Strikethrough",
    "Code",
    "Link",
    "Image",
    "EscapeSequence",
    # Helpers
    "NodeVisitor",
    "get_node_children",
    "iter_nodes",
    "count_nodes",
    "ast_to_dict",
    "ast_to_json",
]
