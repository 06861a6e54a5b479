#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/tinymark/ast/nodes.py
"""AST node classes for document representation.

This module defines the closed node hierarchy produced by the markup parser.
Each node represents a structural (block) or span-level (inline) element of
the document.

The node hierarchy is designed to:
- Mirror the fixed grammar exactly, with no open-ended extension points
- Stay immutable once produced (frozen dataclasses, tuple children)
- Keep the exact source span each node matched
- Enable rendering strategies via the visitor pattern

Node Hierarchy
--------------
All nodes inherit from the base Node class and support the visitor pattern.

Block-level nodes:
    - Document, Heading, Paragraph, Line, BlockQuote, QuoteLine
    - UnorderedList, OrderedList, ListItem
    - CodeFence, ThematicBreak, BlankLine, EndOfInput

Inline nodes:
    - Text, Strong, Emphasis, Underline, Strikethrough
    - Code, Link, Image, EscapeSequence

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional, Union


@dataclass(frozen=True)
class SourceLocation:
    """Source location information for AST nodes.

    Parameters
    ----------
    line : int
        1-based line number where the node's span starts
    column : int
        1-based column number where the node's span starts
    offset : int
        0-based character offset of the span within the normalized source

    """

    line: int
    column: int
    offset: int


class Node(ABC):
    """Base class for all AST nodes.

    Every concrete node is a frozen dataclass that declares ``span`` (the exact
    source text it matched) and ``source_location``.

    """

    span: str
    source_location: Optional[SourceLocation]

    @property
    def kind(self) -> str:
        """Return the node kind used in error messages and serialization."""
        return type(self).__name__

    @abstractmethod
    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods

        Returns
        -------
        Any
            Result from the visitor's processing

        """
        pass


# ============================================================================
# Inline Nodes
# ============================================================================


@dataclass(frozen=True)
class Text(Node):
    """Run of plain characters, rendered escaped and otherwise unchanged.

    Parameters
    ----------
    content : str
        The literal text

    """

    content: str
    span: str = ""
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_text``."""
        return visitor.visit_text(self)


@dataclass(frozen=True)
class Strong(Node):
    """Bold text delimited by ``**``.

    Parameters
    ----------
    content : str
        Raw text between the delimiters

    """

    content: str
    span: str = ""
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_strong``."""
        return visitor.visit_strong(self)


@dataclass(frozen=True)
class Emphasis(Node):
    """Italic text delimited by ``*`` or ``_``.

    Parameters
    ----------
    content : str
        Raw text between the delimiters
    delimiter : {'*', '_'}, default '*'
        The delimiter character used in the source

    """

    content: str
    delimiter: str = "*"
    span: str = ""
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_emphasis``."""
        return visitor.visit_emphasis(self)


@dataclass(frozen=True)
class Underline(Node):
    """Underlined text delimited by ``__``."""

    content: str
    span: str = ""
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_underline``."""
        return visitor.visit_underline(self)


@dataclass(frozen=True)
class Strikethrough(Node):
    """Struck-through text delimited by ``~~``."""

    content: str
    span: str = ""
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_strikethrough``."""
        return visitor.visit_strikethrough(self)


@dataclass(frozen=True)
class Code(Node):
    """Inline code span.

    Parameters
    ----------
    content : str
        Code text with the surrounding backticks stripped

    """

    content: str
    span: str = ""
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_code``."""
        return visitor.visit_code(self)


@dataclass(frozen=True)
class Link(Node):
    """Hyperlink written as ``[text](url)``.

    Parameters
    ----------
    text : str
        Raw link text span
    url : str
        Raw URL span, emitted verbatim by renderers

    """

    text: str
    url: str
    span: str = ""
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_link``."""
        return visitor.visit_link(self)


@dataclass(frozen=True)
class Image(Node):
    """Image written as ``![alt](url)``.

    Parameters
    ----------
    alt_text : str
        Raw alternative text span (may be empty)
    url : str
        Raw URL span, emitted verbatim by renderers

    """

    alt_text: str
    url: str
    span: str = ""
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_image``."""
        return visitor.visit_image(self)


@dataclass(frozen=True)
class EscapeSequence(Node):
    """A backslash-escaped punctuation character.

    Parameters
    ----------
    character : str
        The single escaped character, without the backslash

    """

    character: str
    span: str = ""
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_escape_sequence``."""
        return visitor.visit_escape_sequence(self)


Inline = Union[Text, Strong, Emphasis, Underline, Strikethrough, Code, Link, Image, EscapeSequence]


# ============================================================================
# Block-level Nodes
# ============================================================================


@dataclass(frozen=True)
class Line(Node):
    """One source line of inline content inside a paragraph or quote.

    Parameters
    ----------
    content : tuple of Inline
        Inline nodes in source order

    """

    content: tuple[Inline, ...] = ()
    span: str = ""
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_line``."""
        return visitor.visit_line(self)


@dataclass(frozen=True)
class Heading(Node):
    """Heading node (h1-h3).

    Parameters
    ----------
    level : int
        Heading level, equal to the number of leading ``#`` characters
    text : str
        Heading text with markers, the first whitespace run and trailing
        whitespace removed
    content : tuple of Inline, default = ()
        Inline nodes parsed from ``text``

    """

    level: int
    text: str
    content: tuple[Inline, ...] = ()
    span: str = ""
    source_location: Optional[SourceLocation] = None

    def __post_init__(self) -> None:
        """Validate heading level is between 1 and 3."""
        if not 1 <= self.level <= 3:
            raise ValueError(f"Heading level must be 1-3, got {self.level}")

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_heading``."""
        return visitor.visit_heading(self)


@dataclass(frozen=True)
class Paragraph(Node):
    """Paragraph made of one or more lines of inline content.

    Parameters
    ----------
    lines : tuple of Line
        Lines in source order

    """

    lines: tuple[Line, ...] = ()
    span: str = ""
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_paragraph``."""
        return visitor.visit_paragraph(self)


@dataclass(frozen=True)
class QuoteLine(Node):
    """A single ``>`` line of a block quote.

    Parameters
    ----------
    content : Line or None, default = None
        Inline content after the marker, or None for an empty quote line

    """

    content: Optional[Line] = None
    span: str = ""
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_quote_line``."""
        return visitor.visit_quote_line(self)


@dataclass(frozen=True)
class BlockQuote(Node):
    """Block quote built from consecutive ``>`` lines.

    Parameters
    ----------
    lines : tuple of QuoteLine
        Quote lines in source order

    """

    lines: tuple[QuoteLine, ...] = ()
    span: str = ""
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_block_quote``."""
        return visitor.visit_block_quote(self)


@dataclass(frozen=True)
class ListItem(Node):
    """Single list item.

    Parameters
    ----------
    marker : str
        The marker token (``-``, ``*`` or ``<digits>.``)
    text : str
        Item text with the marker and following whitespace stripped and the
        remainder trimmed
    content : tuple of Inline, default = ()
        Inline nodes parsed from ``text``

    """

    marker: str
    text: str
    content: tuple[Inline, ...] = ()
    span: str = ""
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_list_item``."""
        return visitor.visit_list_item(self)


@dataclass(frozen=True)
class UnorderedList(Node):
    """Bulleted list of ``-`` / ``*`` items."""

    items: tuple[ListItem, ...] = ()
    span: str = ""
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_unordered_list``."""
        return visitor.visit_unordered_list(self)


@dataclass(frozen=True)
class OrderedList(Node):
    """Numbered list of ``<digits>.`` items."""

    items: tuple[ListItem, ...] = ()
    span: str = ""
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_ordered_list``."""
        return visitor.visit_ordered_list(self)


@dataclass(frozen=True)
class CodeFence(Node):
    """Fenced code block.

    Parameters
    ----------
    body : str
        Verbatim text between the opening and closing fences, without the
        final newline
    language : str or None, default = None
        Language tag from the opening fence

    """

    body: str
    language: Optional[str] = None
    span: str = ""
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_code_fence``."""
        return visitor.visit_code_fence(self)


@dataclass(frozen=True)
class ThematicBreak(Node):
    """Horizontal rule (``---``, ``***`` or ``___``)."""

    marker: str = "-"
    span: str = ""
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_thematic_break``."""
        return visitor.visit_thematic_break(self)


@dataclass(frozen=True)
class BlankLine(Node):
    """An empty or whitespace-only source line."""

    span: str = ""
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_blank_line``."""
        return visitor.visit_blank_line(self)


@dataclass(frozen=True)
class EndOfInput(Node):
    """Explicit end-of-input marker terminating every Document."""

    span: str = ""
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_end_of_input``."""
        return visitor.visit_end_of_input(self)


Block = Union[Heading, Paragraph, BlockQuote, UnorderedList, OrderedList, CodeFence, ThematicBreak, BlankLine]


@dataclass(frozen=True)
class Document(Node):
    """Root document node.

    Parameters
    ----------
    children : tuple of Node, default = ()
        Top-level blocks in source order, terminated by one EndOfInput

    """

    children: tuple[Node, ...] = ()
    span: str = ""
    source_location: Optional[SourceLocation] = None

    @property
    def blocks(self) -> tuple[Node, ...]:
        """Return the top-level blocks without the end-of-input marker."""
        return tuple(child for child in self.children if not isinstance(child, EndOfInput))

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_document``."""
        return visitor.visit_document(self)


def get_node_children(node: Node) -> list[Node]:
    """Get the direct child nodes of any node.

    Parameters
    ----------
    node : Node
        Node to inspect

    Returns
    -------
    list of Node
        Child nodes in source order; empty for leaf nodes

    """
    if isinstance(node, Document):
        return list(node.children)
    if isinstance(node, (Heading, Line, ListItem)):
        return list(node.content)
    if isinstance(node, Paragraph):
        return list(node.lines)
    if isinstance(node, BlockQuote):
        return list(node.lines)
    if isinstance(node, QuoteLine):
        return [node.content] if node.content is not None else []
    if isinstance(node, (UnorderedList, OrderedList)):
        return list(node.items)
    return []
