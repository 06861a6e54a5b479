#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/tinymark/ast/visitors.py
"""Visitor pattern implementation for AST traversal.

The node set is closed, so NodeVisitor declares one abstract ``visit_*``
method per node kind. A concrete visitor that forgets a kind cannot be
instantiated, and adding a node kind forces every visitor to be revisited.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from tinymark.ast.nodes import (
    BlankLine,
    BlockQuote,
    Code,
    CodeFence,
    Document,
    Emphasis,
    EndOfInput,
    EscapeSequence,
    Heading,
    Image,
    Line,
    Link,
    ListItem,
    OrderedList,
    Paragraph,
    QuoteLine,
    Strikethrough,
    Strong,
    Text,
    ThematicBreak,
    Underline,
    UnorderedList,
)


class NodeVisitor(ABC):
    """Abstract base class for AST node visitors.

    Examples
    --------
    A visitor that counts headings only needs real logic in ``visit_heading``
    and ``visit_document``; every other method still has to be present:

        >>> class HeadingCounter(NodeVisitor):
        ...     def visit_document(self, node):
        ...         return sum(child.accept(self) for child in node.children)
        ...     def visit_heading(self, node):
        ...         return 1
        ...     # remaining visit_* methods return 0

    """

    # -- block-level ---------------------------------------------------------

    @abstractmethod
    def visit_document(self, node: Document) -> Any:
        """Visit a Document node."""

    @abstractmethod
    def visit_heading(self, node: Heading) -> Any:
        """Visit a Heading node."""

    @abstractmethod
    def visit_paragraph(self, node: Paragraph) -> Any:
        """Visit a Paragraph node."""

    @abstractmethod
    def visit_line(self, node: Line) -> Any:
        """Visit a Line node."""

    @abstractmethod
    def visit_block_quote(self, node: BlockQuote) -> Any:
        """Visit a BlockQuote node."""

    @abstractmethod
    def visit_quote_line(self, node: QuoteLine) -> Any:
        """Visit a QuoteLine node."""

    @abstractmethod
    def visit_unordered_list(self, node: UnorderedList) -> Any:
        """Visit an UnorderedList node."""

    @abstractmethod
    def visit_ordered_list(self, node: OrderedList) -> Any:
        """Visit an OrderedList node."""

    @abstractmethod
    def visit_list_item(self, node: ListItem) -> Any:
        """Visit a ListItem node."""

    @abstractmethod
    def visit_code_fence(self, node: CodeFence) -> Any:
        """Visit a CodeFence node."""

    @abstractmethod
    def visit_thematic_break(self, node: ThematicBreak) -> Any:
        """Visit a ThematicBreak node."""

    @abstractmethod
    def visit_blank_line(self, node: BlankLine) -> Any:
        """Visit a BlankLine node."""

    @abstractmethod
    def visit_end_of_input(self, node: EndOfInput) -> Any:
        """Visit the EndOfInput marker."""

    # -- inline --------------------------------------------------------------

    @abstractmethod
    def visit_text(self, node: Text) -> Any:
        """Visit a Text node."""

    @abstractmethod
    def visit_strong(self, node: Strong) -> Any:
        """Visit a Strong node."""

    @abstractmethod
    def visit_emphasis(self, node: Emphasis) -> Any:
        """Visit an Emphasis node."""

    @abstractmethod
    def visit_underline(self, node: Underline) -> Any:
        """Visit an Underline node."""

    @abstractmethod
    def visit_strikethrough(self, node: Strikethrough) -> Any:
        """Visit a Strikethrough node."""

    @abstractmethod
    def visit_code(self, node: Code) -> Any:
        """Visit a Code node."""

    @abstractmethod
    def visit_link(self, node: Link) -> Any:
        """Visit a Link node."""

    @abstractmethod
    def visit_image(self, node: Image) -> Any:
        """Visit an Image node."""

    @abstractmethod
    def visit_escape_sequence(self, node: EscapeSequence) -> Any:
        """Visit an EscapeSequence node."""
