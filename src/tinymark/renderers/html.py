#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/tinymark/renderers/html.py
"""HTML rendering from AST.

This module provides the HtmlRenderer class which converts tinymark AST nodes
to HTML fragments, one fragment per top-level block.

All literal text taken from the source is escaped exactly once here; node
content is never assumed to be pre-escaped. Link and image URLs are emitted
verbatim because the grammar already restricts their character set.

"""

from __future__ import annotations

import logging
from typing import Any, Iterable

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
    Node,
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
from tinymark.ast.visitors import NodeVisitor
from tinymark.exceptions import MalformedNodeError
from tinymark.options.html import HtmlRendererOptions
from tinymark.renderers.base import BaseRenderer, InlineContentMixin
from tinymark.utils.html_utils import escape_html, start_tag

logger = logging.getLogger(__name__)

# The closed set of node classes this renderer has templates for.
RENDERABLE_NODES: frozenset[type] = frozenset(
    {
        Document,
        Heading,
        Paragraph,
        Line,
        BlockQuote,
        QuoteLine,
        UnorderedList,
        OrderedList,
        ListItem,
        CodeFence,
        ThematicBreak,
        BlankLine,
        EndOfInput,
        Text,
        Strong,
        Emphasis,
        Underline,
        Strikethrough,
        Code,
        Link,
        Image,
        EscapeSequence,
    }
)


class HtmlRenderer(NodeVisitor, InlineContentMixin, BaseRenderer):
    """Render AST nodes to HTML.

    Parameters
    ----------
    options : HtmlRendererOptions or None, default = None
        HTML rendering options

    Examples
    --------
    Render each top-level block separately:

        >>> from tinymark.parsers.markup import MarkupParser
        >>> doc = MarkupParser().parse("# Hello\\n___\\n\\nThis is **bold** text.")
        >>> HtmlRenderer().render_blocks(doc)
        ['<h1>Hello</h1>', '<hr>', '<br>', '<p>This is <strong>bold</strong> text.</p>']

    """

    def __init__(self, options: HtmlRendererOptions | None = None):
        """Initialize the HTML renderer with options."""
        BaseRenderer._validate_options_type(options, HtmlRendererOptions, "html")
        options = options or HtmlRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: HtmlRendererOptions = options
        self._output: list[str] = []

    def render_blocks(self, document: Document) -> list[str]:
        """Render every top-level block of a document.

        Parameters
        ----------
        document : Document
            Parsed document

        Returns
        -------
        list of str
            One HTML string per block, in source order, without the
            end-of-input marker

        Raises
        ------
        MalformedNodeError
            If a node has no template or has empty content

        """
        if not isinstance(document, Document):
            raise MalformedNodeError(self._kind_of(document), "expected a Document")
        blocks = [self.render_node(block) for block in document.blocks]
        logger.debug(f"Rendered {len(blocks)} blocks")
        return blocks

    def render_node(self, node: Node) -> str:
        """Render a single node of any kind to HTML.

        Raises
        ------
        MalformedNodeError
            If the node has no template or has empty content

        """
        self._output = []
        self._accept(node)
        return "".join(self._output)

    def render_to_string(self, document: Document) -> str:
        """Render a document with blocks joined by ``options.block_separator``."""
        return self.options.block_separator.join(self.render_blocks(document))

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _kind_of(node: Any) -> str:
        return node.kind if isinstance(node, Node) else type(node).__name__

    def _accept(self, node: Any) -> None:
        if type(node) not in RENDERABLE_NODES:
            raise MalformedNodeError(self._kind_of(node), "unknown node kind")
        node.accept(self)

    def _render_children(self, children: Iterable[Any]) -> str:
        children = tuple(children)
        for child in children:
            if type(child) not in RENDERABLE_NODES:
                raise MalformedNodeError(self._kind_of(child), "unknown node kind")
        return self._render_inline_content(children)

    def _text(self, text: str) -> str:
        return escape_html(text, quote=self.options.escape_quotes)

    @staticmethod
    def _require(node: Node, value: Any, field_name: str) -> None:
        if not value:
            raise MalformedNodeError(node.kind, f"empty {field_name}")

    def _wrap(self, node: Node, tag: str, content: str) -> None:
        self._require(node, content, "content")
        self._output.append(f"<{tag}>{self._text(content)}</{tag}>")

    # ------------------------------------------------------------------
    # Block nodes
    # ------------------------------------------------------------------

    def visit_document(self, node: Document) -> None:
        """Render a Document node with blocks joined by ``options.block_separator``."""
        blocks = [self._render_children((block,)) for block in node.blocks]
        self._output.append(self.options.block_separator.join(blocks))

    def visit_heading(self, node: Heading) -> None:
        """Render a Heading node from its trimmed raw text."""
        self._require(node, node.text, "text")
        self._output.append(f"<h{node.level}>{self._text(node.text)}</h{node.level}>")

    def visit_paragraph(self, node: Paragraph) -> None:
        """Render a Paragraph node, joining its lines with no separator."""
        self._require(node, node.lines, "lines")
        self._output.append(f"<p>{self._render_children(node.lines)}</p>")

    def visit_line(self, node: Line) -> None:
        """Render the inline content of one line."""
        self._output.append(self._render_children(node.content))

    def visit_block_quote(self, node: BlockQuote) -> None:
        """Render a BlockQuote node.

        Each quote line becomes one paragraph; paragraphs are separated by
        newlines inside the blockquote element.

        """
        self._require(node, node.lines, "lines")
        paragraphs = [self._render_children((line,)) for line in node.lines]
        body = "\n".join(paragraphs)
        self._output.append(f"<blockquote>\n{body}\n</blockquote>")

    def visit_quote_line(self, node: QuoteLine) -> None:
        """Render a QuoteLine node; an empty line yields an empty paragraph."""
        content = "" if node.content is None else self._render_children((node.content,))
        self._output.append(f"<p>{content}</p>")

    def visit_unordered_list(self, node: UnorderedList) -> None:
        """Render an UnorderedList node."""
        self._render_list(node, "ul")

    def visit_ordered_list(self, node: OrderedList) -> None:
        """Render an OrderedList node."""
        self._render_list(node, "ol")

    def _render_list(self, node: UnorderedList | OrderedList, tag: str) -> None:
        self._require(node, node.items, "items")
        items = "\n".join(self._render_children((item,)) for item in node.items)
        self._output.append(f"<{tag}>\n{items}\n</{tag}>")

    def visit_list_item(self, node: ListItem) -> None:
        """Render a ListItem node from its trimmed raw text."""
        self._require(node, node.text, "text")
        self._output.append(f"<li>{self._text(node.text)}</li>")

    def visit_code_fence(self, node: CodeFence) -> None:
        """Render a CodeFence node.

        The class attribute is only present when the fence has a language tag.

        """
        attributes = {}
        if node.language:
            attributes["class"] = escape_html(f"{self.options.code_class_prefix}{node.language}", quote=True)
        self._output.append(f"<pre>{start_tag('code', attributes)}{self._text(node.body)}</code></pre>")

    def visit_thematic_break(self, node: ThematicBreak) -> None:
        """Render a ThematicBreak node."""
        self._output.append("<hr>")

    def visit_blank_line(self, node: BlankLine) -> None:
        """Render a BlankLine node."""
        self._output.append("<br>")

    def visit_end_of_input(self, node: EndOfInput) -> None:
        """Render nothing for the end-of-input marker."""

    # ------------------------------------------------------------------
    # Inline nodes
    # ------------------------------------------------------------------

    def visit_text(self, node: Text) -> None:
        """Render a Text node."""
        self._output.append(self._text(node.content))

    def visit_strong(self, node: Strong) -> None:
        """Render a Strong node."""
        self._wrap(node, "strong", node.content)

    def visit_emphasis(self, node: Emphasis) -> None:
        """Render an Emphasis node."""
        self._wrap(node, "em", node.content)

    def visit_underline(self, node: Underline) -> None:
        """Render an Underline node."""
        self._wrap(node, "u", node.content)

    def visit_strikethrough(self, node: Strikethrough) -> None:
        """Render a Strikethrough node."""
        self._wrap(node, "del", node.content)

    def visit_code(self, node: Code) -> None:
        """Render a Code node."""
        self._wrap(node, "code", node.content)

    def visit_link(self, node: Link) -> None:
        """Render a Link node with the URL emitted verbatim."""
        self._require(node, node.text, "text")
        self._require(node, node.url, "url")
        self._output.append(f"{start_tag('a', {'href': node.url})}{self._text(node.text)}</a>")

    def visit_image(self, node: Image) -> None:
        """Render an Image node; alt text is always quote-escaped."""
        self._require(node, node.url, "url")
        self._output.append(start_tag("img", {"src": node.url, "alt": escape_html(node.alt_text, quote=True)}))

    def visit_escape_sequence(self, node: EscapeSequence) -> None:
        """Render an EscapeSequence node as its escaped character."""
        if len(node.character) != 1:
            raise MalformedNodeError(node.kind, f"expected one character, got {node.character!r}")
        self._output.append(self._text(node.character))
