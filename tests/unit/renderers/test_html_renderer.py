#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/renderers/test_html_renderer.py
"""Unit tests for HtmlRenderer.

Tests cover the HTML template of every node kind, escaping, options and the
errors raised for nodes the renderer cannot handle.
"""

from dataclasses import dataclass
from io import BytesIO, StringIO
from typing import Optional

import pytest

from tinymark.ast import (
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
    SourceLocation,
    Strikethrough,
    Strong,
    Text,
    ThematicBreak,
    Underline,
    UnorderedList,
)
from tinymark.exceptions import ConversionError, InvalidOptionsError, MalformedNodeError
from tinymark.options import HtmlRendererOptions, MarkupParserOptions
from tinymark.parsers import MarkupParser
from tinymark.renderers import HtmlRenderer


@dataclass(frozen=True)
class Callout(Node):
    """Node kind outside the renderable set."""

    span: str = ""
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor):
        return visitor.visit_callout(self)


def _render(markup, **options):
    doc = MarkupParser().parse(markup)
    return HtmlRenderer(HtmlRendererOptions(**options)).render_blocks(doc)


@pytest.mark.unit
class TestBlockTemplates:
    """Test the HTML emitted for each block kind."""

    def test_spec_example(self):
        """Test the canonical four-block example."""
        assert _render("# Hello\n___\n\nThis is **bold** text.") == [
            "<h1>Hello</h1>",
            "<hr>",
            "<br>",
            "<p>This is <strong>bold</strong> text.</p>",
        ]

    @pytest.mark.parametrize("level", [1, 2, 3])
    def test_heading(self, level):
        """Test heading levels."""
        assert _render("#" * level + " Title") == [f"<h{level}>Title</h{level}>"]

    def test_heading_uses_raw_text(self):
        """Test that heading text is rendered without inline formatting."""
        assert _render("# **Bold** & co") == ["<h1>**Bold** &amp; co</h1>"]

    def test_paragraph_lines_are_joined(self):
        """Test that paragraph lines are concatenated without separators."""
        assert _render("line one\nline two") == ["<p>line oneline two</p>"]

    def test_block_quote(self):
        """Test that each quote line becomes a paragraph."""
        assert _render(">line1\n>line2\n>line3") == [
            "<blockquote>\n<p>line1</p>\n<p>line2</p>\n<p>line3</p>\n</blockquote>"
        ]

    def test_empty_quote_line(self):
        """Test that an empty quote line renders an empty paragraph."""
        assert _render("> a\n>") == ["<blockquote>\n<p>a</p>\n<p></p>\n</blockquote>"]

    def test_quote_inline_formatting(self):
        """Test that quote lines keep inline formatting."""
        assert _render("> *soft*") == ["<blockquote>\n<p><em>soft</em></p>\n</blockquote>"]

    def test_unordered_list(self):
        """Test an unordered list."""
        assert _render("- a\n* b") == ["<ul>\n<li>a</li>\n<li>b</li>\n</ul>"]

    def test_ordered_list(self):
        """Test an ordered list."""
        assert _render("1. c\n2. d") == ["<ol>\n<li>c</li>\n<li>d</li>\n</ol>"]

    def test_list_items_use_raw_text(self):
        """Test that list item text is rendered without inline formatting."""
        assert _render("- **x** <y>") == ["<ul>\n<li>**x** &lt;y&gt;</li>\n</ul>"]

    def test_code_fence_with_language(self):
        """Test that a language tag becomes a class attribute."""
        assert _render("```python\nprint('hi')\n```") == [
            '<pre><code class="language-python">print(&#x27;hi&#x27;)</code></pre>'
        ]

    def test_code_fence_without_language(self):
        """Test that no class attribute is emitted without a language."""
        assert _render("```\na < b\n```") == ["<pre><code>a &lt; b</code></pre>"]

    def test_code_fence_keeps_newlines(self):
        """Test that multi-line bodies keep their line breaks."""
        assert _render("```\na\n\nb\n```") == ["<pre><code>a\n\nb</code></pre>"]

    def test_code_class_prefix(self):
        """Test a custom class prefix."""
        assert _render("```py\nx\n```", code_class_prefix="lang-") == ['<pre><code class="lang-py">x</code></pre>']

    def test_empty_code_class_prefix(self):
        """Test an empty class prefix."""
        assert _render("```py\nx\n```", code_class_prefix="") == ['<pre><code class="py">x</code></pre>']

    def test_thematic_break_and_blank_line(self):
        """Test the void elements."""
        assert _render("***\n\n") == ["<hr>", "<br>"]

    def test_end_of_input_renders_nothing(self):
        """Test that the end-of-input marker produces no output."""
        assert HtmlRenderer().render_node(EndOfInput()) == ""

    def test_render_blocks_skips_end_of_input(self):
        """Test that render_blocks returns one string per block."""
        doc = Document(children=(ThematicBreak(), EndOfInput()))
        assert HtmlRenderer().render_blocks(doc) == ["<hr>"]

    def test_empty_document(self):
        """Test that empty input renders no blocks."""
        assert _render("") == []


@pytest.mark.unit
class TestInlineTemplates:
    """Test the HTML emitted for each inline kind."""

    @pytest.mark.parametrize(
        "node,expected",
        [
            (Text("plain"), "plain"),
            (Strong("b"), "<strong>b</strong>"),
            (Emphasis("i"), "<em>i</em>"),
            (Emphasis("i", delimiter="_"), "<em>i</em>"),
            (Underline("u"), "<u>u</u>"),
            (Strikethrough("s"), "<del>s</del>"),
            (Code("c"), "<code>c</code>"),
            (Link("text", "http://x"), '<a href="http://x">text</a>'),
            (Image("alt", "img.png"), '<img src="img.png" alt="alt">'),
            (Image("", "img.png"), '<img src="img.png" alt="">'),
            (EscapeSequence("*"), "*"),
            (EscapeSequence("<"), "&lt;"),
        ],
    )
    def test_inline_node(self, node, expected):
        """Test each inline template."""
        assert HtmlRenderer().render_node(node) == expected

    def test_formatting_content_is_escaped(self):
        """Test that formatted content is escaped."""
        assert HtmlRenderer().render_node(Strong("<b> & co")) == "<strong>&lt;b&gt; &amp; co</strong>"

    def test_link_url_is_verbatim(self):
        """Test that URLs are emitted unchanged."""
        html = HtmlRenderer().render_node(Link("t", "http://x/?a=1&b=2"))
        assert html == '<a href="http://x/?a=1&b=2">t</a>'

    def test_link_text_is_escaped(self):
        """Test that link text is escaped."""
        assert _render("[a<b](u)") == ['<p><a href="u">a&lt;b</a></p>']

    def test_image_alt_always_quote_escaped(self):
        """Test that alt text quotes are escaped even without escape_quotes."""
        renderer = HtmlRenderer(HtmlRendererOptions(escape_quotes=False))
        assert renderer.render_node(Image('a "b"', "u")) == '<img src="u" alt="a &quot;b&quot;">'

    def test_line_renders_content(self):
        """Test that a line renders its inline content in order."""
        line = Line(content=(Text("a "), Strong("b"), Text(" c")))
        assert HtmlRenderer().render_node(line) == "a <strong>b</strong> c"

    def test_escaped_markers_are_literal(self):
        """Test that escapes produce literal marker characters."""
        assert _render("\\*not italic\\*") == ["<p>*not italic*</p>"]

    def test_unmatched_markers_are_literal(self):
        """Test that unmatched markers pass through as escaped text."""
        assert _render("a *b & [c](d e)") == ["<p>a *b &amp; [c](d e)</p>"]


@pytest.mark.unit
class TestEscaping:
    """Test HTML escaping of text content."""

    def test_special_characters(self):
        """Test escaping of HTML special characters."""
        assert _render("a < b & c > d") == ["<p>a &lt; b &amp; c &gt; d</p>"]

    def test_quotes_escaped_by_default(self):
        """Test that quotes are escaped by default."""
        assert _render("say \"hi\" it's") == ["<p>say &quot;hi&quot; it&#x27;s</p>"]

    def test_quotes_kept_when_disabled(self):
        """Test escape_quotes=False leaves quotes in text content."""
        assert _render("say \"hi\"", escape_quotes=False) == ['<p>say "hi"</p>']

    def test_no_double_escaping(self):
        """Test that entities in the source are escaped once."""
        assert _render("&amp;") == ["<p>&amp;amp;</p>"]

    def test_script_tag_is_neutralized(self):
        """Test that raw HTML in the source never reaches the output."""
        (html,) = _render("<script>alert(1)</script>")
        assert "<script>" not in html
        assert html == "<p>&lt;script&gt;alert(1)&lt;/script&gt;</p>"


@pytest.mark.unit
class TestMalformedNodes:
    """Test errors for nodes the renderer cannot handle."""

    @pytest.mark.parametrize(
        "node,kind",
        [
            (Strong(""), "Strong"),
            (Emphasis(""), "Emphasis"),
            (Underline(""), "Underline"),
            (Strikethrough(""), "Strikethrough"),
            (Code(""), "Code"),
            (Link("", "u"), "Link"),
            (Link("t", ""), "Link"),
            (Image("a", ""), "Image"),
            (EscapeSequence(""), "EscapeSequence"),
            (EscapeSequence("ab"), "EscapeSequence"),
            (Heading(level=1, text=""), "Heading"),
            (ListItem(marker="-", text=""), "ListItem"),
            (Paragraph(lines=()), "Paragraph"),
            (BlockQuote(lines=()), "BlockQuote"),
            (UnorderedList(items=()), "UnorderedList"),
            (OrderedList(items=()), "OrderedList"),
        ],
    )
    def test_empty_content(self, node, kind):
        """Test that empty content is rejected."""
        with pytest.raises(MalformedNodeError) as exc_info:
            HtmlRenderer().render_node(node)
        assert exc_info.value.node_kind == kind

    def test_unknown_node_kind(self):
        """Test that node kinds outside the closed set are rejected."""
        with pytest.raises(MalformedNodeError) as exc_info:
            HtmlRenderer().render_node(Callout())
        assert exc_info.value.node_kind == "Callout"
        assert "unknown node kind" in exc_info.value.message

    def test_unknown_child_kind(self):
        """Test that unknown children are rejected inside known parents."""
        paragraph = Paragraph(lines=(Line(content=(Text("ok"), Callout())),))
        with pytest.raises(MalformedNodeError) as exc_info:
            HtmlRenderer().render_node(paragraph)
        assert exc_info.value.node_kind == "Callout"

    def test_non_node_object(self):
        """Test that arbitrary objects are rejected."""
        with pytest.raises(MalformedNodeError) as exc_info:
            HtmlRenderer().render_node("not a node")
        assert exc_info.value.node_kind == "str"

    def test_render_blocks_requires_document(self):
        """Test that render_blocks rejects anything but a Document."""
        with pytest.raises(MalformedNodeError):
            HtmlRenderer().render_blocks(Paragraph(lines=(Line(content=(Text("x"),)),)))

    def test_malformed_node_is_conversion_error(self):
        """Test the exception hierarchy."""
        with pytest.raises(ConversionError):
            HtmlRenderer().render_node(Strong(""))

    def test_renderer_usable_after_error(self):
        """Test that a failed render does not leak output into the next one."""
        renderer = HtmlRenderer()
        with pytest.raises(MalformedNodeError):
            renderer.render_node(Paragraph(lines=(Line(content=(Text("x"), Strong(""))),)))
        assert renderer.render_node(Text("y")) == "y"


@pytest.mark.unit
class TestRendererOutput:
    """Test whole-document rendering and output destinations."""

    def test_render_to_string(self):
        """Test that blocks are joined with the block separator."""
        doc = MarkupParser().parse("# A\n---")
        assert HtmlRenderer().render_to_string(doc) == "<h1>A</h1>\n<hr>"

    def test_custom_block_separator(self):
        """Test a custom block separator."""
        doc = MarkupParser().parse("# A\n---")
        renderer = HtmlRenderer(HtmlRendererOptions(block_separator=""))
        assert renderer.render_to_string(doc) == "<h1>A</h1><hr>"

    def test_render_document_node(self):
        """Test render_node on a whole document."""
        doc = MarkupParser().parse("# A\n- b")
        assert HtmlRenderer().render_node(doc) == "<h1>A</h1>\n<ul>\n<li>b</li>\n</ul>"

    def test_render_to_text_stream(self):
        """Test writing to a text stream."""
        output = StringIO()
        HtmlRenderer().render(MarkupParser().parse("# A"), output)
        assert output.getvalue() == "<h1>A</h1>"

    def test_render_to_binary_stream(self):
        """Test writing to a binary stream."""
        output = BytesIO()
        HtmlRenderer().render(MarkupParser().parse("# Café"), output)
        assert output.getvalue() == "<h1>Café</h1>".encode("utf-8")

    def test_render_to_path(self, temp_dir):
        """Test writing to a file path."""
        path = temp_dir / "out.html"
        HtmlRenderer().render(MarkupParser().parse("---"), path)
        assert path.read_text(encoding="utf-8") == "<hr>"

    def test_render_is_deterministic(self, sample_markup):
        """Test that rendering the same tree twice gives the same output."""
        doc = MarkupParser().parse(sample_markup)
        renderer = HtmlRenderer()
        assert renderer.render_blocks(doc) == renderer.render_blocks(doc)

    def test_wrong_options_class(self):
        """Test that parser options are rejected by the renderer."""
        with pytest.raises(InvalidOptionsError):
            HtmlRenderer(MarkupParserOptions())

    @pytest.mark.parametrize("prefix", ['x"', "a b", "<p>"])
    def test_unsafe_class_prefix(self, prefix):
        """Test that class prefixes unsafe in an attribute are rejected."""
        with pytest.raises(ValueError):
            HtmlRendererOptions(code_class_prefix=prefix)

    def test_blank_line_and_break_templates(self):
        """Test the void elements through render_node."""
        renderer = HtmlRenderer()
        assert renderer.render_node(BlankLine()) == "<br>"
        assert renderer.render_node(ThematicBreak(marker="*")) == "<hr>"

    def test_quote_line_template(self):
        """Test render_node on quote lines."""
        renderer = HtmlRenderer()
        assert renderer.render_node(QuoteLine()) == "<p></p>"
        assert renderer.render_node(QuoteLine(content=Line(content=(Text("q"),)))) == "<p>q</p>"

    def test_code_fence_node(self):
        """Test render_node on a code fence node."""
        assert HtmlRenderer().render_node(CodeFence(body="", language="c")) == '<pre><code class="language-c"></code></pre>'
