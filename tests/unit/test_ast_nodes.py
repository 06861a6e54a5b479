#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_ast_nodes.py
"""Unit tests for AST node classes, traversal helpers and serialization."""

import json
from dataclasses import FrozenInstanceError

import pytest

from tinymark.ast import (
    BlankLine,
    BlockQuote,
    Code,
    CodeFence,
    Document,
    Emphasis,
    EndOfInput,
    Heading,
    Line,
    ListItem,
    NodeVisitor,
    Paragraph,
    QuoteLine,
    SourceLocation,
    Strong,
    Text,
    ThematicBreak,
    UnorderedList,
    ast_to_dict,
    ast_to_json,
    count_nodes,
    get_node_children,
    iter_nodes,
)
from tinymark.parsers import MarkupParser


@pytest.mark.unit
class TestNodeBasics:
    """Test node construction and properties."""

    def test_nodes_are_immutable(self):
        """Test that nodes cannot be modified after construction."""
        node = Text("x")
        with pytest.raises(FrozenInstanceError):
            node.content = "y"

    def test_nodes_compare_by_value(self):
        """Test structural equality."""
        assert Strong("a", span="**a**") == Strong("a", span="**a**")
        assert Strong("a") != Emphasis("a")

    def test_kind_is_class_name(self):
        """Test the kind property."""
        assert Text("x").kind == "Text"
        assert EndOfInput().kind == "EndOfInput"

    @pytest.mark.parametrize("level", [0, 4, -1])
    def test_heading_level_validated(self, level):
        """Test that heading levels outside 1-3 are rejected."""
        with pytest.raises(ValueError, match="Heading level"):
            Heading(level=level, text="x")

    def test_document_blocks_excludes_end_marker(self):
        """Test that Document.blocks drops the end-of-input marker."""
        doc = Document(children=(BlankLine(), ThematicBreak(), EndOfInput()))
        assert [block.kind for block in doc.blocks] == ["BlankLine", "ThematicBreak"]

    def test_source_location_fields(self):
        """Test SourceLocation values."""
        location = SourceLocation(line=2, column=3, offset=10)
        assert (location.line, location.column, location.offset) == (2, 3, 10)


@pytest.mark.unit
class TestTraversal:
    """Test child access and tree walking."""

    def test_children_of_containers(self):
        """Test get_node_children for each container kind."""
        line = Line(content=(Text("a"), Strong("b")))
        assert get_node_children(line) == [Text("a"), Strong("b")]
        assert get_node_children(Paragraph(lines=(line,))) == [line]
        assert get_node_children(QuoteLine(content=line)) == [line]
        assert get_node_children(QuoteLine()) == []
        assert get_node_children(BlockQuote(lines=(QuoteLine(),))) == [QuoteLine()]
        item = ListItem(marker="-", text="x", content=(Text("x"),))
        assert get_node_children(UnorderedList(items=(item,))) == [item]
        assert get_node_children(item) == [Text("x")]

    def test_leaves_have_no_children(self):
        """Test that leaf nodes report no children."""
        for leaf in (Text("x"), Code("c"), CodeFence(body=""), ThematicBreak(), BlankLine(), EndOfInput()):
            assert get_node_children(leaf) == []

    def test_iter_nodes_preorder(self):
        """Test that iter_nodes yields parents before children in source order."""
        doc = MarkupParser().parse("# A\n- b *c*")
        kinds = [node.kind for node in iter_nodes(doc)]
        assert kinds == [
            "Document",
            "Heading",
            "Text",
            "UnorderedList",
            "ListItem",
            "Text",
            "Emphasis",
            "EndOfInput",
        ]

    def test_count_nodes(self):
        """Test counting the nodes of a subtree."""
        paragraph = Paragraph(lines=(Line(content=(Text("a"),)), Line(content=(Text("b"), Code("c")))))
        assert count_nodes(paragraph) == 6


class KindCollector(NodeVisitor):
    """Visitor that records the kind of every node it visits."""

    def __init__(self):
        self.kinds = []

    def _record(self, node):
        self.kinds.append(node.kind)
        for child in get_node_children(node):
            child.accept(self)

    visit_document = visit_heading = visit_paragraph = visit_line = _record
    visit_block_quote = visit_quote_line = visit_unordered_list = visit_ordered_list = _record
    visit_list_item = visit_code_fence = visit_thematic_break = visit_blank_line = _record
    visit_end_of_input = visit_text = visit_strong = visit_emphasis = visit_underline = _record
    visit_strikethrough = visit_code = visit_link = visit_image = visit_escape_sequence = _record


@pytest.mark.unit
class TestVisitor:
    """Test the visitor base class."""

    def test_visitor_dispatch(self):
        """Test that accept() dispatches to the matching visit method."""
        collector = KindCollector()
        MarkupParser().parse("> **a** [l](u) ![i](u) \\# ~~s~~ __u__").accept(collector)
        assert collector.kinds == [
            "Document",
            "BlockQuote",
            "QuoteLine",
            "Line",
            "Strong",
            "Text",
            "Link",
            "Text",
            "Image",
            "Text",
            "EscapeSequence",
            "Text",
            "Strikethrough",
            "Text",
            "Underline",
            "EndOfInput",
        ]

    def test_incomplete_visitor_cannot_be_instantiated(self):
        """Test that a visitor must handle every node kind."""

        class TextOnly(NodeVisitor):
            def visit_text(self, node):
                return node.content

        with pytest.raises(TypeError):
            TextOnly()


@pytest.mark.unit
class TestSerialization:
    """Test AST to dict and JSON conversion."""

    def test_leaf_to_dict(self):
        """Test serializing a leaf node."""
        node = Strong("b", span="**b**", source_location=SourceLocation(1, 1, 0))
        assert ast_to_dict(node) == {
            "node_type": "Strong",
            "content": "b",
            "span": "**b**",
            "source_location": {"line": 1, "column": 1, "offset": 0},
        }

    def test_without_spans(self):
        """Test leaving spans and locations out."""
        node = Emphasis("i", delimiter="_", span="_i_", source_location=SourceLocation(1, 1, 0))
        assert ast_to_dict(node, include_spans=False) == {"node_type": "Emphasis", "content": "i", "delimiter": "_"}

    def test_missing_location_is_omitted(self):
        """Test that a None source location is not serialized."""
        assert "source_location" not in ast_to_dict(Text("x"))

    def test_nested_nodes(self):
        """Test that children are serialized recursively."""
        doc = MarkupParser().parse("> q\n>")
        data = ast_to_dict(doc, include_spans=False)
        quote = data["children"][0]
        assert quote["node_type"] == "BlockQuote"
        assert quote["lines"][0]["content"]["content"][0] == {"node_type": "Text", "content": "q"}
        assert quote["lines"][1]["content"] is None
        assert data["children"][1] == {"node_type": "EndOfInput"}

    def test_json_output(self):
        """Test that the JSON output parses back to the dict form."""
        doc = MarkupParser().parse("# Café\n```py\nx\n```")
        text = ast_to_json(doc)
        assert "Café" in text
        assert json.loads(text) == ast_to_dict(doc)

    def test_compact_json(self):
        """Test JSON without indentation."""
        assert "\n" not in ast_to_json(Text("x"), indent=None)

    def test_non_node_rejected(self):
        """Test that non-node values are rejected."""
        with pytest.raises(TypeError):
            ast_to_dict({"node_type": "Text"})
