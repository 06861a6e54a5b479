#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/tinymark/parsers/markup.py
"""Markup to AST converter.

This module turns tinymark source text into the immutable node tree defined in
:mod:`tinymark.ast`. Block structure is recognized line by line using the
tables in :mod:`tinymark.parsers.grammar`; the text of headings, list items,
quote lines and paragraph lines is then scanned for inline constructs.

Paragraph (for blocks) and plain text (for inlines) are fallbacks, so the only
inputs that fail are an invalid backslash escape and an unterminated code
fence. Both are reported as ParseError in strict mode and recovered from
otherwise.
"""

from __future__ import annotations

import logging
import re
from bisect import bisect_right
from typing import Callable, Optional, Union

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
)
from tinymark.constants import ESCAPE_CHAR
from tinymark.exceptions import ParseError
from tinymark.options.markup import MarkupParserOptions
from tinymark.parsers.base import BaseParser, ParserInput
from tinymark.parsers.grammar import (
    BLOCK_START_PATTERNS,
    BLOCK_START_RULES,
    CODE_FENCE_CLOSE_PATTERN,
    CODE_FENCE_OPEN_PATTERN,
    EXPECTED,
    HEADING_PATTERN,
    INLINE_DISPATCH,
    INLINE_RULE_PATTERNS,
    ORDERED_ITEM_PATTERN,
    PLAIN_TEXT_PATTERN,
    QUOTE_LINE_PATTERN,
    THEMATIC_BREAK_PATTERN,
    UNORDERED_ITEM_PATTERN,
    Rule,
)

logger = logging.getLogger(__name__)

# Rules that match exactly one line and produce one node.
_SINGLE_LINE_RULES: dict[Rule, re.Pattern[str]] = {
    Rule.QUOTE_LINE: QUOTE_LINE_PATTERN,
    Rule.UNORDERED_LIST_ITEM: UNORDERED_ITEM_PATTERN,
    Rule.ORDERED_LIST_ITEM: ORDERED_ITEM_PATTERN,
}


def normalize_newlines(text: str) -> str:
    """Convert ``\\r\\n`` and lone ``\\r`` line endings to ``\\n``."""
    return text.replace("\r\n", "\n").replace("\r", "\n")


class MarkupParser(BaseParser):
    """Convert tinymark markup to AST representation.

    Block rules are tried at the start of every line in a fixed order: code
    fence, heading, thematic break, quote, unordered list, ordered list and
    blank line, with paragraph as the fallback. Inside a line, escapes bind
    tightest, bold is tried before italic ``*``, underline before italic
    ``_``, and any marker that does not open a construct becomes plain text.

    Parameters
    ----------
    options : MarkupParserOptions or None, default = None
        Parser configuration options

    Examples
    --------
    Basic parsing:

        >>> parser = MarkupParser()
        >>> doc = parser.parse("# Title\\n\\nSome **bold** text.")
        >>> [child.kind for child in doc.children]
        ['Heading', 'BlankLine', 'Paragraph', 'EndOfInput']

    Matching a single grammar rule:

        >>> parser.parse_rule("bold", "**hi**")
        Strong(content='hi', span='**hi**', source_location=SourceLocation(line=1, column=1, offset=0))

    """

    def __init__(self, options: MarkupParserOptions | None = None):
        """Initialize the markup parser with options."""
        BaseParser._validate_options_type(options, MarkupParserOptions, "markup")
        options = options or MarkupParserOptions()
        super().__init__(options)
        self.options: MarkupParserOptions = options

        # Per-call state, reset by _reset()
        self._source = ""
        self._lines: list[str] = []
        self._offsets: list[int] = []
        self._line_starts: list[int] = [0]

        self._block_handlers: dict[Rule, Callable[[int], tuple[Node, int]]] = {
            Rule.CODE_FENCE: self._parse_code_fence,
            Rule.HEADING: self._parse_heading,
            Rule.THEMATIC_BREAK: self._parse_thematic_break,
            Rule.QUOTE: self._parse_quote,
            Rule.UNORDERED_LIST: self._parse_unordered_list,
            Rule.ORDERED_LIST: self._parse_ordered_list,
            Rule.BLANK_LINE: self._parse_blank_line,
            Rule.PARAGRAPH: self._parse_paragraph,
        }

    def parse(self, input_data: ParserInput) -> Document:
        """Parse markup into an AST Document.

        Parameters
        ----------
        input_data : str, Path, IO, or bytes
            Markup to parse. A str is always treated as markup text.

        Returns
        -------
        Document
            Top-level blocks in source order followed by one EndOfInput

        Raises
        ------
        ParseError
            In strict mode, for an invalid escape or an unterminated fence

        """
        self._reset(self._load_text_content(input_data))
        document = self._build_document()
        logger.debug(f"Parsed {len(document.children) - 1} blocks from {len(self._lines)} lines")
        return document

    def parse_rule(self, rule: Union[Rule, str], text: str) -> Node:
        """Match one named grammar rule against the whole of ``text``.

        Parameters
        ----------
        rule : Rule or str
            Rule to apply, e.g. ``"heading"`` or ``Rule.LINK``
        text : str
            Input that the rule must consume completely

        Returns
        -------
        Node
            The node built from the match

        Raises
        ------
        ParseError
            If the rule does not consume the entire input
        ValueError
            If ``rule`` is not a known rule name

        """
        rule = Rule(rule)
        self._reset(text)

        if rule is Rule.DOCUMENT:
            return self._build_document()
        if rule is Rule.INLINE or rule in INLINE_RULE_PATTERNS:
            return self._parse_single_inline(rule)
        if rule is Rule.LINE:
            if len(self._lines) > 1 or self._source.endswith("\n"):
                raise self._error(rule, self._source.index("\n"))
            return self._make_line(self._source, 0)
        if rule in _SINGLE_LINE_RULES:
            return self._parse_single_line_rule(rule)
        return self._parse_single_block(rule)

    # ------------------------------------------------------------------
    # Per-call state
    # ------------------------------------------------------------------

    def _reset(self, text: str) -> None:
        """Load new source text and recompute line tables."""
        self._source = normalize_newlines(text)

        pieces = self._source.split("\n")
        self._lines = [piece + "\n" for piece in pieces[:-1]]
        if pieces[-1]:
            self._lines.append(pieces[-1])

        self._offsets = []
        offset = 0
        for raw_line in self._lines:
            self._offsets.append(offset)
            offset += len(raw_line)

        self._line_starts = [0] + [index + 1 for index, char in enumerate(self._source) if char == "\n"]

    def _location(self, offset: int) -> SourceLocation:
        line = bisect_right(self._line_starts, offset)
        return SourceLocation(line=line, column=offset - self._line_starts[line - 1] + 1, offset=offset)

    def _content(self, index: int) -> str:
        """Return line ``index`` without its newline."""
        return self._lines[index].rstrip("\n")

    def _span(self, start: int, end: int) -> str:
        return "".join(self._lines[start:end])

    def _error(self, rule: Rule, position: int) -> ParseError:
        """Build a ParseError pointing at ``position`` in the source."""
        location = self._location(position)
        expected = EXPECTED[rule]
        source_line = self._source.split("\n")[location.line - 1]
        pointer = " " * (location.column - 1) + "^"
        message = (
            f"Parse error at line {location.line}, column {location.column} in rule '{rule.value}': "
            f"expected {expected}\n{source_line}\n{pointer}"
        )
        return ParseError(
            message,
            rule=rule.value,
            expected=expected,
            position=position,
            line=location.line,
            column=location.column,
        )

    # ------------------------------------------------------------------
    # Blocks
    # ------------------------------------------------------------------

    def _build_document(self) -> Document:
        blocks: list[Node] = []
        index = 0
        while index < len(self._lines):
            node, index = self._parse_block(index)
            blocks.append(node)

        end = EndOfInput(span="", source_location=self._location(len(self._source)))
        return Document(
            children=(*blocks, end),
            span=self._source,
            source_location=SourceLocation(line=1, column=1, offset=0),
        )

    def _match_block_start(self, index: int) -> Rule:
        """Return the first block rule whose start pattern matches line ``index``."""
        content = self._content(index)
        for rule in BLOCK_START_RULES:
            if BLOCK_START_PATTERNS[rule].fullmatch(content):
                return rule
        return Rule.PARAGRAPH

    def _parse_block(self, index: int) -> tuple[Node, int]:
        rule = self._match_block_start(index)
        return self._block_handlers[rule](index)

    def _parse_single_block(self, rule: Rule) -> Node:
        if not self._lines:
            raise self._error(rule, 0)

        if rule is Rule.BLOCK:
            rule = self._match_block_start(0)
        elif rule is not Rule.PARAGRAPH and not BLOCK_START_PATTERNS[rule].fullmatch(self._content(0)):
            raise self._error(rule, 0)

        node, next_index = self._block_handlers[rule](0)
        if next_index < len(self._lines):
            raise self._error(rule, self._offsets[next_index])
        return node

    def _parse_single_line_rule(self, rule: Rule) -> Node:
        if len(self._lines) != 1 or not _SINGLE_LINE_RULES[rule].fullmatch(self._content(0)):
            raise self._error(rule, 0)
        if rule is Rule.QUOTE_LINE:
            return self._make_quote_line(0)
        return self._make_list_item(0, _SINGLE_LINE_RULES[rule])

    def _parse_code_fence(self, index: int) -> tuple[Node, int]:
        opening = CODE_FENCE_OPEN_PATTERN.fullmatch(self._content(index))
        assert opening is not None
        language: Optional[str] = opening.group("language")

        close_index = index + 1
        while close_index < len(self._lines) and not CODE_FENCE_CLOSE_PATTERN.fullmatch(self._content(close_index)):
            close_index += 1

        if close_index < len(self._lines):
            next_index = close_index + 1
        elif self.options.strict_mode:
            raise self._error(Rule.CODE_FENCE, len(self._source))
        else:
            logger.warning(f"Unterminated code fence at line {index + 1}, treating rest of input as code")
            next_index = close_index

        body = self._span(index + 1, close_index)
        if body.endswith("\n"):
            body = body[:-1]

        node = CodeFence(
            body=body,
            language=language,
            span=self._span(index, next_index),
            source_location=self._location(self._offsets[index]),
        )
        return node, next_index

    def _parse_heading(self, index: int) -> tuple[Node, int]:
        match = HEADING_PATTERN.fullmatch(self._content(index))
        assert match is not None
        text = match.group("text")
        node = Heading(
            level=len(match.group("marker")),
            text=text,
            content=self._parse_inline(text, self._offsets[index] + match.start("text"), literal_escapes=True),
            span=self._lines[index],
            source_location=self._location(self._offsets[index]),
        )
        return node, index + 1

    def _parse_thematic_break(self, index: int) -> tuple[Node, int]:
        match = THEMATIC_BREAK_PATTERN.fullmatch(self._content(index))
        assert match is not None
        node = ThematicBreak(
            marker=match.group("marker")[0],
            span=self._lines[index],
            source_location=self._location(self._offsets[index]),
        )
        return node, index + 1

    def _parse_blank_line(self, index: int) -> tuple[Node, int]:
        return BlankLine(span=self._lines[index], source_location=self._location(self._offsets[index])), index + 1

    def _parse_quote(self, index: int) -> tuple[Node, int]:
        end = index
        quote_lines: list[QuoteLine] = []
        while end < len(self._lines) and QUOTE_LINE_PATTERN.fullmatch(self._content(end)):
            quote_lines.append(self._make_quote_line(end))
            end += 1

        node = BlockQuote(
            lines=tuple(quote_lines),
            span=self._span(index, end),
            source_location=self._location(self._offsets[index]),
        )
        return node, end

    def _make_quote_line(self, index: int) -> QuoteLine:
        match = QUOTE_LINE_PATTERN.fullmatch(self._content(index))
        assert match is not None
        text = match.group("text")
        line = self._make_line(text, self._offsets[index] + match.start("text")) if text else None
        return QuoteLine(content=line, span=self._lines[index], source_location=self._location(self._offsets[index]))

    def _parse_unordered_list(self, index: int) -> tuple[Node, int]:
        items, end = self._collect_list_items(index, UNORDERED_ITEM_PATTERN)
        node = UnorderedList(
            items=items, span=self._span(index, end), source_location=self._location(self._offsets[index])
        )
        return node, end

    def _parse_ordered_list(self, index: int) -> tuple[Node, int]:
        items, end = self._collect_list_items(index, ORDERED_ITEM_PATTERN)
        node = OrderedList(
            items=items, span=self._span(index, end), source_location=self._location(self._offsets[index])
        )
        return node, end

    def _collect_list_items(self, index: int, pattern: re.Pattern[str]) -> tuple[tuple[ListItem, ...], int]:
        """Consume consecutive lines of one list family.

        A line of the other family does not match ``pattern`` and therefore
        ends the list; it starts a new list of its own.
        """
        end = index
        items: list[ListItem] = []
        while end < len(self._lines) and pattern.fullmatch(self._content(end)):
            items.append(self._make_list_item(end, pattern))
            end += 1
        return tuple(items), end

    def _make_list_item(self, index: int, pattern: re.Pattern[str]) -> ListItem:
        match = pattern.fullmatch(self._content(index))
        assert match is not None
        text = match.group("text")
        return ListItem(
            marker=match.group("marker"),
            text=text,
            content=self._parse_inline(text, self._offsets[index] + match.start("text"), literal_escapes=True),
            span=self._lines[index],
            source_location=self._location(self._offsets[index]),
        )

    def _parse_paragraph(self, index: int) -> tuple[Node, int]:
        lines = [self._make_line(self._content(index), self._offsets[index])]
        end = index + 1
        while end < len(self._lines) and self._match_block_start(end) is Rule.PARAGRAPH:
            lines.append(self._make_line(self._content(end), self._offsets[end]))
            end += 1

        node = Paragraph(
            lines=tuple(lines), span=self._span(index, end), source_location=self._location(self._offsets[index])
        )
        return node, end

    def _make_line(self, text: str, offset: int) -> Line:
        return Line(content=self._parse_inline(text, offset), span=text, source_location=self._location(offset))

    # ------------------------------------------------------------------
    # Inlines
    # ------------------------------------------------------------------

    def _parse_inline(self, text: str, base_offset: int, literal_escapes: bool = False) -> tuple[Inline, ...]:
        """Scan one line of text for inline constructs.

        Characters that do not start a construct, including markers without a
        matching closer, are merged into the surrounding Text node.

        Parameters
        ----------
        text : str
            Line content to scan
        base_offset : int
            Offset of ``text`` in the source, used for node locations
        literal_escapes : bool, default False
            Keep a backslash that starts no escape sequence as text, even in
            strict mode. Headings and list items render their raw text, so
            such a backslash is never an error there.
        """
        nodes: list[Inline] = []
        pending: list[str] = []
        pending_start = 0
        pos = 0

        while pos < len(text):
            char = text[pos]
            candidates = INLINE_DISPATCH.get(char)

            if candidates is None:
                match = PLAIN_TEXT_PATTERN.match(text, pos)
                assert match is not None
                if not pending:
                    pending_start = pos
                pending.append(match.group(0))
                pos = match.end()
                continue

            node = self._match_inline(candidates, text, pos, base_offset)
            if node is not None:
                if pending:
                    nodes.append(self._make_text("".join(pending), base_offset + pending_start))
                    pending = []
                nodes.append(node)
                pos += len(node.span)
                continue

            if char == ESCAPE_CHAR and not literal_escapes:
                if self.options.strict_mode:
                    raise self._error(Rule.ESCAPE_SEQUENCE, base_offset + pos)
                logger.warning(f"Invalid escape sequence at offset {base_offset + pos}, keeping backslash as text")

            if not pending:
                pending_start = pos
            pending.append(char)
            pos += 1

        if pending:
            nodes.append(self._make_text("".join(pending), base_offset + pending_start))
        return tuple(nodes)

    def _match_inline(
        self,
        candidates: tuple[tuple[Rule, re.Pattern[str]], ...],
        text: str,
        pos: int,
        base_offset: int,
    ) -> Optional[Inline]:
        for rule, pattern in candidates:
            match = pattern.match(text, pos)
            if match:
                return self._build_inline(rule, match, base_offset)
        return None

    def _parse_single_inline(self, rule: Rule) -> Node:
        text = self._source
        if rule is Rule.INLINE:
            candidates = INLINE_DISPATCH.get(text[:1], ((Rule.PLAIN_TEXT, PLAIN_TEXT_PATTERN),))
        else:
            candidates = tuple((rule, pattern) for pattern in INLINE_RULE_PATTERNS[rule])

        farthest = 0
        for candidate_rule, pattern in candidates:
            match = pattern.match(text)
            if match and match.end() == len(text):
                return self._build_inline(candidate_rule, match, 0)
            if match:
                farthest = max(farthest, match.end())
        raise self._error(rule, farthest)

    def _build_inline(self, rule: Rule, match: re.Match[str], base_offset: int) -> Inline:
        span = match.group(0)
        location = self._location(base_offset + match.start())

        if rule is Rule.ESCAPE_SEQUENCE:
            return EscapeSequence(character=match.group("character"), span=span, source_location=location)
        if rule is Rule.BOLD:
            return Strong(content=match.group("content"), span=span, source_location=location)
        if rule is Rule.ITALIC:
            return Emphasis(content=match.group("content"), delimiter=span[0], span=span, source_location=location)
        if rule is Rule.UNDERLINE:
            return Underline(content=match.group("content"), span=span, source_location=location)
        if rule is Rule.STRIKETHROUGH:
            return Strikethrough(content=match.group("content"), span=span, source_location=location)
        if rule is Rule.INLINE_CODE:
            return Code(content=match.group("content"), span=span, source_location=location)
        if rule is Rule.LINK:
            return Link(text=match.group("text"), url=match.group("url"), span=span, source_location=location)
        if rule is Rule.IMAGE:
            return Image(alt_text=match.group("alt"), url=match.group("url"), span=span, source_location=location)
        return Text(content=span, span=span, source_location=location)

    def _make_text(self, content: str, offset: int) -> Text:
        return Text(content=content, span=content, source_location=self._location(offset))
