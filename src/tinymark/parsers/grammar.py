#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/tinymark/parsers/grammar.py
"""Grammar tables for the tinymark markup dialect.

The grammar is expressed as data: named rules, the regular expressions that
recognize each construct and the order in which rules are tried. The
procedural driver in :mod:`tinymark.parsers.markup` walks these tables and
builds nodes from the matches.

Block rules are matched with ``fullmatch`` against a single source line with
its newline removed. Inline rules are matched with ``match`` at a position
inside a line.
"""

from __future__ import annotations

import re
from enum import Enum


class Rule(str, Enum):
    """Named grammar rules.

    The value of each member is the rule name reported by ``ParseError``.
    """

    DOCUMENT = "document"
    BLOCK = "block"
    HEADING = "heading"
    THEMATIC_BREAK = "thematic_break"
    QUOTE = "quote"
    QUOTE_LINE = "quote_line"
    UNORDERED_LIST = "unordered_list"
    UNORDERED_LIST_ITEM = "unordered_list_item"
    ORDERED_LIST = "ordered_list"
    ORDERED_LIST_ITEM = "ordered_list_item"
    CODE_FENCE = "code_fence"
    BLANK_LINE = "blank_line"
    PARAGRAPH = "paragraph"
    LINE = "line"
    INLINE = "inline"
    ESCAPE_SEQUENCE = "escape_sequence"
    BOLD = "bold"
    ITALIC = "italic"
    UNDERLINE = "underline"
    STRIKETHROUGH = "strikethrough"
    INLINE_CODE = "inline_code"
    LINK = "link"
    IMAGE = "image"
    PLAIN_TEXT = "plain_text"

    def __str__(self) -> str:
        return self.value


# =============================================================================
# Block patterns (fullmatch against one line without its newline)
# =============================================================================

HEADING_PATTERN = re.compile(r"(?P<marker>#{1,3})[ \t]+(?P<text>\S.*?)\s*")
THEMATIC_BREAK_PATTERN = re.compile(r"(?P<marker>-{3,}|\*{3,}|_{3,})[ \t]*")
CODE_FENCE_OPEN_PATTERN = re.compile(r"```[ \t]*(?P<language>[^\s`]+)?[ \t]*")
CODE_FENCE_CLOSE_PATTERN = re.compile(r"```[ \t]*")
QUOTE_LINE_PATTERN = re.compile(r">[ \t]*(?P<text>.*)")
UNORDERED_ITEM_PATTERN = re.compile(r"(?P<marker>[-*])[ \t]+(?P<text>\S.*?)\s*")
ORDERED_ITEM_PATTERN = re.compile(r"(?P<marker>[0-9]+\.)[ \t]+(?P<text>\S.*?)\s*")
BLANK_LINE_PATTERN = re.compile(r"[ \t]*")

# Rules that may start a block, in the order they are tried. Paragraph is the
# fallback and is never listed here.
BLOCK_START_RULES: tuple[Rule, ...] = (
    Rule.CODE_FENCE,
    Rule.HEADING,
    Rule.THEMATIC_BREAK,
    Rule.QUOTE,
    Rule.UNORDERED_LIST,
    Rule.ORDERED_LIST,
    Rule.BLANK_LINE,
)

# Pattern that decides whether a line starts each block rule.
BLOCK_START_PATTERNS: dict[Rule, re.Pattern[str]] = {
    Rule.CODE_FENCE: CODE_FENCE_OPEN_PATTERN,
    Rule.HEADING: HEADING_PATTERN,
    Rule.THEMATIC_BREAK: THEMATIC_BREAK_PATTERN,
    Rule.QUOTE: QUOTE_LINE_PATTERN,
    Rule.UNORDERED_LIST: UNORDERED_ITEM_PATTERN,
    Rule.ORDERED_LIST: ORDERED_ITEM_PATTERN,
    Rule.BLANK_LINE: BLANK_LINE_PATTERN,
}

# =============================================================================
# Inline patterns (match at a position inside a line)
# =============================================================================

# Backslash followed by one ASCII punctuation character.
ESCAPE_PATTERN = re.compile(r"\\(?P<character>[!-/:-@\[-`{-~])")
BOLD_PATTERN = re.compile(r"\*\*(?P<content>(?:(?!\*\*).)+)\*\*")
ITALIC_STAR_PATTERN = re.compile(r"\*(?P<content>[^*]+)\*")
UNDERLINE_PATTERN = re.compile(r"__(?P<content>(?:(?!__).)+)__")
ITALIC_UNDERSCORE_PATTERN = re.compile(r"_(?P<content>[^_]+)_")
STRIKETHROUGH_PATTERN = re.compile(r"~~(?P<content>(?:(?!~~).)+)~~")
INLINE_CODE_PATTERN = re.compile(r"`(?P<content>[^`]+)`")

# URL characters: no whitespace, quotes, angle brackets, backticks or an
# unescaped ")". A backslash escapes the next allowed character.
_URL = r"(?P<url>(?:\\[^\s\"'<>`]|[^)\\\s\"'<>`])+)"
LINK_PATTERN = re.compile(r"\[(?P<text>(?:\\.|[^\]\\])+)\]\(" + _URL + r"\)")
IMAGE_PATTERN = re.compile(r"!\[(?P<alt>(?:\\.|[^\]\\])*)\]\(" + _URL + r"\)")

# Longest run of characters that cannot open an inline construct.
PLAIN_TEXT_PATTERN = re.compile(r"[^\\*_~`\[!]+")

# Candidate rules keyed by the character that opens them, in priority order.
INLINE_DISPATCH: dict[str, tuple[tuple[Rule, re.Pattern[str]], ...]] = {
    "\\": ((Rule.ESCAPE_SEQUENCE, ESCAPE_PATTERN),),
    "*": ((Rule.BOLD, BOLD_PATTERN), (Rule.ITALIC, ITALIC_STAR_PATTERN)),
    "_": ((Rule.UNDERLINE, UNDERLINE_PATTERN), (Rule.ITALIC, ITALIC_UNDERSCORE_PATTERN)),
    "~": ((Rule.STRIKETHROUGH, STRIKETHROUGH_PATTERN),),
    "`": ((Rule.INLINE_CODE, INLINE_CODE_PATTERN),),
    "!": ((Rule.IMAGE, IMAGE_PATTERN),),
    "[": ((Rule.LINK, LINK_PATTERN),),
}

# Patterns used when a single inline rule is requested by name.
INLINE_RULE_PATTERNS: dict[Rule, tuple[re.Pattern[str], ...]] = {
    Rule.ESCAPE_SEQUENCE: (ESCAPE_PATTERN,),
    Rule.BOLD: (BOLD_PATTERN,),
    Rule.ITALIC: (ITALIC_STAR_PATTERN, ITALIC_UNDERSCORE_PATTERN),
    Rule.UNDERLINE: (UNDERLINE_PATTERN,),
    Rule.STRIKETHROUGH: (STRIKETHROUGH_PATTERN,),
    Rule.INLINE_CODE: (INLINE_CODE_PATTERN,),
    Rule.LINK: (LINK_PATTERN,),
    Rule.IMAGE: (IMAGE_PATTERN,),
    Rule.PLAIN_TEXT: (PLAIN_TEXT_PATTERN,),
}

# Human-readable description of what each rule expects, used in errors.
EXPECTED: dict[Rule, str] = {
    Rule.DOCUMENT: "a document",
    Rule.BLOCK: "a block",
    Rule.HEADING: "1-3 '#' followed by whitespace and text",
    Rule.THEMATIC_BREAK: "three or more '-', '*' or '_'",
    Rule.QUOTE: "lines starting with '>'",
    Rule.QUOTE_LINE: "a line starting with '>'",
    Rule.UNORDERED_LIST: "lines starting with '-' or '*' and whitespace",
    Rule.UNORDERED_LIST_ITEM: "'-' or '*' followed by whitespace and text",
    Rule.ORDERED_LIST: "lines starting with a number, '.' and whitespace",
    Rule.ORDERED_LIST_ITEM: "a number and '.' followed by whitespace and text",
    Rule.CODE_FENCE: "a closing ``` line",
    Rule.BLANK_LINE: "an empty or whitespace-only line",
    Rule.PARAGRAPH: "paragraph text",
    Rule.LINE: "a single line of inline content",
    Rule.INLINE: "an inline element",
    Rule.ESCAPE_SEQUENCE: "an ASCII punctuation character after '\\'",
    Rule.BOLD: "non-empty text between '**' delimiters",
    Rule.ITALIC: "non-empty text between '*' or '_' delimiters",
    Rule.UNDERLINE: "non-empty text between '__' delimiters",
    Rule.STRIKETHROUGH: "non-empty text between '~~' delimiters",
    Rule.INLINE_CODE: "non-empty text between backticks",
    Rule.LINK: "[text](url)",
    Rule.IMAGE: "![alt](url)",
    Rule.PLAIN_TEXT: "plain text without markup characters",
}
