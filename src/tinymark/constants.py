#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the tinymark library.

This module centralizes the literal markers, default option values and CLI
exit codes used across tinymark.

Constants are organized by category:
1. Type Definitions
2. Markup Markers
3. Parser Defaults
4. HTML Rendering Defaults
5. CLI and Configuration
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

EmphasisDelimiter = Literal["*", "_"]
ThematicBreakMarker = Literal["-", "*", "_"]

# =============================================================================
# Markup Markers
# =============================================================================

HEADING_MARKER = "#"
MAX_HEADING_LEVEL = 3
QUOTE_MARKER = ">"
CODE_FENCE = "```"
ESCAPE_CHAR = "\\"
UNORDERED_LIST_MARKERS = ("-", "*")
THEMATIC_BREAK_MARKERS: tuple[ThematicBreakMarker, ...] = ("-", "*", "_")
MIN_THEMATIC_BREAK_LENGTH = 3

# Characters that may open an inline construct. Everything else is plain text.
INLINE_SPECIAL_CHARS = frozenset("\\*_~`[!")

# Characters that may never appear unescaped inside a link or image URL.
URL_FORBIDDEN_CHARS = frozenset(" \t\n\"'<>`")

# =============================================================================
# Parser Defaults
# =============================================================================

DEFAULT_STRICT_MODE = True

# =============================================================================
# HTML Rendering Defaults
# =============================================================================

DEFAULT_ESCAPE_QUOTES = True
DEFAULT_CODE_CLASS_PREFIX = "language-"
DEFAULT_BLOCK_SEPARATOR = "\n"

# =============================================================================
# CLI and Configuration
# =============================================================================

ENV_PREFIX = "TINYMARK_"
CONFIG_FILENAMES = [".tinymark.toml", ".tinymark.yaml", ".tinymark.yml", ".tinymark.json"]
PYPROJECT_SECTION = "tinymark"

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_PARSING_ERROR = 6
EXIT_RENDERING_ERROR = 7

SUPPORTED_FEATURES = (
    "Headings (levels 1-3)",
    "Paragraphs and blank lines",
    "Block quotes",
    "Ordered and unordered lists",
    "Fenced code blocks with language tags",
    "Thematic breaks",
    "Bold, italic, underline and strikethrough",
    "Inline code, links and images",
    "Backslash escapes",
)
