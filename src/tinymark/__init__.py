"""tinymark - a lightweight markup to HTML converter.

tinymark parses a small, fixed markup dialect into an immutable node tree and
renders that tree to escaped HTML, one string per top-level block.

Supported Syntax
----------------
- **Blocks**: headings (``#`` to ``###``), paragraphs, ``>`` quotes,
  ``-``/``*`` and ``1.`` lists, fenced code with a language tag, thematic
  breaks (``---``, ``***``, ``___``) and blank lines
- **Inlines**: ``**bold**``, ``*italic*``/``_italic_``, ``__underline__``,
  ``~~strikethrough~~``, `` `code` ``, ``[links](url)``, ``![images](url)``
  and backslash escapes

Examples
--------
Convert text to HTML blocks:

    >>> from tinymark import render
    >>> render("# Hello\\n___\\n\\nThis is **bold** text.")
    ['<h1>Hello</h1>', '<hr>', '<br>', '<p>This is <strong>bold</strong> text.</p>']

Work with the tree directly:

    >>> from tinymark import parse
    >>> doc = parse("- one\\n- two")
    >>> [item.text for item in doc.children[0].items]
    ['one', 'two']

See Also
--------
tinymark.ast : AST node definitions and utilities
tinymark.parsers.grammar : grammar rule tables

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

__version__ = "0.1.0"

from tinymark.api import convert_file, parse, render, render_document, to_html
from tinymark.ast import Document
from tinymark.exceptions import (
    ConfigError,
    ConversionError,
    FileError,
    InputFileNotFoundError,
    InvalidOptionsError,
    MalformedNodeError,
    OutputWriteError,
    ParseError,
    TinymarkError,
    ValidationError,
)
from tinymark.options import HtmlRendererOptions, MarkupParserOptions
from tinymark.parsers import MarkupParser, Rule
from tinymark.renderers import HtmlRenderer

__all__ = [
    "__version__",
    # API
    "parse",
    "render",
    "render_document",
    "to_html",
    "convert_file",
    # Components
    "Document",
    "MarkupParser",
    "HtmlRenderer",
    "Rule",
    "MarkupParserOptions",
    "HtmlRendererOptions",
    # Exceptions
    "TinymarkError",
    "ValidationError",
    "InvalidOptionsError",
    "ConfigError",
    "FileError",
    "InputFileNotFoundError",
    "OutputWriteError",
    "ParseError",
    "ConversionError",
    "MalformedNodeError",
]
