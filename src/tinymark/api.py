"""The exported API functions for markup conversion."""

#  Copyright (c) 2025 Tom Villani, Ph.D.
# src/tinymark/api.py
import logging
from pathlib import Path
from typing import IO, Optional, Union

from tinymark.ast.nodes import Document
from tinymark.exceptions import ConversionError, ParseError
from tinymark.options.html import HtmlRendererOptions
from tinymark.options.markup import MarkupParserOptions
from tinymark.parsers.base import ParserInput
from tinymark.parsers.markup import MarkupParser
from tinymark.renderers.html import HtmlRenderer
from tinymark.utils.io_utils import write_content
from tinymark.utils.timing import debug_timer

logger = logging.getLogger(__name__)


def parse(source: ParserInput, options: Optional[MarkupParserOptions] = None) -> Document:
    """Parse markup into a Document tree.

    Parameters
    ----------
    source : str, Path, IO, or bytes
        Markup text, a path to a markup file, an open stream or raw bytes.
        A ``str`` is always treated as markup text.
    options : MarkupParserOptions, optional
        Parser configuration

    Returns
    -------
    Document
        Top-level blocks in source order followed by one EndOfInput

    Raises
    ------
    ParseError
        If the grammar cannot consume the input

    Examples
    --------
    >>> doc = parse("# Title")
    >>> doc.children[0].text
    'Title'

    """
    with debug_timer(logger, "Parsing"):
        return MarkupParser(options).parse(source)


def render_document(document: Document, renderer_options: Optional[HtmlRendererOptions] = None) -> list[str]:
    """Render a parsed document to one HTML string per top-level block.

    Raises
    ------
    MalformedNodeError
        If the tree contains a node the renderer has no template for

    """
    with debug_timer(logger, "Rendering"):
        return HtmlRenderer(renderer_options).render_blocks(document)


def render(
    source: ParserInput,
    parser_options: Optional[MarkupParserOptions] = None,
    renderer_options: Optional[HtmlRendererOptions] = None,
) -> list[str]:
    """Convert markup to HTML, one string per top-level block.

    The call either converts the whole document or fails as a unit.

    Parameters
    ----------
    source : str, Path, IO, or bytes
        Markup to convert
    parser_options : MarkupParserOptions, optional
        Parser configuration
    renderer_options : HtmlRendererOptions, optional
        Renderer configuration

    Returns
    -------
    list of str
        HTML for each block in source order

    Raises
    ------
    ConversionError
        If parsing fails (the ParseError is kept as ``original_error``) or a
        node cannot be rendered

    Examples
    --------
    >>> render("# Hello\\n___\\n\\nThis is **bold** text.")
    ['<h1>Hello</h1>', '<hr>', '<br>', '<p>This is <strong>bold</strong> text.</p>']

    """
    try:
        document = parse(source, parser_options)
    except ParseError as e:
        raise ConversionError(e.message, original_error=e) from e
    return render_document(document, renderer_options)


def to_html(
    source: ParserInput,
    parser_options: Optional[MarkupParserOptions] = None,
    renderer_options: Optional[HtmlRendererOptions] = None,
) -> str:
    """Convert markup to a single HTML string.

    Blocks are joined with the renderer's ``block_separator`` (a newline by
    default).
    """
    options = renderer_options or HtmlRendererOptions()
    return options.block_separator.join(render(source, parser_options, options))


def convert_file(
    input_path: Union[str, Path],
    output_path: Union[str, Path, IO[str], IO[bytes]],
    parser_options: Optional[MarkupParserOptions] = None,
    renderer_options: Optional[HtmlRendererOptions] = None,
) -> int:
    """Convert a markup file and write one HTML string per line.

    Parameters
    ----------
    input_path : str or Path
        Markup file to read completely before conversion
    output_path : str, Path, or IO
        Destination file or stream
    parser_options : MarkupParserOptions, optional
        Parser configuration
    renderer_options : HtmlRendererOptions, optional
        Renderer configuration

    Returns
    -------
    int
        Number of blocks written

    Raises
    ------
    InputFileNotFoundError
        If the input file cannot be read
    ConversionError
        If the document cannot be converted
    OutputWriteError
        If the output file cannot be written

    """
    blocks = render(Path(input_path), parser_options, renderer_options)
    write_content("".join(f"{block}\n" for block in blocks), output_path)
    logger.info(f"Converted {input_path} ({len(blocks)} blocks)")
    return len(blocks)
