"""Option dataclasses for tinymark parsers and renderers."""

from tinymark.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from tinymark.options.html import HtmlRendererOptions
from tinymark.options.markup import MarkupParserOptions

__all__ = [
    "BaseParserOptions",
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "HtmlRendererOptions",
    "MarkupParserOptions",
]
