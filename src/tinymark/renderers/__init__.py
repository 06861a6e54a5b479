#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/tinymark/renderers/__init__.py
"""Renderers that turn the tinymark AST into output formats."""

from tinymark.renderers.base import BaseRenderer, InlineContentMixin
from tinymark.renderers.html import HtmlRenderer

__all__ = ["BaseRenderer", "HtmlRenderer", "InlineContentMixin"]
