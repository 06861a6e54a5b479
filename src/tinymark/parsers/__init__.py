#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/tinymark/parsers/__init__.py
"""Parsers that turn markup into the tinymark AST."""

from tinymark.parsers.base import BaseParser
from tinymark.parsers.grammar import Rule
from tinymark.parsers.markup import MarkupParser

__all__ = ["BaseParser", "MarkupParser", "Rule"]
