#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/tinymark/utils/__init__.py
"""Utility modules for tinymark.

This package contains the text decoding, HTML escaping and output writing
helpers shared by parsers, renderers and the CLI.
"""

from tinymark.utils.encoding import detect_encoding, read_text_with_encoding_detection
from tinymark.utils.html_utils import escape_html
from tinymark.utils.io_utils import write_content

__all__ = [
    "detect_encoding",
    "escape_html",
    "read_text_with_encoding_detection",
    "write_content",
]
