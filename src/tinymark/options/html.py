#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for HTML rendering."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from tinymark.constants import DEFAULT_BLOCK_SEPARATOR, DEFAULT_CODE_CLASS_PREFIX, DEFAULT_ESCAPE_QUOTES
from tinymark.options.base import BaseRendererOptions

_CLASS_PREFIX_PATTERN = re.compile(r"^[A-Za-z0-9_-]*$")


# src/tinymark/options/html.py
@dataclass(frozen=True)
class HtmlRendererOptions(BaseRendererOptions):
    """Configuration options for rendering AST to HTML.

    Parameters
    ----------
    escape_quotes : bool, default True
        Escape ``"`` and ``'`` in text in addition to ``&``, ``<`` and ``>``.
    code_class_prefix : str, default "language-"
        Prefix of the class attribute placed on fenced code with a language
        tag. Limited to letters, digits, ``-`` and ``_``.
    block_separator : str, default "\\n"
        String placed between top-level blocks by ``render_to_string``.

    """

    escape_quotes: bool = field(
        default=DEFAULT_ESCAPE_QUOTES,
        metadata={"help": "Escape quote characters in text content", "importance": "core"},
    )
    code_class_prefix: str = field(
        default=DEFAULT_CODE_CLASS_PREFIX,
        metadata={"help": "Class prefix for fenced code language tags", "importance": "advanced"},
    )
    block_separator: str = field(
        default=DEFAULT_BLOCK_SEPARATOR,
        metadata={"help": "Separator between rendered top-level blocks", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate option values.

        Raises
        ------
        TypeError
            If a field holds a value of the wrong type.
        ValueError
            If ``code_class_prefix`` contains characters unsafe in an attribute.

        """
        self._validate_field_types()
        if not _CLASS_PREFIX_PATTERN.match(self.code_class_prefix):
            raise ValueError(
                f"code_class_prefix may only contain letters, digits, '-' and '_', got {self.code_class_prefix!r}"
            )
