#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for parsing tinymark markup."""

from __future__ import annotations

from dataclasses import dataclass, field

from tinymark.constants import DEFAULT_STRICT_MODE
from tinymark.options.base import BaseParserOptions


# src/tinymark/options/markup.py
@dataclass(frozen=True)
class MarkupParserOptions(BaseParserOptions):
    """Configuration options for the markup parser.

    Parameters
    ----------
    strict_mode : bool, default True
        Raise ParseError for constructs no rule can consume: a backslash that
        is not followed by a punctuation character, and a code fence without a
        closing fence. When False, the stray backslash is kept as literal text
        and an unterminated fence runs to the end of the input.

    """

    strict_mode: bool = field(
        default=DEFAULT_STRICT_MODE,
        metadata={
            "help": "Fail on invalid escapes and unterminated code fences instead of recovering",
            "importance": "core",
        },
    )

    def __post_init__(self) -> None:
        """Reject non-boolean ``strict_mode`` values."""
        self._validate_field_types()
