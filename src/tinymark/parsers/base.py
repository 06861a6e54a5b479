#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/tinymark/parsers/base.py
"""Base classes for markup parsers.

This module defines the abstract base class that parsers inherit from. The
BaseParser provides a consistent interface for turning source text into the
tinymark AST (Abstract Syntax Tree).

"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Union

from tinymark.ast import Document
from tinymark.exceptions import InputFileNotFoundError, InvalidOptionsError, ValidationError
from tinymark.options.base import BaseParserOptions
from tinymark.utils.encoding import read_text_with_encoding_detection

logger = logging.getLogger(__name__)

ParserInput = Union[str, Path, IO[bytes], IO[str], bytes]


class BaseParser(ABC):
    """Abstract base class for all markup parsers.

    Parameters
    ----------
    options : BaseParserOptions or None, default = None
        Format-specific parsing options

    Notes
    -----
    The parse() method accepts:
    - str: markup text (never interpreted as a file path)
    - Path: file to read
    - IO[bytes] or IO[str]: open file-like object
    - bytes: raw markup bytes, decoded with encoding detection

    """

    def __init__(self, options: BaseParserOptions | None = None):
        """Initialize the parser with optional configuration."""
        self.options: BaseParserOptions | None = options

    @staticmethod
    def _validate_options_type(options: BaseParserOptions | None, expected_type: type, parser_name: str) -> None:
        """Validate that options are of the correct type for this parser.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                component_name=parser_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @abstractmethod
    def parse(self, input_data: ParserInput) -> Document:
        """Parse the input into a Document.

        Parameters
        ----------
        input_data : str, Path, IO, or bytes
            Markup to parse

        Returns
        -------
        Document
            Root of the parsed tree

        Raises
        ------
        ParseError
            If the grammar cannot consume the input

        """
        raise NotImplementedError

    @staticmethod
    def _load_text_content(input_data: ParserInput) -> str:
        """Load markup text from the supported input types.

        Raises
        ------
        InputFileNotFoundError
            If a Path does not point to a readable file
        ValidationError
            If the input type is not supported

        """
        if isinstance(input_data, str):
            return input_data
        if isinstance(input_data, bytes):
            return read_text_with_encoding_detection(input_data)
        if isinstance(input_data, Path):
            try:
                data = input_data.read_bytes()
            except OSError as e:
                raise InputFileNotFoundError(str(input_data), original_error=e) from e
            logger.debug(f"Read {len(data)} bytes from {input_data}")
            return read_text_with_encoding_detection(data)
        if hasattr(input_data, "read"):
            content = input_data.read()
            if isinstance(content, bytes):
                return read_text_with_encoding_detection(content)
            return content
        raise ValidationError(
            f"Unsupported input type: {type(input_data).__name__}",
            parameter_name="input_data",
            parameter_value=input_data,
        )
