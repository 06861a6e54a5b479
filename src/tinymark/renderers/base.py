#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/tinymark/renderers/base.py
"""Base classes for AST renderers.

This module defines the abstract base class that renderers inherit from, and
the mixin used by text renderers to capture the output of inline children.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Iterable, Union

from tinymark.ast import Document, Node
from tinymark.exceptions import InvalidOptionsError
from tinymark.options.base import BaseRendererOptions
from tinymark.utils.io_utils import write_content


class BaseRenderer(ABC):
    """Abstract base class for all AST renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options

    @abstractmethod
    def render_to_string(self, doc: Document) -> str:
        """Render the AST to a string.

        Parameters
        ----------
        doc : Document
            AST Document node to render

        Returns
        -------
        str
            Rendered document

        """
        raise NotImplementedError

    def render(self, doc: Document, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Render the AST and write the result to ``output``.

        Parameters
        ----------
        doc : Document
            AST Document node to render
        output : str, Path, IO[bytes] or IO[str]
            File path or open stream

        Raises
        ------
        OutputWriteError
            If the output file cannot be written

        """
        self.write_text_output(self.render_to_string(doc), output)

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                component_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @staticmethod
    def write_text_output(text: str, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Write text output to a file path or stream.

        Examples
        --------
            >>> from io import StringIO
            >>> buffer = StringIO()
            >>> BaseRenderer.write_text_output("<hr>", buffer)
            >>> buffer.getvalue()
            '<hr>'

        """
        write_content(text, output)


class InlineContentMixin:
    """Mixin providing the inline capture pattern for text renderers.

    The implementing class must have:
    - A `_output` attribute (list[str]) for accumulating output
    - Visitor methods that append to `_output`

    """

    _output: list[str]

    def _render_inline_content(self, content: Iterable[Node]) -> str:
        """Render nodes into a string without touching the current output.

        Parameters
        ----------
        content : iterable of Node
            Nodes to render

        Returns
        -------
        str
            Concatenated output of the nodes

        """
        saved_output = self._output
        self._output = []
        try:
            for node in content:
                node.accept(self)
            return "".join(self._output)
        finally:
            self._output = saved_output
