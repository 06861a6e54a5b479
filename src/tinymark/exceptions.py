#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the tinymark library.

This module defines specialized exception classes for the error conditions
that can occur while parsing markup and rendering HTML. Every error is
terminal for the call that raised it: there is no partial result.

Exception Hierarchy
-------------------
- TinymarkError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class for parser or renderer)

  - ConfigError (unreadable or invalid configuration files)

  - FileError (file access and I/O)
    - InputFileNotFoundError (input file doesn't exist)
    - OutputWriteError (output file cannot be written)

  - ParseError (the grammar could not advance)

  - ConversionError (a whole conversion failed)
    - MalformedNodeError (renderer met an unknown node or empty content)

"""

from __future__ import annotations

from typing import Any


class TinymarkError(Exception):
    """Base exception class for all tinymark-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(TinymarkError):
    """Exception raised for invalid input parameters or options.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidOptionsError(ValidationError):
    """Exception raised when an incorrect options class is provided.

    Parameters
    ----------
    component_name : str
        Name of the parser or renderer that received invalid options
    expected_type : type
        The expected options class type
    received_type : type
        The actual options class type that was received
    message : str, optional
        Custom error message. If not provided, generates a helpful message

    """

    def __init__(
        self,
        component_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the invalid options error."""
        if message is None:
            message = (
                f"{component_name} expected options of type '{expected_type.__name__}' "
                f"but received '{received_type.__name__}'."
            )
        super().__init__(
            message, parameter_name="options", parameter_value=received_type, original_error=original_error
        )
        self.component_name = component_name
        self.expected_type = expected_type
        self.received_type = received_type


class ConfigError(TinymarkError):
    """Exception raised when a configuration file cannot be loaded.

    Parameters
    ----------
    message : str
        Description of the problem
    config_path : str, optional
        Path of the offending configuration file

    """

    def __init__(self, message: str, config_path: str | None = None, original_error: Exception | None = None):
        """Initialize the config error."""
        super().__init__(message, original_error=original_error)
        self.config_path = config_path


class FileError(TinymarkError):
    """Base exception for file access and I/O errors.

    Parameters
    ----------
    message : str
        Description of the file error
    file_path : str, optional
        Path to the problematic file

    """

    def __init__(self, message: str, file_path: str | None = None, original_error: Exception | None = None):
        """Initialize the file error with path and message."""
        super().__init__(message, original_error=original_error)
        self.file_path = file_path


class InputFileNotFoundError(FileError):
    """Exception raised when an input file cannot be found."""

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the file not found error."""
        if message is None:
            message = f"File not found: {file_path}"
        super().__init__(message, file_path=file_path, original_error=original_error)


class OutputWriteError(FileError):
    """Exception raised when writing an output file fails."""

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the output write error."""
        if message is None:
            message = f"Failed to write output file: {file_path}"
        super().__init__(message, file_path=file_path, original_error=original_error)


class ParseError(TinymarkError):
    """Exception raised when no grammar rule can advance at some input position.

    Paragraph and plain text are universal fallbacks, so this error points at
    a genuine grammar gap such as an invalid escape or an unterminated fence.

    Parameters
    ----------
    message : str
        Human-readable description, including the offending source line
    rule : str
        Name of the grammar rule that failed farthest into the input
    expected : str
        Description of the construct that was expected at that position
    position : int
        0-based character offset of the failure
    line : int
        1-based line number of the failure
    column : int
        1-based column number of the failure

    """

    def __init__(
        self,
        message: str,
        rule: str,
        expected: str,
        position: int = 0,
        line: int = 1,
        column: int = 1,
        original_error: Exception | None = None,
    ):
        """Initialize the parse error with its grammar position."""
        super().__init__(message, original_error)
        self.rule = rule
        self.expected = expected
        self.position = position
        self.line = line
        self.column = column


class ConversionError(TinymarkError):
    """Exception raised when converting a document to HTML fails as a unit.

    Wraps either a parse failure (``original_error`` is the ParseError) or a
    rendering failure (``node_kind`` names the offending node).

    Parameters
    ----------
    message : str
        Description of the conversion failure
    node_kind : str, optional
        Kind of the node the renderer could not handle
    original_error : Exception, optional
        The underlying exception

    """

    def __init__(self, message: str, node_kind: str | None = None, original_error: Exception | None = None):
        """Initialize the conversion error."""
        super().__init__(message, original_error)
        self.node_kind = node_kind


class MalformedNodeError(ConversionError):
    """Exception raised when the renderer has no template for a node.

    Raised for node kinds outside the closed node set and for formatting
    nodes whose content is empty, which signals a grammar defect.

    Parameters
    ----------
    node_kind : str
        Kind of the offending node
    reason : str, optional
        Why the node could not be rendered

    """

    def __init__(self, node_kind: str, reason: str | None = None, original_error: Exception | None = None):
        """Initialize the malformed node error."""
        message = f"Cannot render node '{node_kind}'"
        if reason:
            message += f": {reason}"
        super().__init__(message, node_kind=node_kind, original_error=original_error)
        self.reason = reason


__all__ = [
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
