#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_options_and_errors.py
"""Unit tests for option dataclasses and the exception hierarchy."""

from dataclasses import FrozenInstanceError

import pytest

from tinymark.exceptions import (
    ConfigError,
    ConversionError,
    FileError,
    InputFileNotFoundError,
    InvalidOptionsError,
    MalformedNodeError,
    OutputWriteError,
    ParseError,
    TinymarkError,
    ValidationError,
)
from tinymark.options import HtmlRendererOptions, MarkupParserOptions


@pytest.mark.unit
class TestMarkupParserOptions:
    """Test MarkupParserOptions."""

    def test_defaults(self):
        """Test default values."""
        assert MarkupParserOptions().strict_mode is True

    def test_frozen(self):
        """Test that options are immutable."""
        options = MarkupParserOptions()
        with pytest.raises(FrozenInstanceError):
            options.strict_mode = False

    def test_create_updated(self):
        """Test cloning with changed fields."""
        options = MarkupParserOptions()
        updated = options.create_updated(strict_mode=False)
        assert updated.strict_mode is False
        assert options.strict_mode is True

    def test_from_mapping_ignores_unknown_keys(self):
        """Test building options from a config section."""
        options = MarkupParserOptions.from_mapping({"strict_mode": False, "escape_quotes": True})
        assert options == MarkupParserOptions(strict_mode=False)

    @pytest.mark.parametrize("value", ["false", 0, None])
    def test_strict_mode_must_be_bool(self, value):
        """Test that non-boolean values are rejected."""
        with pytest.raises(TypeError, match="strict_mode must be a bool"):
            MarkupParserOptions(strict_mode=value)

    def test_field_help_metadata(self):
        """Test that every field carries help text for the CLI."""
        from dataclasses import fields

        for options_class in (MarkupParserOptions, HtmlRendererOptions):
            for option_field in fields(options_class):
                assert option_field.metadata.get("help")


@pytest.mark.unit
class TestHtmlRendererOptions:
    """Test HtmlRendererOptions."""

    def test_defaults(self):
        """Test default values."""
        options = HtmlRendererOptions()
        assert options.escape_quotes is True
        assert options.code_class_prefix == "language-"
        assert options.block_separator == "\n"

    @pytest.mark.parametrize("prefix", ["", "lang-", "hl_", "x1"])
    def test_valid_class_prefix(self, prefix):
        """Test accepted class prefixes."""
        assert HtmlRendererOptions(code_class_prefix=prefix).code_class_prefix == prefix

    def test_invalid_class_prefix_message(self):
        """Test the error for an unsafe class prefix."""
        with pytest.raises(ValueError, match="code_class_prefix"):
            HtmlRendererOptions(code_class_prefix="a'b")

    @pytest.mark.parametrize(
        "kwargs", [{"escape_quotes": "yes"}, {"code_class_prefix": None}, {"block_separator": 1}]
    )
    def test_field_types_checked(self, kwargs):
        """Test that mistyped values are rejected."""
        with pytest.raises(TypeError):
            HtmlRendererOptions(**kwargs)

    def test_create_updated_validates(self):
        """Test that cloned options are validated too."""
        with pytest.raises(ValueError):
            HtmlRendererOptions().create_updated(code_class_prefix="<")

    def test_from_mapping(self):
        """Test building options from a config section."""
        options = HtmlRendererOptions.from_mapping({"code_class_prefix": "hl-", "strict_mode": False})
        assert options.code_class_prefix == "hl-"


@pytest.mark.unit
class TestExceptionHierarchy:
    """Test exception classes and their attributes."""

    @pytest.mark.parametrize(
        "error",
        [
            ValidationError("bad"),
            ConfigError("bad"),
            FileError("bad"),
            ParseError("bad", rule="heading", expected="x"),
            ConversionError("bad"),
        ],
    )
    def test_all_errors_share_base(self, error):
        """Test that every error derives from TinymarkError."""
        assert isinstance(error, TinymarkError)
        assert error.message == "bad"
        assert str(error) == "bad"

    def test_invalid_options_error(self):
        """Test the generated message of InvalidOptionsError."""
        error = InvalidOptionsError("html", HtmlRendererOptions, MarkupParserOptions)
        assert isinstance(error, ValidationError)
        assert "HtmlRendererOptions" in error.message
        assert "MarkupParserOptions" in error.message
        assert error.parameter_name == "options"

    def test_file_errors(self):
        """Test the generated messages of file errors."""
        missing = InputFileNotFoundError("in.md")
        assert missing.message == "File not found: in.md"
        assert missing.file_path == "in.md"
        assert isinstance(OutputWriteError("out.html"), FileError)

    def test_parse_error_attributes(self):
        """Test the location attributes of ParseError."""
        error = ParseError("msg", rule="code_fence", expected="a closing fence", position=7, line=2, column=3)
        assert (error.rule, error.position, error.line, error.column) == ("code_fence", 7, 2, 3)

    def test_malformed_node_error(self):
        """Test the generated message of MalformedNodeError."""
        error = MalformedNodeError("Strong", "empty content")
        assert isinstance(error, ConversionError)
        assert error.node_kind == "Strong"
        assert error.message == "Cannot render node 'Strong': empty content"

    def test_original_error_kept(self):
        """Test that the underlying exception is preserved."""
        cause = OSError("disk")
        assert ConfigError("bad", "x.toml", cause).original_error is cause
