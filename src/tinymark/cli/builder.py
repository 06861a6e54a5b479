#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Argument parser construction for the tinymark CLI.

Help text for option flags is taken from the ``help`` metadata of the option
dataclass fields so the CLI and the library describe options identically.
"""

from __future__ import annotations

import argparse
import logging
from dataclasses import fields
from typing import Any, Dict, Tuple

from tinymark import __version__
from tinymark.cli.actions import EnvironmentAwareAction, EnvironmentAwareBooleanAction, EnvironmentAwareConstAction
from tinymark.cli.config import PARSER_SECTION, RENDERER_SECTION
from tinymark.constants import (
    EXIT_ERROR,
    EXIT_FILE_ERROR,
    EXIT_PARSING_ERROR,
    EXIT_RENDERING_ERROR,
    EXIT_VALIDATION_ERROR,
)
from tinymark.exceptions import (
    ConfigError,
    ConversionError,
    FileError,
    ParseError,
    ValidationError,
)
from tinymark.options.html import HtmlRendererOptions
from tinymark.options.markup import MarkupParserOptions

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _field_help(options_class: type, name: str) -> str:
    for option_field in fields(options_class):
        if option_field.name == name:
            return option_field.metadata.get("help", "")
    raise KeyError(name)


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    """Add logging, configuration and option flags shared by all subcommands."""
    logging_group = parser.add_argument_group("logging")
    logging_group.add_argument(
        "--log-level",
        action=EnvironmentAwareAction,
        choices=LOG_LEVELS,
        type=str.upper,
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    logging_group.add_argument(
        "--log-file", action=EnvironmentAwareAction, default=None, help="Also write log records to this file"
    )
    logging_group.add_argument(
        "--trace", action=EnvironmentAwareBooleanAction, help="Verbose logging with timestamps and logger names"
    )

    output_group = parser.add_argument_group("output")
    output_group.add_argument(
        "--rich", action=EnvironmentAwareBooleanAction, help="Use rich formatting for terminal output"
    )
    output_group.add_argument(
        "--config",
        action=EnvironmentAwareAction,
        default=None,
        help="Configuration file (.toml, .yaml, .json or pyproject.toml); disables discovery",
    )

    parser_group = parser.add_argument_group("parser options")
    strictness = parser_group.add_mutually_exclusive_group()
    strictness.add_argument(
        "--strict",
        dest="strict_mode",
        action=EnvironmentAwareConstAction,
        const=True,
        default=None,
        help=_field_help(MarkupParserOptions, "strict_mode") + " (default)",
    )
    strictness.add_argument(
        "--lenient",
        dest="strict_mode",
        action=EnvironmentAwareConstAction,
        const=False,
        help="Keep stray backslashes as text and run unterminated code fences to the end of input",
    )

    html_group = parser.add_argument_group("HTML options")
    quoting = html_group.add_mutually_exclusive_group()
    quoting.add_argument(
        "--escape-quotes",
        dest="escape_quotes",
        action=EnvironmentAwareConstAction,
        const=True,
        default=None,
        help=_field_help(HtmlRendererOptions, "escape_quotes") + " (default)",
    )
    quoting.add_argument(
        "--no-escape-quotes",
        dest="escape_quotes",
        action=EnvironmentAwareConstAction,
        const=False,
        help="Only escape '&', '<' and '>' in text content",
    )
    html_group.add_argument(
        "--code-class-prefix",
        action=EnvironmentAwareAction,
        default=None,
        metavar="PREFIX",
        help=_field_help(HtmlRendererOptions, "code_class_prefix"),
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with the convert, parse and info subcommands."""
    parser = argparse.ArgumentParser(
        prog="tinymark",
        description="Convert tinymark markup to HTML.",
        epilog="Option defaults may be set with TINYMARK_<OPTION> environment variables, "
        "e.g. TINYMARK_STRICT_MODE=false or TINYMARK_LOG_LEVEL=DEBUG.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True

    convert_parser = subparsers.add_parser("convert", help="Convert a markup file to an HTML file")
    convert_parser.add_argument("-i", "--input", required=True, help="Markup file to convert")
    convert_parser.add_argument("-o", "--output", required=True, help="HTML file to write")
    _add_common_arguments(convert_parser)

    parse_parser = subparsers.add_parser("parse", help="Print the HTML (or the AST) for text or a file")
    source = parse_parser.add_mutually_exclusive_group(required=True)
    source.add_argument("-t", "--text", help="Markup text to parse")
    source.add_argument("-i", "--input", help="Markup file to parse")
    parse_parser.add_argument("--ast", action="store_true", help="Print the parse tree as JSON instead of HTML")
    parse_parser.add_argument(
        "--no-spans", action="store_true", help="Leave source spans and locations out of --ast output"
    )
    _add_common_arguments(parse_parser)

    info_parser = subparsers.add_parser("info", help="Show version, supported syntax and usage examples")
    _add_common_arguments(info_parser)

    return parser


def build_options(
    parsed_args: argparse.Namespace, config: Dict[str, Any]
) -> Tuple[MarkupParserOptions, HtmlRendererOptions]:
    """Combine configuration file values and command-line flags into options.

    Flags (and their environment defaults) override the configuration file,
    which overrides the dataclass defaults.

    Raises
    ------
    ValidationError
        If a value is rejected by the options classes

    """
    parser_overrides = dict(config.get(PARSER_SECTION, {}))
    renderer_overrides = dict(config.get(RENDERER_SECTION, {}))

    if getattr(parsed_args, "strict_mode", None) is not None:
        parser_overrides["strict_mode"] = parsed_args.strict_mode
    for name in ("escape_quotes", "code_class_prefix"):
        value = getattr(parsed_args, name, None)
        if value is not None:
            renderer_overrides[name] = value

    try:
        parser_options = MarkupParserOptions.from_mapping(parser_overrides)
        renderer_options = HtmlRendererOptions.from_mapping(renderer_overrides)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"Invalid option value: {e}", original_error=e) from e

    logger.debug(f"Effective options: {parser_options}, {renderer_options}")
    return parser_options, renderer_options


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate CLI exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map to an exit code

    Returns
    -------
    int
        The appropriate exit code for the exception type

    """
    if isinstance(exception, (ValidationError, ConfigError)):
        return EXIT_VALIDATION_ERROR

    if isinstance(exception, FileError):
        return EXIT_FILE_ERROR

    if isinstance(exception, ParseError):
        return EXIT_PARSING_ERROR

    # A wrapped parse failure is still a parsing problem
    if isinstance(exception, ConversionError):
        if isinstance(exception.original_error, ParseError):
            return EXIT_PARSING_ERROR
        return EXIT_RENDERING_ERROR

    return EXIT_ERROR
