"""Command-line interface for the tinymark markup converter.

Environment Variable Support
----------------------------
Options read defaults from ``TINYMARK_<OPTION_NAME>`` environment variables,
where the option name is upper-cased with hyphens replaced by underscores.
Command-line arguments always override environment variables, which override
configuration files.

Examples
--------
Convert a file::

    $ tinymark convert -i notes.md -o notes.html

Print HTML for a snippet::

    $ tinymark parse -t "# Hello **World**"

Inspect the parse tree::

    $ tinymark parse -i notes.md --ast --no-spans

Recover from invalid escapes instead of failing::

    $ tinymark parse -t "C:\\ drive" --lenient

Use environment variables for defaults::

    $ export TINYMARK_STRICT_MODE=false
    $ export TINYMARK_LOG_LEVEL=DEBUG
    $ tinymark convert -i notes.md -o notes.html

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import argparse
import logging
import sys

from tinymark.cli.builder import build_options, create_parser, get_exit_code_for_exception
from tinymark.cli.commands import handle_convert_command, handle_info_command, handle_parse_command
from tinymark.cli.config import load_config_with_priority
from tinymark.cli.output import print_error, should_use_rich_output
from tinymark.exceptions import TinymarkError
from tinymark.logging_utils import configure_logging

logger = logging.getLogger(__name__)

__all__ = ["main", "create_parser"]


def _setup_logging(parsed_args: argparse.Namespace) -> None:
    """Configure logging from --log-level, --log-file, --trace and --rich."""
    configure_logging(
        parsed_args.log_level,
        log_file=parsed_args.log_file,
        trace_mode=parsed_args.trace,
        use_rich=should_use_rich_output(parsed_args, stream=sys.stderr),
    )


def _dispatch(parsed_args: argparse.Namespace) -> int:
    if parsed_args.command == "info":
        return handle_info_command(parsed_args)

    config = load_config_with_priority(parsed_args.config)
    parser_options, renderer_options = build_options(parsed_args, config)

    if parsed_args.command == "convert":
        return handle_convert_command(parsed_args, parser_options, renderer_options)
    return handle_parse_command(parsed_args, parser_options, renderer_options)


def main(args: list[str] | None = None) -> int:
    """Execute the CLI and return its exit code.

    Parameters
    ----------
    args : list of str, optional
        Arguments to parse instead of ``sys.argv[1:]``

    """
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    _setup_logging(parsed_args)
    logger.debug(f"Running command: {parsed_args.command}")

    try:
        return _dispatch(parsed_args)
    except TinymarkError as e:
        logger.debug("Command failed", exc_info=True)
        print_error(e.message, use_rich=should_use_rich_output(parsed_args, stream=sys.stderr))
        return get_exit_code_for_exception(e)


if __name__ == "__main__":
    sys.exit(main())
