#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/tinymark/cli/commands.py
"""Handlers for the tinymark subcommands.

Each handler receives the parsed arguments together with the effective
options and returns an exit code. Library errors propagate to ``main``,
which prints them and maps them to exit codes.
"""

import argparse
import logging
import platform
from pathlib import Path

from tinymark import __version__
from tinymark.api import convert_file, parse, render
from tinymark.ast.serialization import ast_to_json
from tinymark.ast.utils import count_nodes
from tinymark.cli.output import should_use_rich_output
from tinymark.constants import EXIT_SUCCESS, SUPPORTED_FEATURES
from tinymark.options.html import HtmlRendererOptions
from tinymark.options.markup import MarkupParserOptions

logger = logging.getLogger(__name__)

USAGE_EXAMPLES = (
    ("Convert a file", "tinymark convert -i document.md -o document.html"),
    ("Parse text directly", 'tinymark parse -t "# Hello **World**"'),
    ("Show the parse tree", 'tinymark parse -t "> quoted" --ast'),
    ("Show this information", "tinymark info"),
)


def handle_convert_command(
    args: argparse.Namespace, parser_options: MarkupParserOptions, renderer_options: HtmlRendererOptions
) -> int:
    """Convert ``args.input`` to ``args.output``, one HTML block per line."""
    use_rich = should_use_rich_output(args)
    status = f"Converting '{args.input}' to '{args.output}'..."

    if use_rich:
        from rich.console import Console

        console = Console()
        with console.status(status, spinner="dots"):
            count = convert_file(args.input, args.output, parser_options, renderer_options)
        console.print(f"[green]✓[/green] Converted {count} blocks. HTML saved to [bold]{args.output}[/bold]")
    else:
        print(status)
        count = convert_file(args.input, args.output, parser_options, renderer_options)
        print(f"Conversion completed: {count} blocks written to {args.output}")

    return EXIT_SUCCESS


def handle_parse_command(
    args: argparse.Namespace, parser_options: MarkupParserOptions, renderer_options: HtmlRendererOptions
) -> int:
    """Print the HTML for ``--text`` or ``--input``, or the JSON tree with ``--ast``."""
    source = args.text if args.text is not None else Path(args.input)
    use_rich = should_use_rich_output(args)

    if args.ast:
        document = parse(source, parser_options)
        logger.debug(f"Parse tree has {count_nodes(document)} nodes")
        output = ast_to_json(document, include_spans=not args.no_spans)
        lexer = "json"
    else:
        output = "\n".join(render(source, parser_options, renderer_options))
        lexer = "html"

    if use_rich:
        from rich.console import Console
        from rich.syntax import Syntax

        Console().print(Syntax(output, lexer, word_wrap=True))
    else:
        print(output)
    return EXIT_SUCCESS


def get_about_info() -> str:
    """Return the plain-text information shown by ``tinymark info``."""
    lines = [
        f"tinymark v{__version__}",
        "Lightweight markup to HTML converter",
        f"Python {platform.python_version()} on {platform.platform()}",
        "",
        "Supported syntax:",
        *(f"  - {feature}" for feature in SUPPORTED_FEATURES),
        "",
        "Usage examples:",
    ]
    for title, command in USAGE_EXAMPLES:
        lines.extend(["", f"{title}:", f"  {command}"])
    return "\n".join(lines)


def handle_info_command(args: argparse.Namespace) -> int:
    """Show version, supported syntax and usage examples."""
    if not should_use_rich_output(args):
        print(get_about_info())
        return EXIT_SUCCESS

    from rich.console import Console
    from rich.panel import Panel
    from rich.table import Table

    console = Console()
    console.print(
        Panel.fit(
            f"[bold]tinymark[/bold] v{__version__}\nLightweight markup to HTML converter",
            subtitle=f"Python {platform.python_version()}",
        )
    )

    features = Table(title="Supported syntax", show_header=False, box=None)
    features.add_column("feature")
    for feature in SUPPORTED_FEATURES:
        features.add_row(f"• {feature}")
    console.print(features)

    examples = Table(title="Usage examples")
    examples.add_column("Task", style="cyan")
    examples.add_column("Command", style="green")
    for title, command in USAGE_EXAMPLES:
        examples.add_row(title, command)
    console.print(examples)
    return EXIT_SUCCESS
