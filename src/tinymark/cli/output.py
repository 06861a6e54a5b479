"""Utility functions for cli output."""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/tinymark/cli/output.py
import argparse
import sys
from typing import TextIO


def should_use_rich_output(args: argparse.Namespace, stream: TextIO | None = None) -> bool:
    """Determine if Rich output should be used based on TTY and args.

    Rich output is used when the --rich flag is set and the target stream is
    a terminal, so piped output stays verbatim.

    Parameters
    ----------
    args : argparse.Namespace
        Parsed command line arguments
    stream : TextIO, optional
        Stream that will receive the output, defaults to sys.stdout

    """
    if not getattr(args, "rich", False):
        return False

    target = stream or sys.stdout
    isatty = getattr(target, "isatty", None)
    return bool(callable(isatty) and isatty())


def print_error(message: str, use_rich: bool = False) -> None:
    """Print an error message to stderr without altering its text."""
    if use_rich:
        from rich.console import Console

        Console(stderr=True).print(message, style="bold red", markup=False, highlight=False)
    else:
        print(message, file=sys.stderr)
