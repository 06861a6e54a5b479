"""Centralized logging setup for the tinymark command-line entry point."""

from __future__ import annotations

import logging
import sys
from typing import Optional

PLAIN_FORMAT = "%(levelname)s: %(message)s"
TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_log_level(log_level: int | str) -> int:
    """Turn a level name such as ``"debug"`` into its numeric value.

    Unknown names resolve to ``logging.WARNING``.
    """
    if isinstance(log_level, int):
        return log_level
    return getattr(logging, str(log_level).upper(), logging.WARNING)


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
    use_rich: bool = False,
) -> logging.Logger:
    """Configure root logging handlers for the CLI.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or string name (e.g., "INFO").
    log_file : str, optional
        Path to a log file that receives a copy of every record.
    trace_mode : bool, default False
        Emit timestamps and logger names; forces DEBUG level.
    use_rich : bool, default False
        Send console records through ``rich.logging.RichHandler``.

    Returns
    -------
    logging.Logger
        The configured root logger instance.

    """
    level = logging.DEBUG if trace_mode else resolve_log_level(log_level)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    formatter = (
        logging.Formatter(TRACE_FORMAT, datefmt=TRACE_DATE_FORMAT) if trace_mode else logging.Formatter(PLAIN_FORMAT)
    )

    console_handler: logging.Handler
    if use_rich:
        from rich.console import Console
        from rich.logging import RichHandler

        console_handler = RichHandler(console=Console(stderr=True), show_path=trace_mode, show_time=trace_mode)
        console_handler.setFormatter(logging.Formatter("%(message)s"))
    else:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
    console_handler.setLevel(level)
    root_logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as exc:
            root_logger.warning("Could not create log file %s: %s", log_file, exc)
        else:
            file_handler.setLevel(level)
            file_handler.setFormatter(logging.Formatter(TRACE_FORMAT, datefmt=TRACE_DATE_FORMAT))
            root_logger.addHandler(file_handler)
            root_logger.info("Logging to file: %s", log_file)

    return root_logger
