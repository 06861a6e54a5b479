#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/tinymark/utils/timing.py
"""Timing helpers for debug logging."""

from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from typing import Generator


@contextmanager
def debug_timer(logger: logging.Logger, operation: str) -> Generator[None, None, None]:
    """Log the elapsed time of a block at DEBUG level.

    Nothing is measured when the logger is not enabled for DEBUG.

    Examples
    --------
        >>> with debug_timer(logger, "Parsing"):
        ...     doc = parser.parse(text)

    """
    if not logger.isEnabledFor(logging.DEBUG):
        yield
        return
    start_time = time.perf_counter()
    yield
    logger.debug(f"{operation} completed in {(time.perf_counter() - start_time) * 1000:.2f}ms")
