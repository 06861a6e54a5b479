#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/tinymark/utils/io_utils.py
"""I/O utilities for handling output destinations.

Rendered HTML is written either to a path (UTF-8) or to an open stream.
"""

from __future__ import annotations

import io
import logging
from io import StringIO
from pathlib import Path
from typing import IO, Union, cast

from tinymark.exceptions import OutputWriteError

logger = logging.getLogger(__name__)


def write_content(content: str, output: Union[str, Path, IO[bytes], IO[str], None]) -> StringIO | None:
    """Write content to an output destination or return it as a file-like object.

    Parameters
    ----------
    content : str
        Text to write
    output : str, Path, IO[bytes], IO[str], or None
        Output destination. Can be:
        - None: content is returned as a StringIO
        - str or Path: content is written to that file as UTF-8
        - IO[bytes]: content is encoded as UTF-8 and written
        - IO[str]: content is written unchanged

    Returns
    -------
    StringIO or None
        StringIO when ``output`` is None, otherwise None

    Raises
    ------
    OutputWriteError
        If writing to a path fails
    TypeError
        If ``output`` is not a path or writable object

    Examples
    --------
    >>> write_content("<p>hi</p>", None).read()
    '<p>hi</p>'

    """
    if output is None:
        return StringIO(content)

    if isinstance(output, (str, Path)):
        output_path = Path(output)
        try:
            output_path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise OutputWriteError(str(output_path), original_error=e) from e
        logger.debug(f"Wrote {len(content)} characters to {output_path}")
        return None

    if not hasattr(output, "write"):
        raise TypeError(f"Unsupported output type: {type(output).__name__}")

    if isinstance(output, StringIO) or isinstance(output, io.TextIOBase):
        is_binary_mode = False
    elif isinstance(output, (io.BufferedIOBase, io.RawIOBase)):
        is_binary_mode = True
    else:
        mode = getattr(output, "mode", "")
        is_binary_mode = isinstance(mode, str) and "b" in mode

    if is_binary_mode:
        cast(IO[bytes], output).write(content.encode("utf-8"))
    else:
        cast(IO[str], output).write(content)
    return None
