#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/all2rst/utils/io_utils.py
"""Input and output helpers for documents and rendered text."""

from __future__ import annotations

import io
import sys
from pathlib import Path
from typing import IO, Union

from all2rst.exceptions import FileError, OutputWriteError

OutputDestination = Union[str, Path, IO[bytes], IO[str]]


def write_text(content: str, output: OutputDestination) -> None:
    """Write rendered text to a path or a file-like object.

    Parameters
    ----------
    content : str
        Rendered text
    output : str, Path, IO[bytes] or IO[str]
        - str or Path: written to that file as UTF-8
        - IO[bytes]: UTF-8 encoded bytes are written
        - IO[str]: text is written as-is

    Raises
    ------
    OutputWriteError
        If the file or stream cannot be written
    TypeError
        If ``output`` is not a supported destination

    Examples
    --------
        >>> buffer = io.StringIO()
        >>> write_text("Title\\n=====", buffer)
        >>> buffer.getvalue()
        'Title\\n====='

    """
    if isinstance(output, (str, Path)):
        output_path = Path(output)
        try:
            output_path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise OutputWriteError(str(output_path), original_error=e) from e
        return

    if not hasattr(output, "write"):
        raise TypeError(f"Unsupported output type: {type(output).__name__}")

    try:
        if isinstance(output, (io.RawIOBase, io.BufferedIOBase)) or "b" in getattr(output, "mode", ""):
            output.write(content.encode("utf-8"))  # type: ignore[arg-type]
        else:
            output.write(content)  # type: ignore[arg-type]
    except OSError as e:
        raise OutputWriteError(getattr(output, "name", "<stream>"), original_error=e) from e


def read_text_input(source: Union[str, Path]) -> str:
    """Read a UTF-8 text document from a path, or from stdin when ``source`` is ``-``.

    Raises
    ------
    FileError
        If the file does not exist or cannot be decoded

    """
    if str(source) == "-":
        return sys.stdin.read()

    path = Path(source)
    if not path.exists():
        raise FileError(f"Input file not found: {path}", file_path=str(path))
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise FileError(f"Input file is not valid UTF-8: {path}", file_path=str(path), original_error=e) from e
    except OSError as e:
        raise FileError(f"Could not read input file: {path}", file_path=str(path), original_error=e) from e
