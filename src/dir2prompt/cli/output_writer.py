"""Output writing for the dir2prompt CLI.

The document is written in one piece, either to standard output or to a file. When
standard output is a pipe that the reader has closed (for example ``| head``), the
error is reported as BrokenPipeError and standard output is redirected to the null
device so that the interpreter does not complain again while shutting down.
"""

import errno
import os
import sys
from pathlib import Path
from typing import Optional


def silence_stdout() -> None:
    """Redirect the standard output file descriptor to the null device."""
    devnull = os.open(os.devnull, os.O_WRONLY)
    try:
        os.dup2(devnull, sys.stdout.fileno())
    finally:
        os.close(devnull)


def write_output(text: str, output: Optional[Path] = None) -> None:
    """Write the rendered document.

    Args:
        text: The document to write.
        output: Destination file. None writes to standard output.

    Raises:
        BrokenPipeError: If standard output was closed by the reader.
        OSError: If the output file cannot be written.
    """
    if output is not None:
        with Path(output).open("w", encoding="utf-8") as f:
            f.write(text)
        return

    try:
        sys.stdout.write(text)
        sys.stdout.flush()
    except OSError as e:
        if isinstance(e, BrokenPipeError) or e.errno == errno.EPIPE:
            raise BrokenPipeError(errno.EPIPE, "Output pipe was closed") from e
        raise
