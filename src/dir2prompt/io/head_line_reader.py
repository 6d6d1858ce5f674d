"""Tools for reading the first lines of a file."""

from typing import BinaryIO, Iterator


class HeadLineReader:
    """Iterator over at most ``max_lines`` decoded lines of a binary file.

    Lines are split on ``\\n`` as raw bytes and decoded one at a time, so only the lines
    actually returned are ever decoded: bytes past the limit may be buffered by the file
    object but are never interpreted. Both ``\\n`` and ``\\r\\n`` endings are stripped.
    A ``max_lines`` of 0 means no limit.

    Args:
        file_obj: A file opened in binary mode.
        max_lines: Maximum number of lines to yield, 0 for all lines.
        encoding: Encoding used to decode each line. Decoding is strict. Only encodings
            that represent ``\\n`` as a single byte (UTF-8, Latin-1, ...) are supported.

    Raises:
        ValueError: If max_lines is negative.
        UnicodeDecodeError: While iterating, if a returned line cannot be decoded.

    Example:
        >>> import io
        >>> list(HeadLineReader(io.BytesIO(b"a\\nb\\r\\nc"), max_lines=2))
        ['a', 'b']
        >>> list(HeadLineReader(io.BytesIO(b"a\\nb\\r\\nc")))
        ['a', 'b', 'c']
        >>> list(HeadLineReader(io.BytesIO(b"ok\\n\\xff\\n"), max_lines=1))
        ['ok']
    """

    def __init__(self, file_obj: BinaryIO, max_lines: int = 0, encoding: str = "utf-8") -> None:
        if max_lines < 0:
            raise ValueError(f"max_lines must be 0 (unlimited) or positive, got {max_lines}")

        self._file: BinaryIO = file_obj
        self._max_lines: int = max_lines
        self._encoding: str = encoding
        self._lines_read: int = 0

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        if self._max_lines and self._lines_read >= self._max_lines:
            raise StopIteration

        line = self._file.readline()
        if not line:
            raise StopIteration

        self._lines_read += 1
        if line.endswith(b"\r\n"):
            line = line[:-2]
        elif line.endswith(b"\n"):
            line = line[:-1]
        return line.decode(self._encoding, errors="strict")

    @property
    def lines_read(self) -> int:
        """Number of lines read so far, including one that failed to decode."""
        return self._lines_read
