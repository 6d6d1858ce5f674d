"""File content printer producing one fenced block per selected file.

Each file is read as UTF-8 text, optionally limited to its first lines, and wrapped by
an output strategy. Read failures are isolated per file: the block of an unreadable
file carries an error marker instead of content and the remaining files are printed as
usual.
"""

from pathlib import Path
from typing import Iterable, Iterator, Optional, Tuple

from .exceptions import FileReadError
from .io.head_line_reader import HeadLineReader
from .log import logger
from .output_strategies.base_strategy import OutputStrategy
from .output_strategies.fenced_strategy import FencedBlockStrategy
from .types import PathType


def read_head_lines(file_path: PathType, max_lines: int, relative_path: str = "", encoding: str = "utf-8") -> str:
    """Read the first ``max_lines`` lines of a file, or all of it when ``max_lines`` is 0.

    Every returned line is terminated by a single newline. Nothing marks a truncation.
    Lines are decoded one by one, so undecodable bytes after the last returned line do
    not cause an error.

    Args:
        file_path: Path of the file to read.
        max_lines: Maximum number of lines, 0 for the whole file.
        relative_path: Path used in error messages. Defaults to file_path.
        encoding: Text encoding of the file. Defaults to UTF-8; decoding is strict.

    Returns:
        str: The accumulated lines.

    Raises:
        FileReadError: If the file cannot be opened or a line cannot be decoded.
        ValueError: If max_lines is negative.
    """
    label = relative_path or str(file_path)
    if max_lines < 0:
        raise ValueError(f"max_lines must be 0 (unlimited) or positive, got {max_lines}")

    try:
        with open(file_path, "rb") as file:
            return "".join(line + "\n" for line in HeadLineReader(file, max_lines, encoding))
    except UnicodeDecodeError as e:
        raise FileReadError(label, f"content is not valid {encoding} text ({e.reason})") from e
    except OSError as e:
        raise FileReadError(label, e.strerror or str(e)) from e


class FileContentPrinter:
    """Formats the contents of a list of files as consecutive blocks.

    Attributes:
        root_path (Path): Directory the block labels are relative to.
        head_lines (int): Maximum number of lines per file, 0 for the whole file.
        output_strategy (OutputStrategy): Strategy wrapping each block.
        encoding (str): Encoding used to read files.

    Example:
        >>> printer = FileContentPrinter("/project", head_lines=10)  # doctest: +SKIP
        >>> print(printer.get_contents([Path("/project/a.py")]))  # doctest: +SKIP
        ```a.py
        print("hello")
        ```
    """

    def __init__(
        self,
        root_path: PathType,
        head_lines: int = 0,
        output_strategy: Optional[OutputStrategy] = None,
        encoding: str = "utf-8",
    ) -> None:
        """Initialize the FileContentPrinter.

        Args:
            root_path: Root directory; block labels are paths relative to it.
            head_lines: Maximum number of lines per file, 0 for all lines. Defaults to 0.
            output_strategy: Strategy for wrapping blocks. Defaults to FencedBlockStrategy.
            encoding: Encoding used to read files. Defaults to "utf-8".

        Raises:
            ValueError: If head_lines is negative.
            LookupError: If the encoding is not available.
        """
        if head_lines < 0:
            raise ValueError(f"head_lines must be 0 (unlimited) or positive, got {head_lines}")

        try:
            "test".encode(encoding).decode(encoding)
        except LookupError as e:
            raise LookupError(f"Encoding '{encoding}' is not available") from e

        self.root_path = Path(root_path)
        self.head_lines = head_lines
        self.output_strategy: OutputStrategy = output_strategy or FencedBlockStrategy()
        self.encoding = encoding

    def _relative_path(self, file_path: Path) -> str:
        try:
            return file_path.relative_to(self.root_path).as_posix()
        except ValueError:
            return file_path.as_posix()

    def format_file(self, file_path: PathType) -> str:
        """Format the block of a single file.

        Args:
            file_path: Absolute path of the file.

        Returns:
            str: The complete block, with an error marker if the file could not be read.
        """
        path = Path(file_path)
        relative_path = self._relative_path(path)
        try:
            content = read_head_lines(path, self.head_lines, relative_path, self.encoding)
        except FileReadError as e:
            logger.info("file_read_failed", path=relative_path, error=str(e))
            return self.output_strategy.format_error_block(relative_path, str(e))
        return self.output_strategy.format_block(relative_path, content)

    def yield_file_contents(self, file_paths: Iterable[PathType]) -> Iterator[Tuple[str, str, str]]:
        """Format the given files in order.

        Yields:
            Tuples of (absolute_path, relative_path, block).
        """
        for file_path in file_paths:
            path = Path(file_path)
            yield str(path), self._relative_path(path), self.format_file(path)

    def get_contents(self, file_paths: Iterable[PathType]) -> str:
        """Concatenate the blocks of all given files, without trailing whitespace."""
        return "".join(block for _, _, block in self.yield_file_contents(file_paths)).rstrip()
