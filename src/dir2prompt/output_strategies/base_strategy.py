"""Output strategy base class defining how a file's content block is wrapped.

A content block is produced in three phases: an opening wrapper carrying the file's
relative path, the content itself, and a closing wrapper. When a file cannot be read,
an error marker takes the place of the content.
"""

from abc import ABC, abstractmethod


class OutputStrategy(ABC):
    """Abstract base class for content block formatting.

    Example:
        >>> class AngleStrategy(OutputStrategy):
        ...     def format_start(self, relative_path: str) -> str:
        ...         return f"<{relative_path}>\\n"
        ...
        ...     def format_content(self, content: str) -> str:
        ...         return content
        ...
        ...     def format_end(self) -> str:
        ...         return "</>\\n"
        ...
        ...     def format_error(self, message: str) -> str:
        ...         return f"!{message}\\n"
        >>> strategy = AngleStrategy()
        >>> strategy.format_block("a.py", "x = 1\\n")
        '<a.py>\\nx = 1\\n</>\\n'
    """

    @abstractmethod
    def format_start(self, relative_path: str) -> str:
        """Format the opening wrapper for a file's content.

        Args:
            relative_path: The path of the file relative to the root directory.

        Returns:
            str: The opening wrapper.
        """
        pass

    @abstractmethod
    def format_content(self, content: str) -> str:
        """Format a file's content.

        Args:
            content: The file content, every line terminated by a newline.

        Returns:
            str: The formatted content.
        """
        pass

    @abstractmethod
    def format_end(self) -> str:
        """Format the closing wrapper for a file's content."""
        pass

    @abstractmethod
    def format_error(self, message: str) -> str:
        """Format the marker used in place of content that could not be read.

        Args:
            message: Description of the read failure.
        """
        pass

    def format_block(self, relative_path: str, content: str) -> str:
        """Format a complete block for content that was read successfully."""
        return self.format_start(relative_path) + self.format_content(content) + self.format_end()

    def format_error_block(self, relative_path: str, message: str) -> str:
        """Format a complete block carrying an error marker."""
        return self.format_start(relative_path) + self.format_error(message) + self.format_end()
