"""Markdown code fence output strategy."""

from .base_strategy import OutputStrategy


class FencedBlockStrategy(OutputStrategy):
    """Wraps each file in a Markdown code fence whose info string is the relative path.

    Every block starts with a blank line so that consecutive blocks stay visually
    separated once concatenated.

    Example:
        >>> strategy = FencedBlockStrategy()
        >>> print(strategy.format_block("src/a.py", "print(1)\\n"), end="")
        <BLANKLINE>
        ```src/a.py
        print(1)
        ```
        >>> print(strategy.format_error_block("b.bin", "not UTF-8"), end="")
        <BLANKLINE>
        ```b.bin
        (read error: not UTF-8)
        ```
    """

    FENCE = "```"

    def format_start(self, relative_path: str) -> str:
        return f"\n{self.FENCE}{relative_path}\n"

    def format_content(self, content: str) -> str:
        if content and not content.endswith("\n"):
            return content + "\n"
        return content

    def format_end(self) -> str:
        return f"{self.FENCE}\n"

    def format_error(self, message: str) -> str:
        return f"(read error: {message})\n"
