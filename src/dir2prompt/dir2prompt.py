"""Directory to prompt conversion.

This module provides the Dir2Prompt class, which runs the whole pipeline for one root
directory: collect the files to display and the files to include, render the tree, read
the contents and substitute everything into the prompt template.
"""

from pathlib import Path
from typing import List, Optional

from dir2prompt.config import FilterConfig
from dir2prompt.file_content_printer import FileContentPrinter
from dir2prompt.file_system_tree.path_tree import PathTree
from dir2prompt.file_system_tree.walker import FileSystemWalker
from dir2prompt.log import logger
from dir2prompt.prompt_template import DEFAULT_SYSTEM_PROMPT, PromptTemplate, TemplateOptions
from dir2prompt.types import PathType

DEFAULT_HEAD_LINES = 200


class Dir2Prompt:
    """Builds an LLM prompt context from a directory.

    Two file sets are collected with the same ignore semantics: the tree-display set,
    filtered by extension and path only when ``filter_tree`` is set, and the content set,
    which is always filtered. Both contain the root's ``.gitignore`` when it exists.

    File sets, the tree and the contents are computed lazily on first access and then
    kept for the lifetime of the instance; nothing is shared between instances.

    Attributes:
        root_path (Path): Canonical absolute path of the root directory.
        config (FilterConfig): Filters and flags for this run.
        head_lines (int): Line limit per file, 0 for full content.

    Example:
        >>> analyzer = Dir2Prompt("src", head_lines=50)  # doctest: +SKIP
        >>> print(analyzer.render(query="Where is the CLI defined?"))  # doctest: +SKIP

    Raises:
        FileNotFoundError: If the root path does not exist or cannot be accessed.
        NotADirectoryError: If the root path is not a directory.
        ValueError: If head_lines is negative.
    """

    def __init__(
        self,
        directory: PathType,
        *,
        config: Optional[FilterConfig] = None,
        head_lines: int = DEFAULT_HEAD_LINES,
        template: Optional[PromptTemplate] = None,
    ) -> None:
        """Initialize the analyzer and validate the root directory.

        Args:
            directory: Root directory to process.
            config: Filter configuration. Defaults to no filters, .gitignore honored.
            head_lines: Lines per file, 0 for the whole file. Defaults to 200.
            template: Template used by render(). Defaults to the built-in template.
        """
        if head_lines < 0:
            raise ValueError(f"head_lines must be 0 (unlimited) or positive, got {head_lines}")

        self.config = config or FilterConfig()
        self.head_lines = head_lines
        self._walker = FileSystemWalker(directory, honor_gitignore=self.config.honor_gitignore)
        self.root_path = self._walker.root_path
        self._template = template or PromptTemplate()
        self._printer = FileContentPrinter(self.root_path, head_lines=head_lines)

        self._tree_files: Optional[List[Path]] = None
        self._content_files: Optional[List[Path]] = None
        self._tree_string: Optional[str] = None
        self._content_string: Optional[str] = None

    @property
    def tree_files(self) -> List[Path]:
        """Sorted absolute paths shown in the tree display."""
        if self._tree_files is None:
            rules = self.config.rules if self.config.filter_tree else None
            self._tree_files = self._walker.collect_files(rules)
        return self._tree_files

    @property
    def content_files(self) -> List[Path]:
        """Sorted absolute paths whose contents are included."""
        if self._content_files is None:
            self._content_files = self._walker.collect_files(self.config.rules)
        return self._content_files

    @property
    def tree_relative_paths(self) -> List[str]:
        return [self._walker.relative_path(path) for path in self.tree_files]

    @property
    def content_relative_paths(self) -> List[str]:
        return [self._walker.relative_path(path) for path in self.content_files]

    @property
    def tree_string(self) -> str:
        """Line-art rendering of the tree-display set."""
        if self._tree_string is None:
            self._tree_string = PathTree(self.tree_relative_paths).get_tree_representation()
        return self._tree_string

    @property
    def content_string(self) -> str:
        """Concatenated content blocks of the content set, empty if no file matched."""
        if self._content_string is None:
            self._content_string = self._printer.get_contents(self.content_files)
        return self._content_string

    def render(self, query: Optional[str] = None, system_prompt: str = DEFAULT_SYSTEM_PROMPT) -> str:
        """Render the complete prompt document.

        Args:
            query: Optional question; the question section is omitted without one.
            system_prompt: Text preceding the question.

        Returns:
            str: The rendered document.

        Raises:
            TemplateRenderError: If the template cannot be rendered.
        """
        # Both walks happen before any rendering or reading
        tree_files = self.tree_files
        content_files = self.content_files
        logger.info(
            "context_assembled",
            root=str(self.root_path),
            tree_files=len(tree_files),
            content_files=len(content_files),
        )
        return self._template.render(
            root_path=str(self.root_path),
            tree=self.tree_string,
            file_contents=self.content_string,
            head_lines=self.head_lines,
            options=TemplateOptions.from_config(self.config),
            system_prompt=system_prompt,
            query=query,
        )
