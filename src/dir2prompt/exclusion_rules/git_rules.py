"""Implementation of exclusion rules using .gitignore pattern syntax."""

from os import PathLike
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Union

from pathspec import PathSpec

from dir2prompt.types import PathType

from .base_rules import BaseExclusionRules


class GitIgnoreExclusionRules(BaseExclusionRules):
    """Implementation of exclusion rules using .gitignore pattern syntax.

    Paths are matched against the loaded patterns with the pathspec library, the same way
    Git matches them. All standard syntax is supported: globs, directory-only patterns
    (trailing /), negations (leading !), ** and comments.

    A rule set may be anchored to a base directory: an ignore file found in ``docs/``
    only applies to paths below ``docs/``, and its patterns are matched against the path
    relative to that directory. The root's own ignore file has an empty base.

    Attributes:
        spec (PathSpec): Compiled pattern matcher from the pathspec library.
        base (str): Root-relative directory the rules apply to ("" for the root).

    Example:
        >>> rules = GitIgnoreExclusionRules(base="docs")
        >>> rules.add_rule("*.log")
        >>> rules.exclude("docs/build.log")
        True
        >>> rules.exclude("build.log")
        False
    """

    def __init__(
        self,
        rules_files: Optional[Union[PathType, Sequence[PathType]]] = None,
        base: str = "",
    ):
        """Initialize GitIgnoreExclusionRules with patterns from the specified files.

        Args:
            rules_files: Path(s) to file(s) containing .gitignore patterns.
            base: Root-relative directory the patterns are anchored to, using forward
                slashes and no trailing slash.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        self._lines: List[str] = []
        self.spec = PathSpec.from_lines("gitwildmatch", self._lines)
        self.base = base.strip("/")

        if rules_files is not None:
            self.load_rules(rules_files)

    def _relative_to_base(self, path: str) -> Optional[str]:
        if not self.base:
            return path
        prefix = self.base + "/"
        if path.startswith(prefix):
            return path[len(prefix) :]  # noqa: E203
        return None

    def applies_to(self, path: str) -> bool:
        """Check whether a root-relative path lies below this rule set's base directory."""
        return self._relative_to_base(path) is not None

    def match(self, path: str) -> Optional[bool]:
        """Report how the loaded patterns decide a root-relative path.

        Args:
            path: The path to check, relative to the root directory. Directories should
                carry a trailing slash.

        Returns:
            True if the last matching pattern ignores the path, False if it is a negation
            that re-includes it, and None if no pattern matches or the path lies outside
            the base directory.

        Example:
            >>> rules = GitIgnoreExclusionRules()
            >>> rules.add_rules(["*.log", "!keep.log"])
            >>> rules.match("debug.log"), rules.match("keep.log"), rules.match("a.py")
            (True, False, None)
        """
        relative = self._relative_to_base(path)
        if not relative:
            return None
        return self.spec.check_file(relative).include

    def exclude(self, path: str) -> bool:
        """Check if a root-relative path is excluded by the loaded patterns.

        Directory paths should be passed with a trailing slash so that directory-only
        patterns such as ``build/`` match them.

        Args:
            path: The path to check, relative to the root directory.

        Returns:
            bool: True if the path lies below the base directory and matches the patterns
                (taking negations into account), False otherwise.

        Example:
            >>> rules = GitIgnoreExclusionRules()
            >>> rules.add_rules(["*.pyc", "!keep.pyc", "build/"])
            >>> rules.exclude("test.pyc"), rules.exclude("keep.pyc")
            (True, False)
            >>> rules.exclude("build/"), rules.exclude("build")
            (True, False)
        """
        return bool(self.match(path))

    def has_rules(self) -> bool:
        return any(pattern.include is not None for pattern in self.spec.patterns)

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """Load and combine .gitignore patterns from one or more files.

        Patterns are appended in order, so later files can override earlier ones through
        negation.

        Args:
            rules_files: Path(s) to file(s) containing .gitignore patterns.

        Raises:
            FileNotFoundError: If any rules file does not exist.
            UnicodeDecodeError: If a rules file is not valid UTF-8.
        """
        if isinstance(rules_files, (str, PathLike)):
            rules_files = [rules_files]

        for rules_file in rules_files:
            path = Path(rules_file)
            if not path.exists():
                raise FileNotFoundError(f"Rules file not found: {path}")

            with open(path, "r", encoding="utf-8") as f:
                self.add_rules(f.read().splitlines())

    def add_rules(self, rules: Iterable[str]) -> None:
        """Add several .gitignore patterns, in order."""
        self._lines.extend(rules)
        # Recompile so that later patterns (negations in particular) override earlier ones
        self.spec = PathSpec.from_lines("gitwildmatch", self._lines)

    def add_rule(self, rule: str) -> None:
        """Add a single .gitignore pattern directly.

        Args:
            rule: A single pattern, e.g. "*.pyc", "node_modules/" or "!important.txt".
        """
        self.add_rules([rule])
