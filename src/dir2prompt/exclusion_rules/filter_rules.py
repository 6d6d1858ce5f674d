"""Extension and regular-expression filters for selecting files."""

import re
from pathlib import PurePosixPath
from typing import FrozenSet, Iterable, List, Optional, Pattern

from dir2prompt.exceptions import InvalidPatternError

from .base_rules import BaseExclusionRules


def normalize_extension(extension: str) -> str:
    """Normalize a user-supplied extension: lowercase, without a leading dot.

    Example:
        >>> normalize_extension(".PY")
        'py'
    """
    return extension.strip().lstrip(".").lower()


def extension_of(path: str) -> Optional[str]:
    """Return the lowercased extension of a path, or None if it has none.

    Dotfiles such as ``.gitignore`` have no extension.

    Example:
        >>> extension_of("src/Main.PY")
        'py'
        >>> extension_of("src/.gitignore") is None
        True
        >>> extension_of("archive.tar.gz")
        'gz'
    """
    suffix = PurePosixPath(path).suffix
    if not suffix:
        return None
    return suffix[1:].lower()


def _compile_patterns(patterns: Iterable[str], option: str) -> List[Pattern[str]]:
    compiled = []
    for pattern in patterns:
        try:
            compiled.append(re.compile(pattern))
        except re.error as e:
            raise InvalidPatternError(pattern, option, str(e)) from e
    return compiled


class FilterRules(BaseExclusionRules):
    """Include/exclude filters over file extensions and root-relative paths.

    A path is kept only if all of the following hold:

    1. its extension is in the include set, when that set is non-empty;
    2. its extension is not in the exclude set;
    3. no exclude pattern matches the path;
    4. some include pattern matches the path, when include patterns are given.

    Extensions are compared case-insensitively. Patterns are Python regular expressions
    searched anywhere in the relative path (``re.search`` semantics) and are compiled
    eagerly, so a malformed pattern is reported before any traversal starts.

    Attributes:
        include_extensions (FrozenSet[str]): Normalized extensions to keep.
        exclude_extensions (FrozenSet[str]): Normalized extensions to drop.
        include_patterns (List[Pattern[str]]): Compiled include-path expressions.
        exclude_patterns (List[Pattern[str]]): Compiled exclude-path expressions.

    Example:
        >>> rules = FilterRules(include_extensions=["py"], exclude_patterns=[r"^tests/"])
        >>> rules.exclude("src/app.py")
        False
        >>> rules.exclude("tests/test_app.py")
        True
        >>> rules.exclude("README")
        True
    """

    def __init__(
        self,
        include_extensions: Iterable[str] = (),
        exclude_extensions: Iterable[str] = (),
        include_patterns: Iterable[str] = (),
        exclude_patterns: Iterable[str] = (),
    ) -> None:
        """Initialize the filters.

        Args:
            include_extensions: Extensions to keep, with or without a leading dot.
            exclude_extensions: Extensions to drop, with or without a leading dot.
            include_patterns: Regular expressions; at least one must match a kept path.
            exclude_patterns: Regular expressions; any match drops the path.

        Raises:
            InvalidPatternError: If any pattern is not a valid regular expression.
        """
        self.include_extensions: FrozenSet[str] = frozenset(normalize_extension(e) for e in include_extensions)
        self.exclude_extensions: FrozenSet[str] = frozenset(normalize_extension(e) for e in exclude_extensions)
        self.include_patterns = _compile_patterns(include_patterns, "include-path")
        self.exclude_patterns = _compile_patterns(exclude_patterns, "exclude-path")

    def allows(self, path: str, extension: Optional[str]) -> bool:
        """Decide whether a path passes the filters.

        Args:
            path: Path relative to the root directory, with forward slashes.
            extension: Lowercased extension of the path, or None if it has none.

        Returns:
            bool: True if the path is included.
        """
        if self.include_extensions and (extension is None or extension not in self.include_extensions):
            return False
        if extension is not None and extension in self.exclude_extensions:
            return False
        if any(pattern.search(path) for pattern in self.exclude_patterns):
            return False
        if self.include_patterns and not any(pattern.search(path) for pattern in self.include_patterns):
            return False
        return True

    def exclude(self, path: str) -> bool:
        return not self.allows(path, extension_of(path))

    def has_rules(self) -> bool:
        return bool(
            self.include_extensions or self.exclude_extensions or self.include_patterns or self.exclude_patterns
        )
