"""Directory traversal honoring .gitignore rules.

This module provides FileSystemWalker, which lists the regular files below a root
directory. Ignore files are honored the way Git honors them: each .gitignore applies to
the directory it lives in and everything below it, the deepest ignore file with a
matching pattern decides (so a nested negation can re-include a file), and ignored
directories are not entered at all. Entries that cannot be inspected are skipped
without aborting the walk.
"""

import os
from pathlib import Path
from typing import Iterator, List, Optional, Sequence, Set, Tuple

from dir2prompt.exclusion_rules.base_rules import BaseExclusionRules
from dir2prompt.exclusion_rules.git_rules import GitIgnoreExclusionRules
from dir2prompt.log import logger
from dir2prompt.types import PathType

GITIGNORE_FILENAME = ".gitignore"
GIT_DIRNAME = ".git"


class FileSystemWalker:
    """Lists the regular files below a root directory.

    Hidden files are visited. Anything inside a ``.git`` directory is skipped, and so are
    symbolic links, which are neither followed nor listed. When ``honor_gitignore`` is
    True, ``.gitignore`` files found during the walk and ``.git/info/exclude`` at the root
    exclude matching paths; whether or not the root is actually a Git repository does not
    matter. Rules in a deeper .gitignore take precedence over its parents, and any
    .gitignore takes precedence over .git/info/exclude.

    Only these two sources are read. ``.ignore`` files, .gitignore files in directories
    above the root and the user's global excludes file are not consulted, and
    ``honor_gitignore=False`` switches off .git/info/exclude together with the
    .gitignore files.

    The root's own ``.gitignore`` is always part of the collected files, even when it is
    ignored or filtered out, since it is useful context about the project.

    Attributes:
        root_path (Path): The canonical absolute path of the root directory.
        honor_gitignore (bool): Whether ignore files are applied.

    Example:
        >>> walker = FileSystemWalker(".")  # doctest: +SKIP
        >>> for path in walker.collect_files():  # doctest: +SKIP
        ...     print(path.relative_to(walker.root_path))
        .gitignore
        src/main.py
    """

    def __init__(self, root_path: PathType, honor_gitignore: bool = True) -> None:
        """Initialize a FileSystemWalker.

        Args:
            root_path: Path to the root directory. It is resolved to its canonical form.
            honor_gitignore: Whether .gitignore rules are applied. Defaults to True.

        Raises:
            FileNotFoundError: If the root path does not exist or cannot be accessed.
            NotADirectoryError: If the root path is not a directory.
        """
        try:
            resolved = Path(root_path).resolve(strict=True)
        except (OSError, RuntimeError) as e:
            raise FileNotFoundError(f"Root path not found or not accessible: {root_path} ({e})") from e
        if not resolved.is_dir():
            raise NotADirectoryError(f"Root path is not a directory: {root_path}")

        self.root_path = resolved
        self.honor_gitignore = honor_gitignore

    def _load_ignore_file(self, path: Path, base: str) -> Optional[GitIgnoreExclusionRules]:
        try:
            rules = GitIgnoreExclusionRules(path, base=base)
        except (OSError, UnicodeDecodeError):
            return None
        return rules if rules.has_rules() else None

    def _root_ignore_rules(self) -> List[GitIgnoreExclusionRules]:
        rules = []
        info_exclude = self.root_path / GIT_DIRNAME / "info" / "exclude"
        if info_exclude.is_file():
            loaded = self._load_ignore_file(info_exclude, "")
            if loaded is not None:
                rules.append(loaded)
        return rules

    @staticmethod
    def _is_ignored(relative_path: str, ignore_rules: Sequence[GitIgnoreExclusionRules]) -> bool:
        # Deepest rule set first; the first one with a matching pattern decides
        for rules in reversed(ignore_rules):
            decision = rules.match(relative_path)
            if decision is not None:
                return decision
        return False

    def _walk(
        self, directory: Path, relative_dir: str, ignore_rules: Tuple[GitIgnoreExclusionRules, ...]
    ) -> Iterator[Tuple[Path, str]]:
        """Recursive helper for iterate_files."""
        if self.honor_gitignore:
            gitignore = directory / GITIGNORE_FILENAME
            if gitignore.is_file():
                loaded = self._load_ignore_file(gitignore, relative_dir)
                if loaded is not None:
                    ignore_rules = ignore_rules + (loaded,)

        try:
            with os.scandir(directory) as it:
                entries = sorted(it, key=lambda entry: entry.name)
        except OSError:
            return

        for entry in entries:
            if entry.name == GIT_DIRNAME:
                continue
            relative_path = f"{relative_dir}/{entry.name}" if relative_dir else entry.name

            try:
                is_dir = entry.is_dir(follow_symlinks=False)
                is_file = not is_dir and entry.is_file(follow_symlinks=False)
            except OSError:
                continue

            if is_dir:
                if self._is_ignored(relative_path + "/", ignore_rules):
                    continue
                yield from self._walk(Path(entry.path), relative_path, ignore_rules)
            elif is_file:
                if self._is_ignored(relative_path, ignore_rules):
                    continue
                yield Path(entry.path), relative_path

    def iterate_files(self) -> Iterator[Tuple[Path, str]]:
        """Iterate over the regular files below the root that ignore rules do not exclude.

        Yields:
            Pairs of (absolute_path, relative_path), where relative_path uses forward
            slashes. Order follows the traversal and is not guaranteed to be sorted.
        """
        ignore_rules = tuple(self._root_ignore_rules()) if self.honor_gitignore else ()
        yield from self._walk(self.root_path, "", ignore_rules)

    def collect_files(self, exclusion_rules: Optional[BaseExclusionRules] = None) -> List[Path]:
        """Collect the deduplicated, sorted set of files for one purpose.

        Used twice per run: once for the tree display (with the filters only when the tree
        is filtered) and once for the content selection (always with the filters).

        Args:
            exclusion_rules: Additional rules applied to each root-relative file path, such
                as FilterRules. None applies no extra filtering.

        Returns:
            Absolute paths sorted component by component. The root's .gitignore is
            included whenever it is a regular file, regardless of any rule.
        """
        files: Set[Path] = set()

        gitignore = self.root_path / GITIGNORE_FILENAME
        if gitignore.is_file():
            files.add(gitignore)

        for abs_path, relative_path in self.iterate_files():
            if exclusion_rules is not None and exclusion_rules.exclude(relative_path):
                continue
            files.add(abs_path)

        logger.debug(
            "walk_complete",
            root=str(self.root_path),
            filtered=exclusion_rules is not None,
            files=len(files),
        )
        return sorted(files, key=lambda path: path.parts)

    def relative_path(self, path: Path) -> str:
        """Return a collected path relative to the root, with forward slashes."""
        return path.relative_to(self.root_path).as_posix()
