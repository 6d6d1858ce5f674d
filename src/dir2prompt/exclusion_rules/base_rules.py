from abc import ABC, abstractmethod


class BaseExclusionRules(ABC):
    """
    Abstract base class defining the interface for file exclusion rules.

    Rules decide, for a path relative to the root directory being processed, whether that
    path is left out. Two families implement it: gitignore-style rules used while walking
    the tree, and extension/regular-expression filters used to select which files are
    displayed and whose contents are included.

    Paths handed to exclude() always use forward slashes (/) as separators, regardless of
    the host platform.

    Example:
        >>> from dir2prompt.exclusion_rules.git_rules import GitIgnoreExclusionRules
        >>> git_rules = GitIgnoreExclusionRules()
        >>> git_rules.add_rule('*.pyc')
        >>> git_rules.exclude('test.pyc')
        True
        >>> from dir2prompt.exclusion_rules.filter_rules import FilterRules
        >>> filter_rules = FilterRules(include_extensions=['py'])
        >>> filter_rules.exclude('README.md')
        True
    """

    @abstractmethod
    def exclude(self, path: str) -> bool:
        """
        Determine if a given path should be excluded.

        Args:
            path (str): The path to check, relative to the root directory.

        Returns:
            bool: True if the path should be excluded, False if it should be included.
        """
        pass

    def has_rules(self) -> bool:
        """
        Report whether any rule is configured.

        Returns:
            bool: True by default; subclasses return False when they would never exclude
                anything, which lets callers skip them.
        """
        return True
