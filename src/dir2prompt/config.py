"""Filter configuration shared by the tree walk, the content selection and the summary."""

from dataclasses import dataclass, field
from typing import Sequence, Tuple

from dir2prompt.exclusion_rules.filter_rules import FilterRules


@dataclass(frozen=True)
class FilterConfig:
    """Immutable filter configuration for a single run.

    The raw option values are kept as supplied so they can be echoed back in the output
    summary; the compiled rules are built once at construction time. Building a
    FilterConfig therefore validates every regular expression up front.

    Attributes:
        include_ext: Extensions to include, as supplied.
        exclude_ext: Extensions to exclude, as supplied.
        include_path: Include-path regular expressions, as supplied.
        exclude_path: Exclude-path regular expressions, as supplied.
        filter_tree: Whether the tree display is filtered like the content selection.
        honor_gitignore: Whether .gitignore rules are applied while walking.
        rules: Compiled FilterRules built from the four lists.

    Raises:
        InvalidPatternError: If any include/exclude path is not a valid regular expression.

    Example:
        >>> config = FilterConfig.create(include_ext=["PY"])
        >>> config.rules.exclude("main.py")
        False
        >>> config.include_ext
        ('PY',)
    """

    include_ext: Tuple[str, ...] = ()
    exclude_ext: Tuple[str, ...] = ()
    include_path: Tuple[str, ...] = ()
    exclude_path: Tuple[str, ...] = ()
    filter_tree: bool = False
    honor_gitignore: bool = True
    rules: FilterRules = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "rules",
            FilterRules(
                include_extensions=self.include_ext,
                exclude_extensions=self.exclude_ext,
                include_patterns=self.include_path,
                exclude_patterns=self.exclude_path,
            ),
        )

    @classmethod
    def create(
        cls,
        include_ext: Sequence[str] = (),
        exclude_ext: Sequence[str] = (),
        include_path: Sequence[str] = (),
        exclude_path: Sequence[str] = (),
        filter_tree: bool = False,
        honor_gitignore: bool = True,
    ) -> "FilterConfig":
        """Build a configuration from any sequences (e.g. argparse lists or None-free defaults)."""
        return cls(
            include_ext=tuple(include_ext),
            exclude_ext=tuple(exclude_ext),
            include_path=tuple(include_path),
            exclude_path=tuple(exclude_path),
            filter_tree=filter_tree,
            honor_gitignore=honor_gitignore,
        )
