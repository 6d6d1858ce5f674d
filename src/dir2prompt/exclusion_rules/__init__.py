"""Exclusion rules for filtering files and directories."""

from .base_rules import BaseExclusionRules
from .filter_rules import FilterRules
from .git_rules import GitIgnoreExclusionRules

__all__ = [
    "BaseExclusionRules",
    "FilterRules",
    "GitIgnoreExclusionRules",
]
