"""Unit tests for the filter configuration."""

import dataclasses

import pytest

from dir2prompt.config import FilterConfig
from dir2prompt.exceptions import InvalidPatternError
from dir2prompt.exclusion_rules.filter_rules import FilterRules


def test_defaults():
    config = FilterConfig()
    assert config.include_ext == ()
    assert config.honor_gitignore is True
    assert config.filter_tree is False
    assert isinstance(config.rules, FilterRules)
    assert not config.rules.has_rules()


def test_create_from_lists_keeps_raw_values():
    config = FilterConfig.create(include_ext=["PY", ".md"], exclude_path=[r"^tests/"])
    assert config.include_ext == ("PY", ".md")
    assert config.exclude_path == (r"^tests/",)
    assert config.rules.include_extensions == frozenset({"py", "md"})


def test_config_is_immutable():
    config = FilterConfig.create(include_ext=["py"])
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.filter_tree = True  # type: ignore[misc]


def test_invalid_regex_fails_on_construction():
    with pytest.raises(InvalidPatternError, match="--exclude-path"):
        FilterConfig.create(exclude_path=["("])


def test_equality_ignores_compiled_rules():
    assert FilterConfig.create(include_ext=["py"]) == FilterConfig.create(include_ext=["py"])
    assert FilterConfig.create(include_ext=["py"]) != FilterConfig.create(include_ext=["rs"])
