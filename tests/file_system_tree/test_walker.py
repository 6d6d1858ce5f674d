"""Tests for directory traversal and .gitignore handling."""

import os

import pytest

from dir2prompt.exclusion_rules.filter_rules import FilterRules
from dir2prompt.file_system_tree.walker import FileSystemWalker


def relative_files(walker, exclusion_rules=None):
    return [walker.relative_path(path) for path in walker.collect_files(exclusion_rules)]


def test_root_must_exist(tmp_path):
    with pytest.raises(FileNotFoundError, match="Root path not found"):
        FileSystemWalker(tmp_path / "missing")


def test_root_must_be_directory(tmp_path):
    file_path = tmp_path / "file.txt"
    file_path.write_text("x")
    with pytest.raises(NotADirectoryError):
        FileSystemWalker(file_path)


def test_root_is_canonicalized(tmp_path):
    (tmp_path / "sub").mkdir()
    walker = FileSystemWalker(tmp_path / "sub" / "..")
    assert walker.root_path == tmp_path.resolve()
    assert walker.root_path.is_absolute()


def test_empty_directory(tmp_path):
    assert FileSystemWalker(tmp_path).collect_files() == []


def test_lists_regular_files_sorted(make_tree):
    root = make_tree({"b/c.txt": "c", "a.py": "a", "b/a/z.md": "z", "B.txt": "B"})
    walker = FileSystemWalker(root)
    assert relative_files(walker) == ["B.txt", "a.py", "b/a/z.md", "b/c.txt"]


def test_sorting_is_component_wise(make_tree):
    root = make_tree({"a/b": "", "a-b": "", "a.b": ""})
    walker = FileSystemWalker(root)
    # "a" sorts before "a-b" as a component even though "/" > "-" as a character
    assert relative_files(walker) == ["a/b", "a-b", "a.b"]


def test_collected_paths_are_absolute(make_tree):
    root = make_tree({"src/main.py": ""})
    paths = FileSystemWalker(root).collect_files()
    assert paths == [root.resolve() / "src" / "main.py"]


def test_hidden_files_are_included(make_tree):
    root = make_tree({".env": "SECRET=1", ".config/settings.toml": "", "visible.txt": ""})
    assert relative_files(FileSystemWalker(root)) == [".config/settings.toml", ".env", "visible.txt"]


def test_git_directory_is_skipped(make_tree):
    root = make_tree({".git/HEAD": "ref: refs/heads/main", ".git/objects/ab/cd": "", "main.py": ""})
    assert relative_files(FileSystemWalker(root)) == ["main.py"]


def test_nested_git_directory_is_skipped(make_tree):
    root = make_tree({"vendor/lib/.git/config": "", "vendor/lib/lib.py": ""})
    assert relative_files(FileSystemWalker(root)) == ["vendor/lib/lib.py"]


def test_gitignore_excludes_files_and_directories(make_tree):
    root = make_tree(
        {
            ".gitignore": "*.log\nbuild/\n",
            "app.py": "",
            "debug.log": "",
            "build/out.js": "",
            "src/build/gen.py": "",
        }
    )
    # "build/" matches a directory named build at any depth
    assert relative_files(FileSystemWalker(root)) == [".gitignore", "app.py"]


def test_gitignore_without_git_repository(make_tree):
    """Ignore files are honored even when the root is not a Git repository."""
    root = make_tree({".gitignore": "b/\n", "a.py": "", "b/b.txt": ""})
    assert not (root / ".git").exists()
    assert relative_files(FileSystemWalker(root)) == [".gitignore", "a.py"]


def test_gitignore_disabled(make_tree):
    root = make_tree({".gitignore": "b/\n", "a.py": "", "b/b.txt": ""})
    assert relative_files(FileSystemWalker(root, honor_gitignore=False)) == [".gitignore", "a.py", "b/b.txt"]


def test_negation_in_same_file(make_tree):
    root = make_tree({".gitignore": "*.txt\n!keep.txt\n", "drop.txt": "", "keep.txt": ""})
    assert relative_files(FileSystemWalker(root)) == [".gitignore", "keep.txt"]


def test_nested_gitignore_is_anchored_to_its_directory(make_tree):
    root = make_tree(
        {
            "docs/.gitignore": "/generated/\n*.tmp\n",
            "docs/generated/api.md": "",
            "docs/guide.md": "",
            "docs/drafts/x.tmp": "",
            "generated/keep.md": "",
            "notes.tmp": "",
        }
    )
    assert relative_files(FileSystemWalker(root)) == [
        "docs/.gitignore",
        "docs/guide.md",
        "generated/keep.md",
        "notes.tmp",
    ]


def test_parent_rules_apply_in_subdirectories(make_tree):
    root = make_tree({".gitignore": "*.pyc\n", "pkg/mod.py": "", "pkg/mod.pyc": "", "pkg/sub/x.pyc": ""})
    assert relative_files(FileSystemWalker(root)) == [".gitignore", "pkg/mod.py"]


def test_git_info_exclude_is_honored(make_tree):
    root = make_tree({".git/info/exclude": "secret.txt\n", "secret.txt": "", "public.txt": ""})
    assert relative_files(FileSystemWalker(root)) == ["public.txt"]
    assert relative_files(FileSystemWalker(root, honor_gitignore=False)) == ["public.txt", "secret.txt"]


def test_root_gitignore_is_force_included(make_tree):
    """The root .gitignore is listed even when it ignores itself or the filters reject it."""
    root = make_tree({".gitignore": ".gitignore\n*.py\n", "a.py": "", "b.txt": ""})
    walker = FileSystemWalker(root)
    assert relative_files(walker) == [".gitignore", "b.txt"]
    assert relative_files(walker, FilterRules(include_extensions=["rs"])) == [".gitignore"]


def test_nested_gitignore_is_not_force_included(make_tree):
    root = make_tree({"sub/.gitignore": "x\n", "sub/y.py": ""})
    assert relative_files(FileSystemWalker(root), FilterRules(include_extensions=["py"])) == ["sub/y.py"]


def test_exclusion_rules_are_applied_to_relative_paths(make_tree):
    root = make_tree({"src/a.py": "", "src/b.rs": "", "tests/test_a.py": "", "README": ""})
    rules = FilterRules(include_extensions=["py"], exclude_patterns=[r"^tests/"])
    assert relative_files(FileSystemWalker(root), rules) == ["src/a.py"]


def test_iterate_files_yields_posix_relative_paths(make_tree):
    root = make_tree({"a/b/c.txt": ""})
    pairs = list(FileSystemWalker(root).iterate_files())
    assert pairs == [(root.resolve() / "a" / "b" / "c.txt", "a/b/c.txt")]


def test_walk_is_deterministic(make_tree):
    root = make_tree({"z.py": "", "a/y.py": "", "m/n/o.py": "", ".gitignore": "*.tmp\n", "t.tmp": ""})
    walker = FileSystemWalker(root)
    assert walker.collect_files() == walker.collect_files()


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="Symlinks not supported")
def test_symlinks_are_not_listed_or_followed(make_tree):
    root = make_tree({"real/file.txt": "", "outside.txt": ""})
    try:
        os.symlink(root / "real", root / "link_dir")
        os.symlink(root / "outside.txt", root / "link_file.txt")
    except OSError:
        pytest.skip("Symlinks could not be created")
    assert relative_files(FileSystemWalker(root)) == ["outside.txt", "real/file.txt"]


@pytest.mark.skipif(os.name != "posix" or os.geteuid() == 0, reason="Requires POSIX permissions as non-root")
def test_unreadable_directory_is_skipped(make_tree):
    root = make_tree({"locked/secret.txt": "", "open.txt": ""})
    locked = root / "locked"
    locked.chmod(0o000)
    try:
        assert relative_files(FileSystemWalker(root)) == ["open.txt"]
    finally:
        locked.chmod(0o755)


def test_nested_negation_reincludes_file(make_tree):
    """A deeper .gitignore overrides its parents for the paths it matches."""
    root = make_tree(
        {
            ".gitignore": "*.log\n",
            "sub/.gitignore": "!keep.log\n",
            "sub/keep.log": "",
            "sub/drop.log": "",
            "keep.log": "",
        }
    )
    assert relative_files(FileSystemWalker(root)) == [".gitignore", "sub/.gitignore", "sub/keep.log"]


def test_nested_gitignore_can_ignore_what_parent_reincludes(make_tree):
    root = make_tree(
        {
            ".gitignore": "*.txt\n!notes.txt\n",
            "private/.gitignore": "notes.txt\n",
            "notes.txt": "",
            "private/notes.txt": "",
        }
    )
    assert relative_files(FileSystemWalker(root)) == [".gitignore", "notes.txt", "private/.gitignore"]


def test_negation_cannot_reenter_ignored_directory(make_tree):
    root = make_tree({".gitignore": "logs/\n", "logs/.gitignore": "!keep.log\n", "logs/keep.log": ""})
    assert relative_files(FileSystemWalker(root)) == [".gitignore"]


def test_gitignore_overrides_git_info_exclude(make_tree):
    root = make_tree(
        {".git/info/exclude": "*.env\n", ".gitignore": "!shared.env\n", "local.env": "", "shared.env": ""}
    )
    assert relative_files(FileSystemWalker(root)) == [".gitignore", "shared.env"]
