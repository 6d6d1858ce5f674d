"""Tree representation of a flat set of relative paths."""

from pathlib import PurePosixPath
from typing import Dict, Iterable, Iterator, Optional

from anytree import Node, RenderTree
from anytree.render import ContStyle

ROOT_NAME = "."
EMPTY_TREE_PLACEHOLDER = "(no matching files found)"

_Trie = Dict[str, "_Trie"]


class PathTree:
    """A directory tree built from root-relative file paths.

    Each path is split into its components and inserted into a trie, so paths sharing a
    prefix share the corresponding directory nodes. The trie is then materialized as
    anytree nodes with children in ascending name order, below a root labeled ``.``.
    Files and directories are both plain nodes; a leaf is simply a node without children.

    The input order does not matter: the same set of paths always produces the same tree
    and the same rendering.

    Example:
        >>> tree = PathTree(["src/main.py", "README.md", "src/util/io.py"])
        >>> print(tree.get_tree_representation())
        .
        ├── README.md
        └── src
            ├── main.py
            └── util
                └── io.py
        >>> print(PathTree([]).get_tree_representation())
        (no matching files found)
    """

    def __init__(self, relative_paths: Iterable[str]) -> None:
        """Initialize a PathTree.

        Args:
            relative_paths: File paths relative to the root, using forward slashes.
                Duplicates are ignored.
        """
        self._trie: _Trie = {}
        self._path_count = 0
        for relative_path in set(relative_paths):
            self._insert(relative_path)
        self._tree: Optional[Node] = None

    def _insert(self, relative_path: str) -> None:
        parts = [part for part in PurePosixPath(relative_path).parts if part not in ("", ".", "/")]
        if not parts:
            return
        node = self._trie
        for part in parts:
            node = node.setdefault(part, {})
        self._path_count += 1

    @staticmethod
    def _materialize(name: str, children: _Trie, parent: Optional[Node] = None) -> Node:
        node = Node(name, parent=parent)
        for child_name in sorted(children):
            PathTree._materialize(child_name, children[child_name], parent=node)
        return node

    def is_empty(self) -> bool:
        return not self._trie

    def get_tree(self) -> Optional[Node]:
        """Get the root node of the tree, or None if no paths were given.

        The anytree structure is built lazily on first access.
        """
        if self.is_empty():
            return None
        if self._tree is None:
            self._tree = self._materialize(ROOT_NAME, self._trie)
        return self._tree

    def stream_tree_representation(self) -> Iterator[str]:
        """Generate the line-art representation one line at a time.

        Yields:
            Lines without trailing newlines. An empty tree yields a single placeholder line.
        """
        root = self.get_tree()
        if root is None:
            yield EMPTY_TREE_PLACEHOLDER
            return

        for prefix, _, node in RenderTree(root, style=ContStyle()):
            yield f"{prefix}{node.name}"

    def get_tree_representation(self) -> str:
        """Get the complete line-art representation as a string."""
        return "\n".join(self.stream_tree_representation())

    @property
    def path_count(self) -> int:
        """Number of distinct paths inserted into the tree."""
        return self._path_count
