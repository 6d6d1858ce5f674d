"""File system traversal and tree rendering.

This package provides the walker that collects files below a root directory while
honoring ignore rules, and the tree that renders a set of relative paths as line art.
"""

from .path_tree import PathTree
from .walker import FileSystemWalker

__all__ = ["FileSystemWalker", "PathTree"]
