"""Directory to prompt conversion utilities.

This package turns a directory tree into a single prompt context for Large
Language Models (LLMs): an ASCII tree of the project, the (optionally
truncated) contents of the selected files, and an optional question.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("dir2prompt")
except PackageNotFoundError:
    __version__ = "unknown"
