"""Command-line argument parsing for dir2prompt.

This module defines the command-line interface for dir2prompt,
handling argument parsing and validation.
"""

import argparse
from pathlib import Path

from dir2prompt import __version__
from dir2prompt.dir2prompt import DEFAULT_HEAD_LINES
from dir2prompt.prompt_template import DEFAULT_SYSTEM_PROMPT


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        An ArgumentParser instance configured with dir2prompt's options.
    """
    description = """
    dir2prompt: turn a directory into a prompt context for LLMs.

    The output contains the directory tree, the contents (or the first lines) of the
    selected files in fenced code blocks, a summary of the filters used and, when a
    question is given, a system prompt followed by the question.

    Files ignored by .gitignore are left out of both the tree and the contents unless
    --include-gitignore is given. Extension and path filters always select the contents;
    they also restrict the tree only with --filter-tree.
    """

    epilog = """
    Examples:
      # Whole project, first 200 lines of each file
      dir2prompt /path/to/project

      # Ask a question about the Python sources, full content
      dir2prompt -n 0 --include-ext py -q "Where is the retry logic?" /path/to/project

      # Leave out tests and lock files, and filter the tree the same way
      dir2prompt --exclude-path '^tests/' --exclude-ext lock --filter-tree /path/to/project

      # Also include files that .gitignore would exclude
      dir2prompt --include-gitignore /path/to/project

      # Write to a file with a custom template
      dir2prompt --template prompt.tmpl -o context.md /path/to/project
    """

    parser = argparse.ArgumentParser(
        prog="dir2prompt",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"dir2prompt {__version__}", help="Show the version and exit"
    )

    parser.add_argument(
        "directory",
        type=Path,
        help="The root directory to analyze. All paths in the output are relative to it.",
    )
    parser.add_argument(
        "-q",
        "--query",
        metavar="TEXT",
        help="Question to include in the prompt, preceded by the system prompt.",
    )
    parser.add_argument(
        "-s",
        "--system-prompt",
        metavar="TEXT",
        default=DEFAULT_SYSTEM_PROMPT,
        help="System prompt placed before the question (only shown when --query is given).",
    )
    parser.add_argument(
        "-n",
        "--head-lines",
        type=int,
        metavar="N",
        default=DEFAULT_HEAD_LINES,
        help=(
            "Number of lines to include from the start of each file, 0 for all lines "
            f"(default: {DEFAULT_HEAD_LINES})."
        ),
    )
    parser.add_argument(
        "--filter-tree",
        action="store_true",
        help="Apply the extension and path filters to the directory tree as well.",
    )
    parser.add_argument(
        "--include-ext",
        action="append",
        metavar="EXT",
        help="File extension to include, e.g. 'py' (case-insensitive, repeatable).",
    )
    parser.add_argument(
        "--exclude-ext",
        action="append",
        metavar="EXT",
        help="File extension to exclude (case-insensitive, repeatable).",
    )
    parser.add_argument(
        "--include-path",
        action="append",
        metavar="REGEX",
        help="Regular expression a relative path must match to be included (repeatable).",
    )
    parser.add_argument(
        "--exclude-path",
        action="append",
        metavar="REGEX",
        help="Regular expression excluding matching relative paths (repeatable).",
    )
    parser.add_argument(
        "--include-gitignore",
        action="store_true",
        help="Do not honor .gitignore files: include the files they would exclude.",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="FILE",
        help="Output file path. If not specified, output is written to stdout.",
    )
    parser.add_argument(
        "--template",
        type=Path,
        metavar="FILE",
        help="Custom output template using $-placeholders (see the dir2prompt.prompt_template module).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Log progress to stderr; repeat for debug output.",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        metavar="FILE",
        help="Write logs to this file instead of stderr.",
    )

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments.

    Performs additional validation beyond what argparse can handle.

    Args:
        args: Parsed command-line arguments.

    Raises:
        ValueError: If any arguments fail validation.
    """
    if args.head_lines < 0:
        raise ValueError(f"--head-lines must be 0 or a positive number, got {args.head_lines}")
    for option in ("include_ext", "exclude_ext"):
        for extension in getattr(args, option) or []:
            if not extension.strip().lstrip("."):
                raise ValueError(f"--{option.replace('_', '-')} requires a non-empty extension")
