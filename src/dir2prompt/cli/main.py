"""Command-line interface for dir2prompt.

This module provides the command-line interface for dir2prompt, turning a directory
into a single prompt context: a directory tree, the selected file contents, a summary of
the filters and an optional question.

Errors are handled in two tiers. Problems with a single file (unreadable, not valid
UTF-8) or a single directory entry are recovered and never reach this module. Setup
problems (invalid root directory, malformed regular expression) and template rendering
failures abort the run with a message on stderr.

Exit Codes:
    0: Successful completion
    1: Invalid root directory, invalid pattern or argument value, or render failure
    2: Command-line syntax error
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe (output reader went away)

Example:
    # Basic usage
    $ dir2prompt /path/to/project

    # With a question, Python files only, full content
    $ dir2prompt /path/to/project -q "How is caching done?" --include-ext py -n 0
"""

import sys
from typing import Optional, Sequence

from dir2prompt.cli.argparser import create_parser, validate_args
from dir2prompt.cli.output_writer import silence_stdout, write_output
from dir2prompt.config import FilterConfig
from dir2prompt.dir2prompt import Dir2Prompt
from dir2prompt.exceptions import TemplateRenderError
from dir2prompt.log import setup_logging
from dir2prompt.prompt_template import PromptTemplate

EXIT_ERROR = 1
EXIT_SIGINT = 130
EXIT_SIGPIPE = 141


def report_render_error(error: TemplateRenderError) -> None:
    """Print a render error and its underlying cause to stderr."""
    print(f"Error: {error}", file=sys.stderr)
    if error.__cause__ is not None:
        print(f"Caused by: {error.__cause__}", file=sys.stderr)


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Main entry point for the dir2prompt command-line interface.

    Args:
        argv: Command-line arguments without the program name. Defaults to sys.argv[1:].

    Exit codes:
        0: Successful completion
        1: Invalid root directory, invalid pattern or argument value, or render failure
        2: Command-line syntax error
        130: Interrupted by SIGINT (Ctrl+C)
        141: Broken pipe
    """
    parser = create_parser()
    # argparse calls sys.exit(2) for argument errors or sys.exit(0) for --version
    args = parser.parse_args(argv)

    try:
        logger = setup_logging(args.verbose, args.log_file)

        validate_args(args)

        # Patterns are compiled here, before any traversal
        config = FilterConfig.create(
            include_ext=args.include_ext or (),
            exclude_ext=args.exclude_ext or (),
            include_path=args.include_path or (),
            exclude_path=args.exclude_path or (),
            filter_tree=args.filter_tree,
            honor_gitignore=not args.include_gitignore,
        )

        template = PromptTemplate.from_file(args.template) if args.template else PromptTemplate()

        analyzer = Dir2Prompt(
            args.directory,
            config=config,
            head_lines=args.head_lines,
            template=template,
        )
        logger.info("processing_directory", root=str(analyzer.root_path))

        document = analyzer.render(query=args.query, system_prompt=args.system_prompt)
        write_output(document, args.output)

    except TemplateRenderError as e:
        report_render_error(e)
        sys.exit(EXIT_ERROR)
    except BrokenPipeError:
        silence_stdout()
        sys.exit(EXIT_SIGPIPE)
    except KeyboardInterrupt:
        print("Interrupted", file=sys.stderr)
        sys.exit(EXIT_SIGINT)
    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(EXIT_ERROR)


if __name__ == "__main__":
    main()
