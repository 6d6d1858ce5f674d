class InvalidPatternError(ValueError):
    """
    Exception raised when an include/exclude path pattern is not a valid regular expression.

    Patterns are compiled while the filter configuration is built, so this error always
    surfaces before any directory traversal takes place.

    Attributes:
        pattern (str): The offending regular expression as supplied by the user.
        option (str): Name of the option the pattern was given to (e.g. "exclude-path").

    Example:
        >>> error = InvalidPatternError("(", "exclude-path", "missing ), unterminated subpattern")
        >>> str(error)
        'Invalid regular expression for --exclude-path: ( (missing ), unterminated subpattern)'
    """

    def __init__(self, pattern: str, option: str, reason: str) -> None:
        """
        Initialize the exception with the pattern and the option it came from.

        Args:
            pattern (str): The regular expression that failed to compile.
            option (str): The option name without leading dashes.
            reason (str): Description of the compilation failure.
        """
        self.pattern = pattern
        self.option = option
        super().__init__(f"Invalid regular expression for --{option}: {pattern} ({reason})")


class FileReadError(OSError):
    """
    Exception raised when a selected file cannot be opened or decoded as text.

    The content printer catches this error per file and replaces the file's content with
    an inline marker, so one unreadable file never aborts the whole run.

    Attributes:
        relative_path (str): Path of the file relative to the root directory.

    Example:
        >>> error = FileReadError("src/data.bin", "invalid start byte")
        >>> str(error)
        "Failed to read 'src/data.bin': invalid start byte"
    """

    def __init__(self, relative_path: str, reason: str) -> None:
        self.relative_path = relative_path
        super().__init__(f"Failed to read '{relative_path}': {reason}")


class TemplateRenderError(Exception):
    """
    Exception raised when the output template cannot be rendered.

    The underlying error (unknown placeholder, malformed substitution, unreadable template
    file) is chained as ``__cause__``. This is the only fatal error raised after traversal.

    Example:
        >>> error = TemplateRenderError("Failed to render the output template")
        >>> str(error)
        'Failed to render the output template'
    """

    pass
