"""Tests for custom exceptions."""

from dir2prompt.exceptions import FileReadError, InvalidPatternError, TemplateRenderError


class TestInvalidPatternError:
    """Test InvalidPatternError exception."""

    def test_invalid_pattern_error_creation(self):
        """Test creating InvalidPatternError with pattern, option and reason."""
        error = InvalidPatternError("[a-", "include-path", "unterminated character set")

        assert error.pattern == "[a-"
        assert error.option == "include-path"
        assert str(error) == "Invalid regular expression for --include-path: [a- (unterminated character set)"

    def test_invalid_pattern_error_is_value_error(self):
        """Test that InvalidPatternError can be handled as a ValueError."""
        assert isinstance(InvalidPatternError("(", "exclude-path", "x"), ValueError)


class TestFileReadError:
    """Test FileReadError exception."""

    def test_file_read_error_creation(self):
        """Test creating FileReadError with a relative path."""
        error = FileReadError("src/data.bin", "invalid start byte")

        assert error.relative_path == "src/data.bin"
        assert str(error) == "Failed to read 'src/data.bin': invalid start byte"

    def test_file_read_error_is_os_error(self):
        """Test that FileReadError can be handled as an OSError."""
        assert isinstance(FileReadError("a", "b"), OSError)


class TestTemplateRenderError:
    """Test TemplateRenderError exception."""

    def test_template_render_error_keeps_cause(self):
        """Test that the underlying error is chained."""
        try:
            try:
                raise KeyError("missing")
            except KeyError as e:
                raise TemplateRenderError("Failed to render the output template") from e
        except TemplateRenderError as error:
            assert str(error) == "Failed to render the output template"
            assert isinstance(error.__cause__, KeyError)
