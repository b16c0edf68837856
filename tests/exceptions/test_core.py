"""
Tests for error context and exception messages.
"""

from pathlib import Path

from plztree.exceptions import (
    CommandResolutionError,
    ConfigLoadError,
    DuplicateCommandNameError,
    ErrorContext,
    GrammarParseError,
    PlzTreeError,
    ReservedArgumentError,
    UnsupportedPlatformError,
)


class TestErrorContext:
    """Tests for ErrorContext dataclass."""

    def test_empty_context_formats_to_nothing(self):
        """Test that an empty context adds no lines."""
        assert ErrorContext().format_location() == ""

    def test_formats_command_path_and_file(self):
        """Test both location parts."""
        ctx = ErrorContext(command_path=["db", "migrate"], config_path=Path("plz.yaml"))

        formatted = ctx.format_location()

        assert "in command 'db migrate'" in formatted
        assert "in file plz.yaml" in formatted


class TestExceptionMessages:
    """Tests for exception attributes and messages."""

    def test_all_errors_share_base_class(self):
        """Test the hierarchy."""
        for error_class in (
            ConfigLoadError,
            DuplicateCommandNameError,
            ReservedArgumentError,
            CommandResolutionError,
            GrammarParseError,
            UnsupportedPlatformError,
        ):
            assert issubclass(error_class, PlzTreeError)

    def test_duplicate_name_includes_location(self):
        """Test duplicate name message with a parent command."""
        error = DuplicateCommandNameError("build", ["build", "compile"], ErrorContext(command_path=["tools"]))

        assert "'build', 'compile'" in str(error)
        assert "in command 'tools'" in str(error)

    def test_duplicate_name_at_root_has_no_location(self):
        """Test that root-level collisions have no location line."""
        error = DuplicateCommandNameError("build", ["a", "b"], ErrorContext())

        assert "\n" not in str(error)

    def test_reserved_argument_message(self):
        """Test reserved identifier message."""
        error = ReservedArgumentError("ARGS", ErrorContext(command_path=["dc"]))

        assert "'ARGS'" in str(error)
        assert "in command 'dc'" in str(error)

    def test_config_load_error_message(self):
        """Test load error message."""
        error = ConfigLoadError("plz.yaml", "No such file or directory")

        assert str(error) == "Cannot load configuration from plz.yaml: No such file or directory"

    def test_grammar_parse_error_keeps_usage(self):
        """Test parse error attributes."""
        error = GrammarParseError("unrecognized arguments: -x", usage="usage: plz\n")

        assert error.message == "unrecognized arguments: -x"
        assert error.usage == "usage: plz\n"
        assert str(error) == "unrecognized arguments: -x"
