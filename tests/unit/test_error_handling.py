"""
Unit tests for the exception hierarchy.
"""

from reponame.utils.constants import DefectReason
from reponame.utils.exceptions import LabelSyntaxError, ReponameError


class TestReponameExceptions:
    """Test cases for custom exception classes."""

    def test_reponame_error_basic(self):
        """Test basic ReponameError functionality."""
        error = ReponameError("Test error message")
        assert str(error) == "Test error message"
        assert error.message == "Test error message"
        assert error.details == {}

    def test_reponame_error_with_details(self):
        """Test ReponameError with details."""
        error = ReponameError("Test error", {"key1": "value1", "key2": 42})
        assert error.message == "Test error"
        assert "key1=value1" in str(error)
        assert "key2=42" in str(error)

    def test_label_syntax_error(self):
        """LabelSyntaxError formats the input and reason."""
        error = LabelSyntaxError("foo", DefectReason.MUST_START_WITH_MARKER.value)
        assert isinstance(error, ReponameError)
        assert error.raw == "foo"
        assert error.reason == "workspace names must start with '@'"
        assert str(error) == (
            "invalid repository name 'foo': workspace names must start with '@'"
        )

    def test_label_syntax_error_sanitizes(self):
        """The message sanitizes control characters; raw keeps them."""
        error = LabelSyntaxError("@a\tb", DefectReason.DISALLOWED_CHARACTERS.value)
        assert "'@a\\tb'" in str(error)
        assert error.raw == "@a\tb"
