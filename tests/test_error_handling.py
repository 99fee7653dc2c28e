"""
Unit tests for error handling framework.
"""

import pytest
import logging
from unittest.mock import Mock, patch

from config.error_handling import (
    ErrorHandler, ErrorType, ArcBlogError, UsageError, FormatResolutionError,
    ConfigurationError, ValidationError
)


class TestErrorTypes:
    """Test cases for the exception hierarchy."""

    def test_usage_error(self):
        error = UsageError("provide --url or --playlist", hint="blog fetch requires at least one source")

        assert isinstance(error, ArcBlogError)
        assert error.error_type is ErrorType.USAGE_ERROR
        assert error.exit_code == 2
        assert str(error) == "provide --url or --playlist"
        assert error.hint == "blog fetch requires at least one source"

    def test_format_resolution_error(self):
        """Test that format errors carry the value and choices."""
        error = FormatResolutionError("bad format", value="xml", choices=["table", "json"])

        assert error.error_type is ErrorType.FORMAT_ERROR
        assert error.exit_code == 2
        assert error.details == {'value': 'xml', 'choices': ['table', 'json']}
        assert error.hint == "valid formats: table, json"

    def test_format_resolution_error_without_choices(self):
        assert FormatResolutionError("not resolved").hint is None

    def test_configuration_errors_exit_one(self):
        assert ConfigurationError("x").exit_code == 1
        assert ValidationError("x").error_type is ErrorType.VALIDATION_ERROR

    def test_to_dict(self):
        """Test error serialization."""
        original = ValueError("boom")
        error = ConfigurationError("broken", details={'file_path': 'a.json'}, original_exception=original)
        data = error.to_dict()

        assert data['message'] == "broken"
        assert data['error_type'] == "configuration_error"
        assert data['details'] == {'file_path': 'a.json'}
        assert data['original_exception'] == "boom"
        assert 'timestamp' in data


class TestErrorHandler:
    """Test cases for ErrorHandler class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.mock_logger = Mock(spec=logging.Logger)
        self.error_handler = ErrorHandler(logger=self.mock_logger)

    def test_report_known_error(self, capsys):
        """Test that known errors print message and hint to stderr."""
        code = self.error_handler.report(UsageError("no source", hint="add --url"), "fetch")

        captured = capsys.readouterr()
        assert code == 2
        assert captured.out == ""
        assert "Error: no source" in captured.err
        assert "Hint: add --url" in captured.err
        self.mock_logger.debug.assert_called_once()

    def test_report_without_hint(self, capsys):
        code = self.error_handler.report(ConfigurationError("bad config"), "config")

        captured = capsys.readouterr()
        assert code == 1
        assert "Error: bad config" in captured.err
        assert "Hint:" not in captured.err

    def test_report_unexpected_error(self, capsys):
        """Test that unexpected errors are logged and exit with 1."""
        code = self.error_handler.report(RuntimeError("kaboom"), "fetch")

        captured = capsys.readouterr()
        assert code == 1
        assert "Unexpected error: kaboom" in captured.err
        self.mock_logger.error.assert_called_once()

    def test_report_logs_serialized_error(self):
        """Test that the structured error is attached to the debug record."""
        error = FormatResolutionError("bad format", value="xml", choices=["table"])
        with patch('config.error_handling.click.echo'):
            self.error_handler.report(error, "fetch")

        args, kwargs = self.mock_logger.debug.call_args
        assert args == ("Error in fetch: bad format",)
        assert kwargs['extra']['context'] == "fetch"
        assert kwargs['extra']['error'] == error.to_dict()
        assert kwargs['extra']['error']['timestamp'] == error.timestamp
