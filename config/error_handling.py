"""
Error handling framework for the arc-blog application.
"""

import logging
import time
from enum import Enum
from typing import Optional, Any, Dict, Sequence

import click


class ErrorType(Enum):
    """Types of errors that can occur in the application."""
    USAGE_ERROR = "usage_error"
    FORMAT_ERROR = "format_error"
    CONFIGURATION_ERROR = "configuration_error"
    VALIDATION_ERROR = "validation_error"


class ArcBlogError(Exception):
    """Base exception class for arc-blog errors."""

    exit_code = 1

    def __init__(
        self,
        message: str,
        error_type: ErrorType = ErrorType.USAGE_ERROR,
        hint: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        original_exception: Optional[Exception] = None
    ):
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.hint = hint
        self.details = details or {}
        self.original_exception = original_exception
        self.timestamp = time.time()

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        return {
            'message': self.message,
            'error_type': self.error_type.value,
            'hint': self.hint,
            'details': self.details,
            'timestamp': self.timestamp,
            'original_exception': str(self.original_exception) if self.original_exception else None
        }


class UsageError(ArcBlogError):
    """Error raised when a command is invoked with an invalid flag combination."""

    exit_code = 2

    def __init__(self, message: str, hint: Optional[str] = None, **kwargs):
        super().__init__(message, error_type=ErrorType.USAGE_ERROR, hint=hint, **kwargs)


class FormatResolutionError(ArcBlogError):
    """Error raised when the requested output format is not supported."""

    exit_code = 2

    def __init__(self, message: str, value: Optional[str] = None,
                 choices: Sequence[str] = (), **kwargs):
        kwargs.setdefault('hint', f"valid formats: {', '.join(choices)}" if choices else None)
        super().__init__(message, error_type=ErrorType.FORMAT_ERROR, **kwargs)
        self.value = value
        self.choices = list(choices)
        self.details['value'] = value
        self.details['choices'] = self.choices


class ConfigurationError(ArcBlogError):
    """Error related to configuration issues."""

    def __init__(self, message: str, **kwargs):
        super().__init__(message, error_type=ErrorType.CONFIGURATION_ERROR, **kwargs)


class ValidationError(ArcBlogError):
    """Error related to configuration value validation."""

    def __init__(self, message: str, **kwargs):
        super().__init__(message, error_type=ErrorType.VALIDATION_ERROR, **kwargs)


class ErrorHandler:
    """Centralized error reporting for CLI commands."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)

    def report(self, error: Exception, context: str = "") -> int:
        """
        Log an error, show it to the user and return the exit code to use.

        Args:
            error: The exception that occurred
            context: Command or operation in which the error occurred

        Returns:
            Process exit code for the error
        """
        if isinstance(error, ArcBlogError):
            self.logger.debug(
                f"Error in {context}: {error.message}",
                extra={'error': error.to_dict(), 'context': context}
            )
            self.display_error(error.message, hint=error.hint)
            return error.exit_code

        self.logger.error(
            f"Unexpected error in {context}: {str(error)}",
            exc_info=error,
            extra={'error_type': type(error).__name__, 'context': context}
        )
        self.display_error(f"Unexpected error: {str(error)}")
        return 1

    @staticmethod
    def display_error(message: str, hint: Optional[str] = None) -> None:
        """Display an error message (and optional hint) on stderr."""
        click.echo(click.style(f"Error: {message}", fg='red'), err=True)
        if hint:
            click.echo(f"Hint: {hint}", err=True)
