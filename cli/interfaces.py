"""
Interface definitions for CLI components.
"""

from abc import ABC, abstractmethod
from urllib.parse import urlparse

from models.core import FetchResult
from cli.output import OutputOptions


class CLIInterface(ABC):
    """Interface for command-line interface operations."""

    @abstractmethod
    def display_fetch_result(self, result: FetchResult, options: OutputOptions) -> None:
        """Render a fetch result in the resolved output format."""
        pass

    @abstractmethod
    def display_error(self, error_message: str) -> None:
        """Display error message to the user."""
        pass

    @abstractmethod
    def display_success(self, message: str) -> None:
        """Display success message to the user."""
        pass


class ArgumentValidator:
    """Validates CLI arguments that are accepted but worth a warning."""

    @staticmethod
    def validate_url(url: str) -> bool:
        """Check that a URL has an http(s) scheme and a host."""
        if not url or not isinstance(url, str):
            return False

        parsed = urlparse(url)
        return parsed.scheme in ('http', 'https') and bool(parsed.netloc)

    @staticmethod
    def validate_output_path(path: str) -> bool:
        """Validate output path format."""
        if not path or not isinstance(path, str):
            return False

        invalid_chars = ['<', '>', '"', '|', '?', '*', '\0']
        return not any(char in path for char in invalid_chars)
