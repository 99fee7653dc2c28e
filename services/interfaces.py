"""
Interface definitions for all major service components.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Optional, Union

from models.core import BlogConfig, FetchRequest, FetchResult


class FetcherInterface(ABC):
    """Interface for blog/article fetch backends."""

    @abstractmethod
    def fetch(self, request: FetchRequest) -> FetchResult:
        """Fetch the sources named in a validated request."""
        pass


class ConfigManagerInterface(ABC):
    """Interface for configuration management operations."""

    @abstractmethod
    def load_config(self, config_path: Union[str, Path]) -> BlogConfig:
        """Load configuration from file."""
        pass

    @abstractmethod
    def save_default_config(self, output_path: Union[str, Path]) -> None:
        """Write the default configuration to a file."""
        pass

    @abstractmethod
    def merge_cli_args(self, config: BlogConfig, cli_args: Dict[str, Any]) -> BlogConfig:
        """Overlay command-line values onto a configuration."""
        pass

    @abstractmethod
    def get_config_path(self, config_dir: Optional[Union[str, Path]] = None) -> Path:
        """Return the default configuration file path."""
        pass
