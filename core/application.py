"""
Main application controller for arc-blog.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from models.core import BlogConfig, FetchRequest, FetchResult
from services.interfaces import FetcherInterface, ConfigManagerInterface
from services.stub_fetcher import StubFetcher
from config import ConfigManager
from config.logging_config import get_logger


class ArcBlogApp:
    """
    Application controller that wires configuration and the fetch backend.

    Commands build a FetchRequest from their flags and the loaded
    configuration, then hand it to the configured fetcher.
    """

    def __init__(
        self,
        fetcher: Optional[FetcherInterface] = None,
        config_manager: Optional[ConfigManagerInterface] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize the application.

        Args:
            fetcher: Fetch backend implementation
            config_manager: Configuration manager implementation
            logger: Optional logger instance
        """
        self.logger = logger or get_logger(__name__)
        self.config_manager = config_manager or ConfigManager()
        self.fetcher = fetcher or StubFetcher()

        self.logger.debug("arc-blog application initialized")

    def set_fetcher(self, fetcher: FetcherInterface) -> None:
        """Set the fetch backend implementation."""
        self.fetcher = fetcher
        self.logger.debug("Fetcher set")

    def load_configuration(self, config_path: Optional[Union[str, Path]] = None) -> BlogConfig:
        """
        Load configuration from a file, or from the default location.

        Raises:
            ConfigurationError: If the file exists but cannot be loaded
        """
        if config_path is None:
            config_path = self.config_manager.get_config_path()
        return self.config_manager.load_config(config_path)

    def build_request(
        self,
        config: BlogConfig,
        url: Optional[str] = None,
        playlist: Optional[str] = None,
        out_dir: Optional[str] = None,
        analyze: Optional[bool] = None
    ) -> FetchRequest:
        """Combine command flags with configured defaults into a FetchRequest."""
        merged = self.config_manager.merge_cli_args(
            config, {'out_dir': out_dir, 'analyze': analyze}
        )
        return FetchRequest(
            url=url,
            playlist=playlist,
            out_dir=merged.out_dir,
            analyze=merged.analyze
        )

    def fetch(self, request: FetchRequest) -> FetchResult:
        """
        Run a fetch through the configured backend.

        Raises:
            UsageError: If the request names no source
        """
        request.validate()
        self.logger.info(f"Fetching {', '.join(request.sources())}")
        return self.fetcher.fetch(request)
