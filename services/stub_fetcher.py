"""
Placeholder fetch backend.

The ingestion pipeline is not built yet: this backend performs no network or
filesystem access and only reports what a fetch would do.
"""

import logging
from typing import Optional

from models.core import FetchRequest, FetchResult
from services.interfaces import FetcherInterface


class StubFetcher(FetcherInterface):
    """Fetch backend that echoes the request back as a stub result."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)

    def fetch(self, request: FetchRequest) -> FetchResult:
        """
        Build the placeholder result for a request.

        Args:
            request: Fetch request already validated by the caller

        Returns:
            FetchResult with status ``stub``
        """
        self.logger.debug(
            "blog fetch requested",
            extra={
                'url': request.url,
                'playlist': request.playlist,
                'out_dir': request.out_dir,
                'analyze': request.analyze
            }
        )
        # --analyze is recorded only; there is no analyzer to hand off to yet
        return FetchResult.from_request(request)
