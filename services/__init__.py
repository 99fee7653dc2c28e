"""
Service layer components for the arc-blog application.
"""

from .interfaces import FetcherInterface, ConfigManagerInterface
from .stub_fetcher import StubFetcher

__all__ = [
    'FetcherInterface',
    'ConfigManagerInterface',
    'StubFetcher'
]
