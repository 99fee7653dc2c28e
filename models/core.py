"""
Core data models for the arc-blog application.
"""

from dataclasses import dataclass
from typing import List, Optional, Dict, Any
from enum import Enum


DEFAULT_OUT_DIR = "docs/research-external/blog"
NEXT_STEP = "Phase 2 ingestion pipeline"


class OutputFormat(Enum):
    """Supported rendering modes for command output."""
    TABLE = "table"
    JSON = "json"
    YAML = "yaml"
    QUIET = "quiet"

    @classmethod
    def choices(cls):
        return [fmt.value for fmt in cls]


class FetchStatus(Enum):
    """Status values reported for fetch operations."""
    STUB = "stub"


@dataclass
class BlogConfig:
    """Persisted defaults for the fetch command."""
    out_dir: str = DEFAULT_OUT_DIR
    output: str = "table"
    analyze: bool = False


@dataclass
class FetchRequest:
    """A request to fetch an article URL and/or a playlist/feed."""
    url: Optional[str] = ""
    playlist: Optional[str] = ""
    out_dir: str = DEFAULT_OUT_DIR
    analyze: bool = False

    def __post_init__(self):
        """Normalise missing sources to empty strings."""
        self.url = self.url or ""
        self.playlist = self.playlist or ""

    def sources(self) -> List[str]:
        """Return the non-empty sources in (url, playlist) order."""
        return [source for source in (self.url, self.playlist) if source]

    def validate(self) -> None:
        """
        Ensure at least one source is present.

        Raises:
            UsageError: If both url and playlist are empty
        """
        # config imports models; deferred to avoid a circular import
        from config.error_handling import UsageError

        if not self.sources():
            raise UsageError(
                "provide --url or --playlist",
                hint="blog fetch requires at least one source"
            )


@dataclass
class FetchResult:
    """Summary of what a fetch would do."""
    url: str
    playlist: str
    out_dir: str
    analyze: bool
    status: FetchStatus = FetchStatus.STUB
    next_step: str = NEXT_STEP

    @classmethod
    def from_request(cls, request: FetchRequest) -> "FetchResult":
        """Build a stub result echoing the request."""
        return cls(
            url=request.url,
            playlist=request.playlist,
            out_dir=request.out_dir,
            analyze=request.analyze
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a plain mapping, keeping serialization key order stable."""
        return {
            'url': self.url,
            'playlist': self.playlist,
            'out_dir': self.out_dir,
            'analyze': self.analyze,
            'status': self.status.value,
            'next_step': self.next_step
        }
