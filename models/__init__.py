"""
Data models for the arc-blog application.
"""

from .core import (
    BlogConfig, FetchRequest, FetchResult, FetchStatus, OutputFormat, DEFAULT_OUT_DIR, NEXT_STEP
)

__all__ = [
    'BlogConfig',
    'FetchRequest',
    'FetchResult',
    'FetchStatus',
    'OutputFormat',
    'DEFAULT_OUT_DIR',
    'NEXT_STEP'
]
