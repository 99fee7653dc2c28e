"""
Configuration management components for the arc-blog application.
"""

from .logging_config import setup_logging, get_logger
from .error_handling import ErrorHandler, ArcBlogError
from .config_manager import ConfigManager

__all__ = ['setup_logging', 'get_logger', 'ErrorHandler', 'ArcBlogError', 'ConfigManager']
