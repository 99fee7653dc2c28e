"""
Command-line interface components for the arc-blog application.
"""

from .interfaces import CLIInterface, ArgumentValidator
from .output import OutputFormat, OutputOptions
from .main_cli import ArcBlogCLI

__all__ = ['CLIInterface', 'ArgumentValidator', 'OutputFormat', 'OutputOptions', 'ArcBlogCLI']
