"""
Application controller for arc-blog.
"""

from .application import ArcBlogApp

__all__ = ['ArcBlogApp']
