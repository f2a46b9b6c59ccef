"""
Language-specific builder generators.
"""

from .java import JavaBuilderGenerator

__all__ = ["JavaBuilderGenerator"]
