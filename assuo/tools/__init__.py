"""
Tools module
I/O collaborators used while resolving sources
"""

from .source_client import SourceClient

__all__ = ['SourceClient']
