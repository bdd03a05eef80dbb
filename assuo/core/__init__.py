"""
Core module
Contains the document model, the offset-mapping patch engine and the error types
"""

from .errors import AssuoError, DocumentError, ResolutionError, PatchError, OutOfBounds, Underflow

__all__ = ['AssuoError', 'DocumentError', 'ResolutionError', 'PatchError', 'OutOfBounds', 'Underflow']
