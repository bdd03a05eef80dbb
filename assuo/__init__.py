"""
assuo

Applies insert/remove edits addressed by byte offsets into an unmodified
base source.
"""

from .config import AssuoConfig
from .core.document import Document
from .core.errors import AssuoError, DocumentError, ResolutionError, PatchError, OutOfBounds, Underflow
from .core.patch import PatchEngine
from .runtime import SourceResolver, PatchWorkflow

__all__ = [
    'AssuoConfig', 'Document', 'PatchEngine', 'SourceResolver', 'PatchWorkflow',
    'AssuoError', 'DocumentError', 'ResolutionError', 'PatchError', 'OutOfBounds', 'Underflow'
]
