"""
Document module

In-memory form of an assuo patch document: one base source plus an ordered
list of insert/remove edits.
"""
from .models import (
    Direction, Source, Edit, Document, InsertEdit, RemoveEdit,
    BytesSource, TextSource, UrlSource, FileSource, PatchUrlSource, PatchFileSource
)

__all__ = [
    'Direction', 'Source', 'Edit', 'Document', 'InsertEdit', 'RemoveEdit',
    'BytesSource', 'TextSource', 'UrlSource', 'FileSource', 'PatchUrlSource', 'PatchFileSource'
]
