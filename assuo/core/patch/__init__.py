"""
Patch module

Resolved edit schema and the offset-mapping engine that applies it.
"""
from .schema import ResolvedInsert, ResolvedRemove, ResolvedEdit, ResolvedDocument
from .engine import OffsetMap, PatchEngine

__all__ = [
    'ResolvedInsert', 'ResolvedRemove', 'ResolvedEdit', 'ResolvedDocument',
    'OffsetMap', 'PatchEngine'
]
