"""
Runtime module
Source resolution and the end-to-end patch workflow
"""

from .resolver import SourceResolver
from .patch_workflow import PatchWorkflow

__all__ = ['SourceResolver', 'PatchWorkflow']
