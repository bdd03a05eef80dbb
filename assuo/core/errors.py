"""
Assuo errors

Every failure raised while loading, resolving or applying a patch document
derives from AssuoError. Nothing is retried; the first error aborts the run.
"""
from typing import Optional


class AssuoError(Exception):
    """Base class for all assuo failures"""


class DocumentError(AssuoError):
    """Malformed patch document (missing key, wrong value kind, unknown token)"""


class ResolutionError(AssuoError):
    """A source could not be turned into bytes"""

    def __init__(self, message: str, reference: Optional[str] = None):
        super().__init__(message)
        self.reference = reference


class PatchError(AssuoError):
    """An edit could not be applied to the live buffer"""

    def __init__(self, message: str, spot: int, edit_index: Optional[int] = None):
        super().__init__(message)
        self.spot = spot
        self.edit_index = edit_index

    def __str__(self) -> str:
        message = super().__str__()
        if self.edit_index is None:
            return message
        return f"patch #{self.edit_index}: {message}"


class OutOfBounds(PatchError):
    """Spot is not addressable in the current offset map"""


class Underflow(PatchError):
    """A 'pre' removal reaches before the start of the buffer"""

    def __init__(self, message: str, spot: int, count: int, edit_index: Optional[int] = None):
        super().__init__(message, spot, edit_index)
        self.count = count
