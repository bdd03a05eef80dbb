"""
Resolved patch schema

Edits whose sources have already been turned into bytes. The engine only
ever sees these; a document is fully resolved before any edit is applied.
"""
from typing import Annotated, List, Literal, Union
from pydantic import BaseModel, Field

from assuo.core.document.models import Direction


class ResolvedInsert(BaseModel):
    """Insert edit with concrete bytes"""
    do: Literal["insert"] = "insert"
    way: Direction = Field(..., description="Side of the spot to insert on")
    spot: int = Field(..., description="Byte offset in the original base")
    data: bytes = Field(..., description="Bytes to insert")

    class Config:
        frozen = True


class ResolvedRemove(BaseModel):
    """Remove edit (nothing to resolve, carried over as-is)"""
    do: Literal["remove"] = "remove"
    way: Direction = Field(..., description="Side of the spot to remove from")
    spot: int = Field(..., description="Byte offset in the original base")
    count: int = Field(..., ge=0, description="Number of bytes to remove")

    class Config:
        frozen = True


ResolvedEdit = Annotated[Union[ResolvedInsert, ResolvedRemove], Field(discriminator="do")]


class ResolvedDocument(BaseModel):
    """Document with its base and every insert source resolved to bytes"""
    base: bytes = Field(..., description="Resolved base bytes")
    edits: List[ResolvedEdit] = Field(default_factory=list, description="Resolved edits, in order")

    class Config:
        frozen = True
