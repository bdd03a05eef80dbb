"""
Document models

An assuo document has one base source and an ordered list of edits. Every
edit's `spot` is a byte offset into the ORIGINAL base, never into the buffer
as it looks after earlier edits.
"""
from typing import Annotated, List, Literal, Union
from pydantic import BaseModel, Field
from enum import Enum


class Direction(str, Enum):
    """Which side of a spot an edit acts on"""
    BEFORE = "pre"
    AFTER = "post"


class BytesSource(BaseModel):
    """Raw bytes, used as-is"""
    kind: Literal["bytes"] = "bytes"
    data: bytes = Field(..., description="Literal bytes")

    class Config:
        frozen = True


class TextSource(BaseModel):
    """Text, encoded as UTF-8"""
    kind: Literal["text"] = "text"
    text: str = Field(..., description="Literal text")

    class Config:
        frozen = True


class UrlSource(BaseModel):
    """Bytes fetched from a URL"""
    kind: Literal["url"] = "url"
    url: str = Field(..., description="URL to fetch")

    class Config:
        frozen = True


class FileSource(BaseModel):
    """Bytes read from a local file"""
    kind: Literal["file"] = "file"
    path: str = Field(..., description="Path to read")

    class Config:
        frozen = True


class PatchUrlSource(BaseModel):
    """Output of another assuo document fetched from a URL"""
    kind: Literal["assuo-url"] = "assuo-url"
    url: str = Field(..., description="URL of the nested assuo document")

    class Config:
        frozen = True


class PatchFileSource(BaseModel):
    """Output of another assuo document read from disk"""
    kind: Literal["assuo-file"] = "assuo-file"
    path: str = Field(..., description="Path of the nested assuo document")

    class Config:
        frozen = True


Source = Annotated[
    Union[BytesSource, TextSource, UrlSource, FileSource, PatchUrlSource, PatchFileSource],
    Field(discriminator="kind"),
]


class InsertEdit(BaseModel):
    """
    Insert resolved source bytes next to `spot`.

    Direction.BEFORE inserts right before the byte at `spot`,
    Direction.AFTER right after it.
    """
    do: Literal["insert"] = "insert"
    way: Direction = Field(..., description="Side of the spot to insert on")
    spot: int = Field(..., ge=0, description="Byte offset in the original base")
    source: Source = Field(..., description="Bytes to insert")

    class Config:
        frozen = True


class RemoveEdit(BaseModel):
    """
    Remove `count` bytes next to `spot`.

    Direction.BEFORE removes the `count` bytes preceding the spot,
    Direction.AFTER the `count` bytes following it. The byte at `spot`
    itself is never removed by this edit.
    """
    do: Literal["remove"] = "remove"
    way: Direction = Field(..., description="Side of the spot to remove from")
    spot: int = Field(..., ge=0, description="Byte offset in the original base")
    count: int = Field(..., ge=0, description="Number of bytes to remove")

    class Config:
        frozen = True


Edit = Annotated[Union[InsertEdit, RemoveEdit], Field(discriminator="do")]


class Document(BaseModel):
    """
    Assuo patch document

    All modifications are based off `base`; edits are applied in the order
    they are listed.
    """
    base: Source = Field(..., description="Source every spot refers to")
    edits: List[Edit] = Field(default_factory=list, description="Edits, applied in order")

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "base": {"kind": "text", "text": "Hello!"},
                "edits": [
                    {
                        "do": "insert",
                        "way": "post",
                        "spot": 4,
                        "source": {"kind": "text", "text": ", World"}
                    }
                ]
            }
        }
