"""Tests for the document model."""

import pytest
from pydantic import ValidationError

from assuo.core.document import (
    Direction, Document, InsertEdit, RemoveEdit, TextSource, BytesSource, PatchFileSource
)


def test_document_defaults_to_no_edits() -> None:
    document = Document(base=TextSource(text="Hello!"))
    assert document.edits == []
    assert document.base.kind == "text"


def test_document_is_immutable() -> None:
    document = Document(base=TextSource(text="Hello!"))
    with pytest.raises(ValidationError):
        document.base = BytesSource(data=b"x")


def test_edits_reject_negative_offsets() -> None:
    with pytest.raises(ValidationError):
        InsertEdit(way=Direction.AFTER, spot=-1, source=TextSource(text="x"))
    with pytest.raises(ValidationError):
        RemoveEdit(way=Direction.BEFORE, spot=0, count=-2)


def test_document_validates_tagged_payload() -> None:
    document = Document.model_validate({
        "base": {"kind": "assuo-file", "path": "inner.toml"},
        "edits": [
            {"do": "remove", "way": "pre", "spot": 3, "count": 1},
            {"do": "insert", "way": "post", "spot": 0, "source": {"kind": "text", "text": "!"}},
        ],
    })
    assert isinstance(document.base, PatchFileSource)
    assert isinstance(document.edits[0], RemoveEdit)
    assert document.edits[0].way is Direction.BEFORE
    assert isinstance(document.edits[1], InsertEdit)
    assert document.edits[1].source == TextSource(text="!")


def test_document_round_trips_through_dump() -> None:
    document = Document(
        base=BytesSource(data=b"\x00\x01"),
        edits=[RemoveEdit(way=Direction.AFTER, spot=0, count=1)],
    )
    assert Document.model_validate(document.model_dump()) == document
