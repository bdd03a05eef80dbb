"""
TOML Importer
Maps a TOML assuo patch file to the Document model

    [source]
    text = "Hello!"

    [[patch]]
    do = "insert"
    way = "post"
    spot = 4
    source = { text = ", World" }
"""
import tomllib
from typing import Any, Dict, List

from pydantic import ValidationError

from assuo.core.document.models import (
    Direction, Document, Edit, InsertEdit, RemoveEdit, Source,
    BytesSource, TextSource, UrlSource, FileSource, PatchUrlSource, PatchFileSource
)
from assuo.core.errors import DocumentError

# source key -> model (bytes is handled separately, it takes an array)
STRING_SOURCES = {
    "text": lambda value: TextSource(text=value),
    "url": lambda value: UrlSource(url=value),
    "file": lambda value: FileSource(path=value),
    "assuo-url": lambda value: PatchUrlSource(url=value),
    "assuo-file": lambda value: PatchFileSource(path=value),
}

WAYS = {
    "pre": Direction.BEFORE,
    "post": Direction.AFTER,
}


def _is_integer(value: Any) -> bool:
    # TOML booleans come back as bool, which is an int subclass
    return isinstance(value, int) and not isinstance(value, bool)


class TomlImporter:
    """Imports TOML assuo patch files into Document objects"""

    def load_bytes(self, data: bytes) -> Document:
        """Decode UTF-8 `data` and import it"""
        try:
            text = data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DocumentError(f"assuo file isn't valid UTF-8: {e}") from e
        return self.load_text(text)

    def load_text(self, text: str) -> Document:
        """
        Parse TOML text

        Args:
            text: TOML document

        Returns:
            Document

        Raises:
            DocumentError: TOML syntax error or a malformed document
        """
        try:
            table = tomllib.loads(text)
        except tomllib.TOMLDecodeError as e:
            raise DocumentError(f"invalid TOML: {e}") from e
        return self.load_table(table)

    def load_table(self, table: Dict[str, Any]) -> Document:
        """Map an already-decoded table to a Document"""
        if not isinstance(table, dict):
            raise DocumentError("didn't get a table as payload")
        if "source" not in table:
            raise DocumentError("didn't get key 'source'")

        base = self._convert_source(table["source"])

        patches = table.get("patch", [])
        if not isinstance(patches, list):
            raise DocumentError("expected 'patch' to be an array of tables")

        edits = [self._convert_edit(patch, index) for index, patch in enumerate(patches)]

        try:
            return Document(base=base, edits=edits)
        except ValidationError as e:
            raise DocumentError(str(e)) from e

    def _convert_source(self, value: Any) -> Source:
        """Convert a single-key source table"""
        if not isinstance(value, dict):
            raise DocumentError("source is not a table")
        if len(value) != 1:
            raise DocumentError(f"source must have exactly 1 key, got {len(value)}")

        name, inner = next(iter(value.items()))

        if isinstance(inner, list):
            if name != "bytes":
                raise DocumentError("got array but didn't get bytes")
            return BytesSource(data=self._convert_bytes(inner))

        if isinstance(inner, str):
            if name not in STRING_SOURCES:
                raise DocumentError("didn't get key text/url/file/assuo-url/assuo-file")
            return STRING_SOURCES[name](inner)

        raise DocumentError(f"invalid value for source key '{name}'")

    def _convert_bytes(self, array: List[Any]) -> bytes:
        for element in array:
            if not _is_integer(element):
                raise DocumentError("when reading bytes array, didn't get number in array")
            if not 0 <= element <= 255:
                raise DocumentError(f"byte {element} out of bounds [0, 255]")
        return bytes(array)

    def _convert_edit(self, patch: Any, index: int) -> Edit:
        """Convert one [[patch]] table"""
        if not isinstance(patch, dict):
            raise DocumentError(f"patch #{index}: didn't get a table")

        action = patch.get("do")
        if action is None:
            raise DocumentError(f"patch #{index}: didn't get key 'do' with insert or remove")
        if not isinstance(action, str):
            raise DocumentError(f"patch #{index}: expected string for action 'do'")
        action = action.lower()
        if action not in ("insert", "remove"):
            raise DocumentError(f"patch #{index}: expected either 'insert' or 'remove' for 'do'")

        way = patch.get("way")
        if way is None:
            raise DocumentError(f"patch #{index}: didn't get 'way'")
        if not isinstance(way, str):
            raise DocumentError(f"patch #{index}: didn't get string for way")
        if way not in WAYS:
            raise DocumentError(f"patch #{index}: didn't get 'pre' or 'post' for 'way'")

        spot = self._convert_count(patch, "spot", index)

        if action == "insert":
            if "source" not in patch:
                raise DocumentError(f"patch #{index}: expected source to be specified, it wasn't")
            source = self._convert_source(patch["source"])
            return InsertEdit(way=WAYS[way], spot=spot, source=source)

        count = self._convert_count(patch, "count", index)
        return RemoveEdit(way=WAYS[way], spot=spot, count=count)

    def _convert_count(self, patch: Dict[str, Any], key: str, index: int) -> int:
        """Read a non-negative integer field"""
        if key not in patch:
            raise DocumentError(f"patch #{index}: expected '{key}' to be specified, it wasn't")
        value = patch[key]
        if not _is_integer(value):
            raise DocumentError(f"patch #{index}: '{key}' wasn't an integer")
        if value < 0:
            raise DocumentError(f"patch #{index}: '{key}' must not be negative")
        return value
