"""
Offset-mapping patch engine

Applies resolved edits to a base buffer. Spots always refer to offsets in the
original base, so alongside the buffer the engine keeps an OffsetMap that says
which original offsets currently live at each buffer position.
"""
import logging
from typing import FrozenSet, List, Sequence

from assuo.core.document.models import Direction
from assuo.core.errors import OutOfBounds, PatchError, Underflow
from .schema import ResolvedDocument, ResolvedEdit, ResolvedInsert, ResolvedRemove

logger = logging.getLogger(__name__)

SENTINEL: FrozenSet[int] = frozenset()


class OffsetMap:
    """
    Original-offset groups, one per live buffer position.

    groups[i] is the set of original offsets that resolve to buffer
    position i. Inserted bytes get the empty sentinel group, so nothing
    addresses them directly. One extra trailing group stands for the
    end-of-buffer boundary (position len(buffer)); it starts out empty and
    only collects offsets whose bytes were removed from the tail.
    """

    def __init__(self, length: int):
        self.groups: List[FrozenSet[int]] = [frozenset((i,)) for i in range(length)]
        self.groups.append(SENTINEL)

    def __len__(self) -> int:
        """Number of byte positions (the end boundary is not counted)"""
        return len(self.groups) - 1

    def locate(self, spot: int) -> int:
        """Return the buffer position the original offset `spot` resolves to"""
        for position, group in enumerate(self.groups):
            if spot in group:
                return position
        raise OutOfBounds(f"spot {spot} is not an addressable offset of the original source", spot)

    def insert(self, position: int, length: int):
        """Open `length` unaddressable positions at `position`"""
        self.groups[position:position] = [SENTINEL] * length

    def remove(self, start: int, count: int):
        """
        Drop positions [start, start + count).

        Their offsets are merged into the group of the position right after
        the range (possibly the end boundary), which becomes position `start`.
        """
        end = start + count
        merged = SENTINEL.union(*self.groups[start:end + 1])
        self.groups[start:end + 1] = [merged]


class PatchEngine:
    """
    Sequential patch applier.

    Usage:
        engine = PatchEngine()
        patched = engine.apply(b"Hello!", [ResolvedInsert(way="post", spot=4, data=b", World")])
    """

    def apply(self, base: bytes, edits: Sequence[ResolvedEdit]) -> bytes:
        """
        Apply `edits` in order to `base`

        Args:
            base: Original bytes every spot refers to
            edits: Resolved edits

        Returns:
            Patched bytes

        Raises:
            OutOfBounds: A spot can't be located, or a removal runs past the end
            Underflow: A 'pre' removal starts before position 0
        """
        buffer = bytearray(base)
        offsets = OffsetMap(len(buffer))

        for index, edit in enumerate(edits):
            try:
                if isinstance(edit, ResolvedInsert):
                    self._insert(buffer, offsets, edit)
                elif isinstance(edit, ResolvedRemove):
                    self._remove(buffer, offsets, edit)
                else:
                    raise TypeError(f"Unknown edit type: {type(edit).__name__}")
            except PatchError as e:
                e.edit_index = index
                raise

        return bytes(buffer)

    def apply_document(self, document: ResolvedDocument) -> bytes:
        """Apply a fully resolved document"""
        return self.apply(document.base, document.edits)

    def _insert(self, buffer: bytearray, offsets: OffsetMap, edit: ResolvedInsert):
        position = offsets.locate(edit.spot)
        if edit.way == Direction.AFTER:
            # nothing follows the end boundary
            position = min(position + 1, len(buffer))

        logger.debug(f"insert {len(edit.data)} byte(s) at position {position} (spot {edit.spot}, {edit.way.value})")
        buffer[position:position] = edit.data
        offsets.insert(position, len(edit.data))

    def _remove(self, buffer: bytearray, offsets: OffsetMap, edit: ResolvedRemove):
        position = offsets.locate(edit.spot)
        if edit.count == 0:
            return

        if edit.way == Direction.AFTER:
            start = position + 1
        else:
            start = position - edit.count
            if start < 0:
                raise Underflow(
                    f"cannot remove {edit.count} byte(s) before spot {edit.spot}: only {position} available",
                    edit.spot, edit.count
                )

        end = start + edit.count
        if end > len(buffer):
            raise OutOfBounds(
                f"cannot remove {edit.count} byte(s) after spot {edit.spot}: only {max(len(buffer) - start, 0)} available",
                edit.spot
            )

        logger.debug(f"remove positions [{start}, {end}) (spot {edit.spot}, {edit.way.value})")
        del buffer[start:end]
        offsets.remove(start, edit.count)
