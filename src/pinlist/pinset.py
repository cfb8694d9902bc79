"""Ordered set of pinned ids.

PinSet is immutable: every mutator returns a new PinSet, or the same
instance when the requested change would be a no-op. Holders swap the
whole value in one assignment, so no partially-updated state is ever
observable.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Optional

from pinlist.models.config import ItemId


class PinSet:
    """Ordered, duplicate-free sequence of ids with O(1) membership."""

    __slots__ = ("_ids", "_members")

    def __init__(self, ids: Iterable[ItemId] = ()) -> None:
        # dict preserves first-occurrence order and drops duplicates
        members = dict.fromkeys(ids)
        self._ids: tuple[ItemId, ...] = tuple(members)
        self._members = frozenset(self._ids)

    @classmethod
    def from_ids(
        cls, ids: Iterable[ItemId], capacity: Optional[int] = None
    ) -> PinSet:
        """Seed a PinSet from a caller-supplied id list.

        The list is truncated to *capacity* first and deduplicated after,
        so duplicates inside the first *capacity* entries leave the set
        smaller than the bound.
        """
        ids = list(ids)
        if capacity is not None:
            ids = ids[:capacity]
        return cls(ids)

    @property
    def ids(self) -> tuple[ItemId, ...]:
        return self._ids

    def __contains__(self, item_id: object) -> bool:
        try:
            return item_id in self._members
        except TypeError:
            # unhashable values are never ids
            return False

    def __len__(self) -> int:
        return len(self._ids)

    def __iter__(self) -> Iterator[ItemId]:
        return iter(self._ids)

    def __getitem__(self, index: int) -> ItemId:
        return self._ids[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PinSet):
            return NotImplemented
        return self._ids == other._ids

    def __hash__(self) -> int:
        return hash(self._ids)

    def __repr__(self) -> str:
        return f"PinSet({list(self._ids)!r})"

    def index(self, item_id: ItemId) -> int:
        """Position of *item_id* in pin order. Raises ValueError if absent."""
        return self._ids.index(item_id)

    # ------------------------------------------------------------------
    # Mutators (copy-on-write)
    # ------------------------------------------------------------------

    def add(self, item_id: ItemId) -> PinSet:
        """Append *item_id* at the tail. No-op if already present."""
        if item_id in self._members:
            return self
        return PinSet(self._ids + (item_id,))

    def remove(self, item_id: ItemId) -> PinSet:
        """Remove *item_id*, keeping the relative order of the rest."""
        if item_id not in self._members:
            return self
        return PinSet(i for i in self._ids if i != item_id)

    def move(self, from_index: int, to_index: int) -> PinSet:
        """Move one id with splice semantics.

        The id at *from_index* is removed first, then inserted at
        *to_index* of the shortened sequence. Negative or out-of-range
        indices are a no-op, as is moving an id onto its own position.
        """
        size = len(self._ids)
        if not (0 <= from_index < size and 0 <= to_index < size):
            return self
        if from_index == to_index:
            return self
        ids = list(self._ids)
        moved = ids.pop(from_index)
        ids.insert(to_index, moved)
        return PinSet(ids)

    def clear(self) -> PinSet:
        """Empty PinSet."""
        if not self._ids:
            return self
        return PinSet()
