"""Identity resolution between items and their ids.

Builds the forward (item -> id) and reverse (id -> item) tables for one
source sequence in a single pass, and resolves the dual-mode
``item_or_id`` argument that every pin action accepts.

Items are keyed in the forward table by object identity, so unhashable
records such as plain dicts work. The resolver keeps a reference to the
source sequence, which keeps every keyed object alive for the lifetime
of the tables.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

from pinlist.models.config import ItemId

logger = logging.getLogger(__name__)

T = TypeVar("T")

_MISSING = object()


@dataclass(frozen=True)
class ItemRef(Generic[T]):
    """Explicitly tagged item reference.

    Forces the item interpretation of the wrapped value, even when the
    item itself is a ``str`` or number.
    """

    item: T


@dataclass(frozen=True)
class IdRef:
    """Explicitly tagged id reference."""

    id: ItemId


ItemOrId = Union[T, ItemId, ItemRef, IdRef]


def is_item_id(value: object) -> bool:
    """Whether *value* has the runtime shape of an ItemId.

    ``str``, ``int`` and ``float`` qualify; ``bool`` does not.
    """
    return isinstance(value, (str, int, float)) and not isinstance(value, bool)


class IdentityResolver(Generic[T]):
    """Forward and reverse lookup tables for one source sequence.

    Built fresh for every reactive cycle; never persisted. The source is
    snapshotted, so later in-place edits to the caller's list only show
    up in the next cycle. Holding the items also keeps the ``id(item)``
    keys of the forward table valid.
    """

    def __init__(
        self,
        items: Sequence[T],
        get_item_id: Callable[[T], ItemId],
    ) -> None:
        self._items: tuple[T, ...] = tuple(items)
        self._get_item_id = get_item_id
        self._forward: dict[int, ItemId] = {}
        self._reverse: dict[ItemId, T] = {}
        for item in self._items:
            item_id = get_item_id(item)
            self._forward[id(item)] = item_id
            self._reverse[item_id] = item
        if len(self._reverse) < len(self._forward):
            logger.debug(
                "Duplicate ids in source: %d items, %d distinct ids",
                len(self._forward),
                len(self._reverse),
            )

    @property
    def items(self) -> tuple[T, ...]:
        return self._items

    @property
    def get_item_id(self) -> Callable[[T], ItemId]:
        return self._get_item_id

    def __len__(self) -> int:
        return len(self._items)

    def id_of(self, item: T) -> ItemId:
        """Id of an item, from the forward table or the identity function.

        Items not in the table (supplied out-of-band, e.g. already removed
        from the source) fall back to a direct identity-function call.
        """
        item_id = self._forward.get(id(item), _MISSING)
        if item_id is _MISSING:
            return self._get_item_id(item)
        return item_id

    def resolve(self, item_or_id: ItemOrId) -> ItemId:
        """Resolve an item, an id or a tagged reference to an id.

        Id-shaped arguments are returned as-is. When items are themselves
        strings or numbers this means the id interpretation always wins;
        wrap such items in :class:`ItemRef` to force item interpretation.
        """
        if isinstance(item_or_id, IdRef):
            return item_or_id.id
        if isinstance(item_or_id, ItemRef):
            return self.id_of(item_or_id.item)
        if is_item_id(item_or_id):
            return item_or_id
        return self.id_of(item_or_id)

    def lookup_item(self, item_or_id: ItemOrId) -> Any:
        """Resolve to an item, or None when an id has no current item.

        Non-id arguments are items already and are returned as-is.
        """
        if isinstance(item_or_id, ItemRef):
            return item_or_id.item
        if isinstance(item_or_id, IdRef):
            return self._reverse.get(item_or_id.id)
        if is_item_id(item_or_id):
            return self._reverse.get(item_or_id)
        return item_or_id

    def contains_id(self, item_id: ItemId) -> bool:
        """Whether some item in the current source carries *item_id*."""
        return item_id in self._reverse

    def item_for_id(self, item_id: ItemId) -> Any:
        """Current item for *item_id*, or None."""
        return self._reverse.get(item_id)
