"""View partitioning: pinned, unpinned and sorted projections.

Views are always recomputed from the current source and PinSet.
ViewCache memoizes the last result; a miss just recomputes, so callers
never depend on a hit for correctness.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, Optional, TypeVar

from pinlist.models.config import ItemId

if TYPE_CHECKING:
    from pinlist.identity import IdentityResolver
    from pinlist.pinset import PinSet

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class PinnedViews(Generic[T]):
    """The three derived projections of one (source, PinSet) state.

    Attributes:
        pinned: Items whose id is pinned, in pin order. Stale pins are
            skipped.
        unpinned: All other items, in source order.
        sorted: ``pinned + unpinned``.
    """

    pinned: tuple[T, ...] = ()
    unpinned: tuple[T, ...] = ()

    @property
    def sorted(self) -> tuple[T, ...]:
        return self.pinned + self.unpinned

    @property
    def pinned_count(self) -> int:
        return len(self.pinned)

    def __len__(self) -> int:
        return len(self.pinned) + len(self.unpinned)


def partition(resolver: IdentityResolver[T], pin_set: PinSet) -> PinnedViews[T]:
    """Split the resolver's source into pinned and unpinned views.

    First pass walks the source once and buckets each item by O(1) PinSet
    membership. Second pass walks the PinSet in pin order, picking each
    id's bucketed item, so pinned order follows the user's ordering while
    unpinned order follows the source.

    When several source items share a pinned id, the last one is shown.
    """
    bucket: dict[ItemId, Any] = {}
    unpinned: list[T] = []
    for item in resolver.items:
        item_id = resolver.id_of(item)
        if item_id in pin_set:
            bucket[item_id] = item
        else:
            unpinned.append(item)

    pinned = tuple(bucket[item_id] for item_id in pin_set if item_id in bucket)
    return PinnedViews(pinned=pinned, unpinned=tuple(unpinned))


class ViewCache(Generic[T]):
    """Single-entry memo of the last partition result.

    Keyed by the resolver object (one per reactive cycle) and the PinSet
    value. Any change to either recomputes.
    """

    def __init__(self) -> None:
        self._resolver: Optional[IdentityResolver[T]] = None
        self._pin_set: Optional[PinSet] = None
        self._views: Optional[PinnedViews[T]] = None
        self.hits = 0
        self.misses = 0

    def get(self, resolver: IdentityResolver[T], pin_set: PinSet) -> PinnedViews[T]:
        """Return views for (resolver, pin_set), recomputing on a miss."""
        if (
            self._views is not None
            and self._resolver is resolver
            and self._pin_set == pin_set
        ):
            self.hits += 1
            logger.debug("View cache hit (%d pinned)", len(pin_set))
            return self._views

        self.misses += 1
        views = partition(resolver, pin_set)
        self._resolver = resolver
        self._pin_set = pin_set
        self._views = views
        logger.debug(
            "View cache miss: partitioned %d items (%d pinned, %d unpinned)",
            len(resolver),
            len(views.pinned),
            len(views.unpinned),
        )
        return views

    def clear(self) -> None:
        """Drop the memoized entry."""
        self._resolver = None
        self._pin_set = None
        self._views = None
