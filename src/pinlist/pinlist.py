"""PinList: the pin-action facade over one source collection.

Owns the PinSet (the only state that survives across reactive cycles),
the identity tables for the current cycle, and the view cache. Every
action absorbs bad input as a no-op and returns whether the PinSet
changed.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Callable, Iterator, Sequence
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Any, Generic, Optional, TypeVar

from pydantic import ValidationError

from pinlist.exceptions import PinListConfigError
from pinlist.identity import IdentityResolver, IdRef, ItemOrId, is_item_id
from pinlist.models.config import ItemId, PinListConfig
from pinlist.models.events import PinEvent
from pinlist.partition import PinnedViews, ViewCache
from pinlist.pinset import PinSet

logger = logging.getLogger(__name__)

T = TypeVar("T")


class PinList(Generic[T]):
    """Pinned/unpinned partition of an ordered collection.

    Example::

        from pinlist import PinList

        pins = PinList(items, lambda item: item["id"], max_pinned_items=20)
        pins.pin("item-5")
        pins.reorder(0, 1)
        for item in pins.sorted_items:
            ...

    Options are given either as a :class:`PinListConfig` via ``config=``
    or as keyword arguments named after its fields, never both.

    ``initial_pinned_ids`` are truncated to capacity and deduplicated
    silently. Construction does not call ``on_pinned_items_change``
    unless ``notify_on_init`` is set, in which case it is called once
    with the pinned items of the normalised PinSet.

    Single-writer: a PinList must not be mutated from several threads.
    """

    def __init__(
        self,
        items: Sequence[T],
        get_item_id: Callable[[T], ItemId],
        *,
        config: Optional[PinListConfig] = None,
        **options: Any,
    ) -> None:
        if not callable(get_item_id):
            raise PinListConfigError(
                f"identity function must be callable, got {type(get_item_id).__name__}",
                option="get_item_id",
            )
        if config is not None and options:
            raise PinListConfigError(
                f"pass options either via config= or as keywords, not both "
                f"(got {', '.join(sorted(options))})",
                option="config",
            )
        if config is None:
            try:
                config = PinListConfig(**options)
            except ValidationError as exc:
                first = exc.errors()[0]
                option = ".".join(str(p) for p in first["loc"]) or None
                raise PinListConfigError(first["msg"], option=option) from exc

        self._config = config
        self._resolver: IdentityResolver[T] = IdentityResolver(items, get_item_id)
        self._pin_set = PinSet.from_ids(
            config.initial_pinned_ids, config.max_pinned_items
        )
        self._cache: ViewCache[T] = ViewCache()
        self._events: deque[PinEvent] = deque(maxlen=config.event_log_size)
        self._batch_depth = 0
        self._batch_dirty = False
        if config.notify_on_init:
            self._notify()

    def __repr__(self) -> str:
        return (
            f"PinList(items={len(self._resolver)}, "
            f"pinned={list(self._pin_set.ids)!r}, "
            f"max_pinned_items={self._config.max_pinned_items})"
        )

    def __len__(self) -> int:
        return len(self._resolver)

    # ------------------------------------------------------------------
    # Inputs and state
    # ------------------------------------------------------------------

    @property
    def config(self) -> PinListConfig:
        return self._config

    @property
    def items(self) -> tuple[T, ...]:
        """Snapshot of the source taken at the start of the current cycle."""
        return self._resolver.items

    @property
    def get_item_id(self) -> Callable[[T], ItemId]:
        return self._resolver.get_item_id

    @property
    def resolver(self) -> IdentityResolver[T]:
        return self._resolver

    @property
    def pin_set(self) -> PinSet:
        return self._pin_set

    @property
    def pinned_ids(self) -> tuple[ItemId, ...]:
        """Pinned ids in pin order, stale ids included."""
        return self._pin_set.ids

    @property
    def stale_ids(self) -> tuple[ItemId, ...]:
        """Pinned ids with no item in the current source."""
        return tuple(i for i in self._pin_set if not self._resolver.contains_id(i))

    @property
    def pinned_count(self) -> int:
        """Size of the PinSet, stale ids included."""
        return len(self._pin_set)

    @property
    def max_pinned_items(self) -> Optional[int]:
        return self._config.max_pinned_items

    @property
    def is_full(self) -> bool:
        """Whether the capacity bound is reached."""
        limit = self._config.max_pinned_items
        return limit is not None and len(self._pin_set) >= limit

    @property
    def events(self) -> tuple[PinEvent, ...]:
        """Most recent action records, oldest first."""
        return tuple(self._events)

    def set_items(
        self,
        items: Sequence[T],
        get_item_id: Optional[Callable[[T], ItemId]] = None,
    ) -> None:
        """Start a new cycle with a new source and/or identity function.

        The PinSet is kept as-is: pins whose items left the source go
        stale, and stale pins whose items came back reappear at their
        recorded position. Passing the same list object after editing it
        in place also starts a new cycle. Notifies when the pinned view
        changed and ``notify_on_items_change`` is set.
        """
        if get_item_id is None:
            get_item_id = self._resolver.get_item_id
        elif not callable(get_item_id):
            raise PinListConfigError(
                f"identity function must be callable, got {type(get_item_id).__name__}",
                option="get_item_id",
            )
        before = self._views().pinned
        self._resolver = IdentityResolver(items, get_item_id)
        after = self._views().pinned
        changed = not _same_items(before, after)
        self._record(
            "set_items",
            None,
            applied=changed,
            reason=None if changed else "pinned_view_unchanged",
        )
        if changed and self._config.notify_on_items_change:
            self._notify()

    # ------------------------------------------------------------------
    # Derived views
    # ------------------------------------------------------------------

    def _views(self) -> PinnedViews[T]:
        return self._cache.get(self._resolver, self._pin_set)

    @property
    def views(self) -> PinnedViews[T]:
        """All three projections of the current state."""
        return self._views()

    @property
    def pinned_items(self) -> list[T]:
        """Pinned items in pin order; stale pins are skipped."""
        return list(self._views().pinned)

    @property
    def unpinned_items(self) -> list[T]:
        """Unpinned items in source order."""
        return list(self._views().unpinned)

    @property
    def sorted_items(self) -> list[T]:
        """Pinned items followed by unpinned items."""
        return list(self._views().sorted)

    # ------------------------------------------------------------------
    # Pin actions
    # ------------------------------------------------------------------

    def is_pinned(self, item_or_id: ItemOrId) -> bool:
        """Whether the resolved id is in the PinSet. Stale pins count."""
        return self._resolver.resolve(item_or_id) in self._pin_set

    status = is_pinned

    def pin(self, item_or_id: ItemOrId) -> bool:
        """Append an item's id to the end of the pin order.

        No-op when the reference is an id with no current item, when the
        item is already pinned, or when the capacity bound is reached
        (existing pins are never evicted).
        """
        item = self._resolver.lookup_item(item_or_id)
        if item is None:
            self._record("pin", _raw_id(item_or_id), applied=False, reason="unresolved")
            return False
        item_id = self._resolver.resolve(item_or_id)
        if item_id in self._pin_set:
            self._record("pin", item_id, applied=False, reason="already_pinned")
            return False
        if self.is_full:
            self._record("pin", item_id, applied=False, reason="capacity")
            return False
        return self._apply("pin", item_id, self._pin_set.add(item_id))

    def unpin(self, item_or_id: ItemOrId) -> bool:
        """Remove an item's id, keeping the order of the remaining pins."""
        item_id = self._resolver.resolve(item_or_id)
        if item_id not in self._pin_set:
            self._record("unpin", item_id, applied=False, reason="not_pinned")
            return False
        return self._apply("unpin", item_id, self._pin_set.remove(item_id))

    def toggle(self, item_or_id: ItemOrId) -> bool:
        """Unpin if pinned at call time, otherwise pin."""
        if self.is_pinned(item_or_id):
            return self.unpin(item_or_id)
        return self.pin(item_or_id)

    def clear(self) -> bool:
        """Remove every pin, stale ones included."""
        if not self._pin_set:
            self._record("clear", None, applied=False, reason="empty")
            return False
        return self._apply("clear", None, self._pin_set.clear())

    def reorder(self, from_index: int, to_index: int) -> bool:
        """Move the pin at *from_index* to *to_index* of the pin order.

        Indices address the PinSet order, stale pins included. The pin is
        removed first and reinserted into the shortened order. Negative
        or out-of-range indices are a no-op.
        """
        size = len(self._pin_set)
        if not (0 <= from_index < size and 0 <= to_index < size):
            logger.debug(
                "reorder(%d, %d) out of range for %d pins", from_index, to_index, size
            )
            self._record("reorder", None, applied=False, reason="out_of_range")
            return False
        moved_id = self._pin_set[from_index]
        new_pin_set = self._pin_set.move(from_index, to_index)
        if new_pin_set is self._pin_set:
            self._record("reorder", moved_id, applied=False, reason="same_position")
            return False
        return self._apply("reorder", moved_id, new_pin_set)

    @contextmanager
    def batch(self) -> Iterator[PinList[T]]:
        """Group several actions into a single notification.

        Views are recomputed and the change callback fires at most once,
        when the outermost batch exits, from the final PinSet. Nested
        batches join the outer one.
        """
        self._batch_depth += 1
        try:
            yield self
        finally:
            self._batch_depth -= 1
            if self._batch_depth == 0 and self._batch_dirty:
                self._batch_dirty = False
                self._notify()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _apply(self, operation: str, item_id: Optional[ItemId], new_pin_set: PinSet) -> bool:
        """Swap in *new_pin_set* and notify. Returns whether it changed."""
        if new_pin_set == self._pin_set:
            self._record(operation, item_id, applied=False, reason="unchanged")
            return False
        self._pin_set = new_pin_set
        self._record(operation, item_id, applied=True)
        self._notify()
        return True

    def _notify(self) -> None:
        callback = self._config.on_pinned_items_change
        if callback is None:
            return
        if self._batch_depth > 0:
            self._batch_dirty = True
            return
        pinned = list(self._views().pinned)
        try:
            callback(pinned)
        except Exception:
            logger.warning(
                "on_pinned_items_change callback failed (%d pinned items)",
                len(pinned),
                exc_info=True,
            )

    def _record(
        self,
        operation: str,
        item_id: Optional[ItemId],
        *,
        applied: bool,
        reason: Optional[str] = None,
    ) -> None:
        if not applied:
            logger.debug("%s(%r) skipped: %s", operation, item_id, reason)
        if self._events.maxlen == 0:
            return
        self._events.append(
            PinEvent(
                timestamp=datetime.now(timezone.utc),
                operation=operation,
                item_id=item_id,
                applied=applied,
                reason=reason,
            )
        )


def _raw_id(item_or_id: Any) -> Optional[ItemId]:
    """Best-effort id for an unresolved reference, for event records."""
    if isinstance(item_or_id, IdRef):
        return item_or_id.id
    return item_or_id if is_item_id(item_or_id) else None


def _same_items(a: Sequence[Any], b: Sequence[Any]) -> bool:
    """Element-wise identity comparison; items need not define __eq__."""
    return len(a) == len(b) and all(x is y for x, y in zip(a, b))
