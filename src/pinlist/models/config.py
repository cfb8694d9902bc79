"""Configuration model for pinlist.

PinListConfig holds the per-list options: the initial pins, the capacity
bound, the change callback, and observability settings.
"""

from __future__ import annotations

from typing import Any, Callable, Optional, Union

from pydantic import BaseModel, field_validator

# Identifier domain produced by the caller's identity function.
ItemId = Union[str, int, float]


class PinListConfig(BaseModel):
    """Per-list configuration.

    Example::

        from pinlist import PinList, PinListConfig
        config = PinListConfig(max_pinned_items=20, initial_pinned_ids=["a"])
        pins = PinList(items, lambda item: item["id"], config=config)
    """

    model_config = {"arbitrary_types_allowed": True, "frozen": True, "extra": "forbid"}

    initial_pinned_ids: tuple[ItemId, ...] = ()
    max_pinned_items: Optional[int] = None  # None = unbounded
    on_pinned_items_change: Optional[Callable[[list[Any]], None]] = None
    notify_on_items_change: bool = True
    notify_on_init: bool = False  # report the normalised initial pins once
    event_log_size: int = 100

    @field_validator("initial_pinned_ids", mode="before")
    @classmethod
    def _coerce_ids(cls, value: Any) -> tuple:
        if value is None:
            return ()
        if isinstance(value, (str, bytes)):
            raise ValueError("initial_pinned_ids must be a sequence of ids, not a string")
        ids = tuple(value)
        for item_id in ids:
            if isinstance(item_id, bool):
                raise ValueError(f"booleans are not valid ids: {item_id!r}")
        return ids

    @field_validator("max_pinned_items")
    @classmethod
    def _positive_capacity(cls, value: Optional[int]) -> Optional[int]:
        if value is not None and value <= 0:
            raise ValueError(f"must be a positive integer, got {value}")
        return value

    @field_validator("event_log_size")
    @classmethod
    def _non_negative_log(cls, value: int) -> int:
        if value < 0:
            raise ValueError(f"must be >= 0, got {value}")
        return value
