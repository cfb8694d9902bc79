"""Pin action observability event."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from pinlist.models.config import ItemId


@dataclass(frozen=True)
class PinEvent:
    """A single pin-action record for observability.

    Attributes:
        timestamp: When the action ran.
        operation: The action name ("pin", "unpin", "clear", "reorder",
            "set_items"). toggle records the action it delegates to.
        item_id: The resolved id the action targeted, if any.
        applied: Whether the action took effect: the PinSet changed, or
            for "set_items", the pinned view changed.
        reason: Why a no-op was skipped (e.g. "already_pinned",
            "capacity", "unresolved", "not_pinned", "out_of_range").
    """

    timestamp: datetime
    operation: str
    item_id: Optional[ItemId] = None
    applied: bool = True
    reason: Optional[str] = None  # None when applied
