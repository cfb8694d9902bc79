"""pinlist: pinned/unpinned partitions of ordered collections.

Keep a user-ordered set of pinned items on top of any ordered sequence,
keyed by a caller-supplied identity function, with an optional capacity
bound and a change callback for persistence.
"""

from pinlist._version import __version__

# Core entry point
from pinlist.pinlist import PinList

# Components
from pinlist.identity import IdentityResolver, IdRef, ItemRef, is_item_id
from pinlist.pinset import PinSet
from pinlist.partition import PinnedViews, ViewCache, partition

# Configuration and records
from pinlist.models.config import ItemId, PinListConfig
from pinlist.models.events import PinEvent

# Exceptions
from pinlist.exceptions import PinListError, PinListConfigError

__all__ = [
    "__version__",
    "PinList",
    # Components
    "IdentityResolver",
    "IdRef",
    "ItemRef",
    "is_item_id",
    "PinSet",
    "PinnedViews",
    "ViewCache",
    "partition",
    # Config
    "ItemId",
    "PinListConfig",
    "PinEvent",
    # Exceptions
    "PinListError",
    "PinListConfigError",
]
