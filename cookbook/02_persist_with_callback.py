"""Persist Pins Through the Change Callback

pinlist never stores anything itself. Hand it the saved ids when you
build the list, and save the pinned ids from on_pinned_items_change.
Here a JSON file stands in for whatever storage the application uses.

Demonstrates: initial_pinned_ids, on_pinned_items_change, notify_on_init,
              max_pinned_items (pins past the bound are ignored), batch()
"""

import json
import tempfile
from pathlib import Path

from pinlist import PinList

FALLBACK_IDS = ["item-5", "item-10", "item-15"]


def load_pinned_ids(path: Path) -> list[str]:
    try:
        return json.loads(path.read_text())
    except (OSError, ValueError):
        return FALLBACK_IDS


def make_saver(path: Path):
    def save(pinned_items: list[dict]) -> None:
        path.write_text(json.dumps([item["id"] for item in pinned_items]))
        print(f"  saved {len(pinned_items)} pinned ids")

    return save


def main():
    items = [{"id": f"item-{i}", "name": f"Item {i}"} for i in range(1000)]
    store = Path(tempfile.mkdtemp()) / "pinned.json"

    # --- First session: nothing saved yet, fall back to defaults ---

    pins = PinList(
        items,
        lambda item: item["id"],
        initial_pinned_ids=load_pinned_ids(store),
        max_pinned_items=5,
        on_pinned_items_change=make_saver(store),
        notify_on_init=True,  # save the defaults right away
    )
    print(f"Session 1 starts with: {pins.pinned_ids}")

    # Several changes, one save
    with pins.batch():
        pins.pin("item-1")
        pins.pin("item-2")
        pins.pin("item-3")  # capacity is 5: ignored
        pins.unpin("item-10")
    print(f"Session 1 ends with: {pins.pinned_ids}")

    # --- Second session: picks up what the callback saved ---

    pins = PinList(
        items,
        lambda item: item["id"],
        initial_pinned_ids=load_pinned_ids(store),
        max_pinned_items=5,
        on_pinned_items_change=make_saver(store),
    )
    print(f"Session 2 starts with: {pins.pinned_ids}")


if __name__ == "__main__":
    main()
