"""Stale Pins Across Source Updates

A pin on an item that leaves the source is kept, just hidden. When the
item comes back it shows up in its old spot in the pinned section,
without pinning it again.

Demonstrates: set_items(), stale_ids, pinned_ids vs pinned_items,
              events (the action log)
"""

from pinlist import PinList


def show(pins):
    visible = [item["id"] for item in pins.pinned_items]
    print(f"  pinned_ids={pins.pinned_ids}  visible={visible}  stale={pins.stale_ids}")


def main():
    inbox = [{"id": n, "subject": f"Message {n}"} for n in range(1, 6)]
    pins = PinList(inbox, lambda msg: msg["id"], initial_pinned_ids=[4, 2, 5])
    print("Initial inbox:")
    show(pins)

    # --- Message 2 is archived: its pin goes stale ---

    pins.set_items([msg for msg in inbox if msg["id"] != 2])
    print("\nAfter archiving message 2:")
    show(pins)

    # --- Message 2 is restored: back between 4 and 5 ---

    pins.set_items(inbox)
    print("\nAfter restoring message 2:")
    show(pins)

    # --- Pinning an id that is not in the source does nothing ---

    pins.pin(99)
    print("\nAction log:")
    for event in pins.events:
        status = "applied" if event.applied else f"skipped ({event.reason})"
        print(f"  {event.operation:<10} {event.item_id!s:<5} {status}")


if __name__ == "__main__":
    main()
