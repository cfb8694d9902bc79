"""Pin, Reorder, and Read the Views

Pin a few items out of a list, drag one of them to the top of the pinned
section, and read the three views. New pins always land at the end of
the pinned section; the unpinned section keeps the source order.

Demonstrates: pin() by id and by item, reorder(), toggle(),
              pinned_items / unpinned_items / sorted_items, is_pinned()
"""

from pinlist import PinList


def main():
    tasks = [
        {"id": "t1", "title": "Write release notes"},
        {"id": "t2", "title": "Fix login redirect"},
        {"id": "t3", "title": "Review dependency bumps"},
        {"id": "t4", "title": "Plan sprint"},
        {"id": "t5", "title": "Update onboarding doc"},
    ]

    pins = PinList(tasks, lambda task: task["id"])

    # --- Pin by id or by item; both resolve to the same id ---

    pins.pin("t4")
    pins.pin(tasks[1])
    print(f"Pinned ids: {pins.pinned_ids}")

    # --- Reorder the pinned section: move the last pin to the top ---

    pins.reorder(1, 0)
    print(f"After reorder(1, 0): {pins.pinned_ids}")

    # --- toggle() flips the current state ---

    pins.toggle("t5")
    pins.toggle("t4")
    print(f"After toggling t5 and t4: {pins.pinned_ids}")
    print(f"is_pinned('t4') = {pins.is_pinned('t4')}")

    print("\n=== Sorted view ===")
    for task in pins.sorted_items:
        marker = "*" if pins.is_pinned(task) else " "
        print(f"  {marker} {task['id']}  {task['title']}")

    print(f"\nUnpinned keep source order: {[t['id'] for t in pins.unpinned_items]}")


if __name__ == "__main__":
    main()
