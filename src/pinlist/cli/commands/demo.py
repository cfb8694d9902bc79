"""pinlist demo -- pin items in a generated list and show the partition."""

from __future__ import annotations

import random
import time

import click

DEFAULT_PINS = ("item-5", "item-10", "item-15")


def generate_items(count: int) -> list[dict]:
    """Build ``item-0 .. item-{count-1}`` records."""
    return [
        {
            "id": f"item-{i}",
            "name": f"Item {i}",
            "description": f"This is the description for item {i}",
        }
        for i in range(count)
    ]


@click.command()
@click.option("--count", type=click.IntRange(min=0), default=1_000, show_default=True, help="Number of generated items.")
@click.option("--max-pinned", type=click.IntRange(min=1), default=20, show_default=True, help="Capacity bound on pins.")
@click.option("--pin", "pin_ids", multiple=True, help="Initial pinned id (repeatable). Defaults to item-5, item-10, item-15.")
@click.option("--random-pins", type=click.IntRange(min=0), default=0, help="Pin this many random items.")
@click.option("--random-unpins", type=click.IntRange(min=0), default=0, help="Then unpin this many random pinned items.")
@click.option("--seed", type=int, default=None, help="Random seed for reproducible runs.")
@click.option("--pinned-only", is_flag=True, help="Show only the pinned list.")
@click.option("--limit", type=click.IntRange(min=0), default=100, show_default=True, help="Rows shown from the full list.")
def demo(
    count: int,
    max_pinned: int,
    pin_ids: tuple[str, ...],
    random_pins: int,
    random_unpins: int,
    seed: int | None,
    pinned_only: bool,
    limit: int,
) -> None:
    """Generate --count items, apply pins, and show pinned and sorted lists.

    Random pins that land on an already pinned item, or arrive once the
    capacity bound is reached, are ignored like any other no-op pin.
    """
    from pinlist import PinList, partition
    from pinlist.cli import _cli_session
    from pinlist.cli.formatting import format_items, format_pinned_ids, format_stats

    with _cli_session() as console:
        rng = random.Random(seed)
        items = generate_items(count)
        pins = PinList(
            items,
            lambda item: item["id"],
            initial_pinned_ids=list(pin_ids) if pin_ids else list(DEFAULT_PINS),
            max_pinned_items=max_pinned,
        )

        with pins.batch():
            for _ in range(random_pins if items else 0):
                pins.pin(rng.choice(items))
            for _ in range(random_unpins):
                pinned = pins.pinned_items
                if not pinned:
                    break
                pins.unpin(rng.choice(pinned))

        start = time.perf_counter()
        views = partition(pins.resolver, pins.pin_set)
        elapsed_ms = (time.perf_counter() - start) * 1000

        format_stats(pins, console, elapsed_ms=elapsed_ms)
        console.print()
        format_pinned_ids(pins, console)
        console.print()
        format_items(
            "Pinned Items",
            views.pinned,
            pins,
            console,
            label_key="name",
            empty_message="No pinned items yet",
        )
        if not pinned_only:
            console.print()
            format_items(
                "All Items",
                views.sorted,
                pins,
                console,
                label_key="name",
                limit=limit,
            )
