"""pinlist partition -- apply pin actions to a JSON item list."""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

import click

if TYPE_CHECKING:
    from pinlist.pinlist import PinList

ACTION_HELP = (
    "Pin action, applied in the order given (repeatable): "
    "pin:ID, unpin:ID, toggle:ID, reorder:FROM:TO, clear."
)


def _coerce_id(raw: str, is_known: Callable[[Any], bool]) -> Any:
    """Map a command-line id onto the id domain of the loaded items.

    JSON ids may be numbers; a raw string that matches no item is tried
    as an int, then as a float.
    """
    if is_known(raw):
        return raw
    for convert in (int, float):
        try:
            value = convert(raw)
        except ValueError:
            continue
        if is_known(value):
            return value
    return raw


def apply_action(pins: PinList, action: str) -> bool:
    """Apply one ``name[:args]`` action. Returns whether the pins changed."""
    name, _, rest = action.partition(":")
    name = name.strip().lower()
    if name == "clear" and not rest:
        return pins.clear()
    if name in ("pin", "unpin", "toggle") and rest:

        def is_known(value: Any) -> bool:
            return pins.resolver.contains_id(value) or value in pins.pin_set

        method = getattr(pins, name)
        return method(_coerce_id(rest, is_known))
    if name == "reorder":
        from_raw, _, to_raw = rest.partition(":")
        try:
            return pins.reorder(int(from_raw), int(to_raw))
        except ValueError:
            pass
    raise click.BadParameter(f"unrecognized action '{action}'", param_hint="--action")


def views_to_dict(pins: PinList) -> dict:
    """JSON-ready dump of the pin order and the three views."""
    views = pins.views
    return {
        "pinned_ids": list(pins.pinned_ids),
        "stale_ids": list(pins.stale_ids),
        "pinned": list(views.pinned),
        "unpinned": list(views.unpinned),
        "sorted": list(views.sorted),
    }


@click.command()
@click.argument("source", type=click.File("r"))
@click.option("--id-key", default="id", show_default=True, help="Key holding each item's id.")
@click.option("--label-key", default=None, help="Key shown as the item label (default: whole item).")
@click.option("--pinned", "initial_ids", multiple=True, help="Initial pinned id (repeatable).")
@click.option("--max-pinned", type=click.IntRange(min=1), default=None, help="Capacity bound on pins.")
@click.option("-a", "--action", "actions", multiple=True, help=ACTION_HELP)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["table", "json"]),
    default="table",
    show_default=True,
    help="Output format.",
)
@click.option("--limit", type=click.IntRange(min=0), default=None, help="Rows shown in table output.")
def partition(
    source: click.utils.LazyFile,
    id_key: str,
    label_key: str | None,
    initial_ids: tuple[str, ...],
    max_pinned: int | None,
    actions: tuple[str, ...],
    output_format: str,
    limit: int | None,
) -> None:
    """Partition the JSON array in SOURCE (a file, or - for stdin).

    Every element must be an object carrying --id-key. Actions that would
    be no-ops (unknown ids, full capacity, out-of-range indices) are
    skipped silently.
    """
    from pinlist import PinList
    from pinlist.cli import _cli_session
    from pinlist.cli.formatting import format_items, format_pinned_ids, format_stats

    with _cli_session() as console:
        data = json.load(source)
        if not isinstance(data, list):
            raise click.UsageError("SOURCE must contain a JSON array")
        for position, item in enumerate(data):
            if not isinstance(item, dict) or id_key not in item:
                raise click.UsageError(
                    f"element {position} is not an object with key '{id_key}'"
                )

        known_ids = {item[id_key] for item in data}
        pins = PinList(
            data,
            lambda item: item[id_key],
            initial_pinned_ids=[
                _coerce_id(raw, known_ids.__contains__) for raw in initial_ids
            ],
            max_pinned_items=max_pinned,
        )

        for action in actions:
            apply_action(pins, action)

        if output_format == "json":
            click.echo(json.dumps(views_to_dict(pins), indent=2))
            return

        format_stats(pins, console)
        console.print()
        format_pinned_ids(pins, console)
        console.print()
        format_items(
            "Sorted Items",
            pins.views.sorted,
            pins,
            console,
            label_key=label_key,
            limit=limit,
        )
