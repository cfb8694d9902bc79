"""Shared test fixtures for pinlist.

Provides item factories, a change-callback recorder, and PinList
construction helpers.
"""

from __future__ import annotations

from typing import Any

import pytest

from pinlist import PinList


def make_items(n: int = 3, *, start: int = 1) -> list[dict]:
    """Build ``[{"id": start}, ..., {"id": start + n - 1}]`` records."""
    return [{"id": i, "name": f"Item {i}"} for i in range(start, start + n)]


def get_id(item: dict) -> Any:
    return item["id"]


def make_pinlist(items: list | None = None, **options: Any) -> PinList:
    """Create a PinList over dict records keyed by ``"id"``."""
    if items is None:
        items = make_items()
    return PinList(items, get_id, **options)


def ids_of(items: list) -> list:
    return [item["id"] for item in items]


class CallbackRecorder:
    """Change callback that records every pinned-items payload."""

    def __init__(self) -> None:
        self.calls: list[list] = []

    def __call__(self, pinned_items: list) -> None:
        self.calls.append(pinned_items)

    @property
    def id_calls(self) -> list[list]:
        return [ids_of(call) for call in self.calls]


@pytest.fixture
def items() -> list[dict]:
    return make_items(3)


@pytest.fixture
def recorder() -> CallbackRecorder:
    return CallbackRecorder()


@pytest.fixture
def pins(items: list[dict], recorder: CallbackRecorder) -> PinList:
    """Three items, no capacity bound, recording callback."""
    return make_pinlist(items, on_pinned_items_change=recorder)
