"""Tests for identity resolution between items and ids.

Covers forward/reverse tables, the dual-mode item_or_id argument,
out-of-band items, tagged references, and the primitive-item ambiguity.
"""

from __future__ import annotations

from pinlist import IdentityResolver, IdRef, ItemRef, is_item_id

from tests.conftest import get_id, make_items


class TestIsItemId:
    def test_str_and_numbers_are_ids(self):
        assert is_item_id("a")
        assert is_item_id(3)
        assert is_item_id(2.5)

    def test_bool_is_not_an_id(self):
        assert not is_item_id(True)
        assert not is_item_id(False)

    def test_records_are_not_ids(self):
        assert not is_item_id({"id": 1})
        assert not is_item_id(None)
        assert not is_item_id((1,))


class TestResolve:
    def test_id_returned_as_is(self):
        resolver = IdentityResolver(make_items(3), get_id)
        assert resolver.resolve(2) == 2

    def test_unknown_id_returned_as_is(self):
        """Ids are never validated against the source."""
        resolver = IdentityResolver(make_items(3), get_id)
        assert resolver.resolve(99) == 99

    def test_item_resolved_through_forward_table(self):
        items = make_items(3)
        calls = []

        def counting_id(item):
            calls.append(item)
            return item["id"]

        resolver = IdentityResolver(items, counting_id)
        assert len(calls) == 3

        assert resolver.resolve(items[1]) == 2
        # Served from the table, not a fresh identity call
        assert len(calls) == 3

    def test_out_of_band_item_falls_back_to_identity_function(self):
        resolver = IdentityResolver(make_items(3), get_id)
        assert resolver.resolve({"id": 42}) == 42

    def test_equal_but_distinct_item_uses_identity_function(self):
        """Forward table is keyed by object identity, not equality."""
        items = make_items(1)
        resolver = IdentityResolver(items, lambda item: item["id"])
        copy = dict(items[0])
        assert resolver.resolve(copy) == 1

    def test_id_ref(self):
        resolver = IdentityResolver(make_items(3), get_id)
        assert resolver.resolve(IdRef(3)) == 3

    def test_item_ref(self):
        items = make_items(3)
        resolver = IdentityResolver(items, get_id)
        assert resolver.resolve(ItemRef(items[0])) == 1


class TestLookupItem:
    def test_id_to_item(self):
        items = make_items(3)
        resolver = IdentityResolver(items, get_id)
        assert resolver.lookup_item(2) is items[1]

    def test_unknown_id_is_none(self):
        resolver = IdentityResolver(make_items(3), get_id)
        assert resolver.lookup_item(99) is None

    def test_item_returned_as_is(self):
        resolver = IdentityResolver(make_items(3), get_id)
        outsider = {"id": 7}
        assert resolver.lookup_item(outsider) is outsider

    def test_tagged_refs(self):
        items = make_items(3)
        resolver = IdentityResolver(items, get_id)
        assert resolver.lookup_item(IdRef(1)) is items[0]
        assert resolver.lookup_item(IdRef(50)) is None
        assert resolver.lookup_item(ItemRef(items[2])) is items[2]

    def test_duplicate_ids_last_item_wins(self):
        first, second = {"id": 1, "v": "a"}, {"id": 1, "v": "b"}
        resolver = IdentityResolver([first, second], get_id)
        assert resolver.lookup_item(1) is second


class TestTables:
    def test_contains_id(self):
        resolver = IdentityResolver(make_items(2), get_id)
        assert resolver.contains_id(1)
        assert not resolver.contains_id(3)

    def test_len_and_items(self):
        items = make_items(4)
        resolver = IdentityResolver(items, get_id)
        assert len(resolver) == 4
        assert resolver.items == tuple(items)
        assert resolver.get_item_id is get_id

    def test_items_snapshotted(self):
        items = make_items(2)
        resolver = IdentityResolver(items, get_id)
        items.append({"id": 3})
        assert len(resolver) == 2
        assert not resolver.contains_id(3)

    def test_unhashable_items_supported(self):
        items = [{"id": "a", "tags": ["x"]}, {"id": "b", "tags": []}]
        resolver = IdentityResolver(items, get_id)
        assert resolver.id_of(items[1]) == "b"

    def test_empty_source(self):
        resolver = IdentityResolver([], get_id)
        assert len(resolver) == 0
        assert resolver.lookup_item("x") is None


class TestPrimitiveItemAmbiguity:
    """When items are themselves strings or numbers, ids win.

    A bare primitive argument is always read as an id. ItemRef forces the
    item reading when the identity function maps an item to a different
    value.
    """

    def test_bare_primitive_read_as_id(self):
        words = ["apple", "banana"]
        resolver = IdentityResolver(words, str.upper)
        # "apple" is taken as an id, not passed through str.upper
        assert resolver.resolve("apple") == "apple"
        assert resolver.lookup_item("apple") is None

    def test_item_ref_forces_item_reading(self):
        words = ["apple", "banana"]
        resolver = IdentityResolver(words, str.upper)
        assert resolver.resolve(ItemRef("apple")) == "APPLE"
        assert resolver.lookup_item(ItemRef("apple")) == "apple"

    def test_identity_mapping_is_unambiguous(self):
        """With get_item_id = identity, both readings agree."""
        resolver = IdentityResolver([1, 2, 3], lambda n: n)
        assert resolver.resolve(2) == 2
        assert resolver.lookup_item(2) == 2
