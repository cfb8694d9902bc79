"""Tests for PinListConfig validation and configuration errors."""

from __future__ import annotations

import pydantic
import pytest

from pinlist import PinList, PinListConfig, PinListConfigError, PinListError

from tests.conftest import get_id, make_items


class TestPinListConfig:
    def test_defaults(self):
        config = PinListConfig()
        assert config.initial_pinned_ids == ()
        assert config.max_pinned_items is None
        assert config.on_pinned_items_change is None
        assert config.notify_on_items_change is True
        assert config.notify_on_init is False
        assert config.event_log_size == 100

    def test_initial_ids_coerced_to_tuple(self):
        config = PinListConfig(initial_pinned_ids=["a", 2, 3.5])
        assert config.initial_pinned_ids == ("a", 2, 3.5)

    def test_none_initial_ids(self):
        assert PinListConfig(initial_pinned_ids=None).initial_pinned_ids == ()

    def test_string_initial_ids_rejected(self):
        with pytest.raises(pydantic.ValidationError):
            PinListConfig(initial_pinned_ids="abc")

    def test_bool_ids_rejected(self):
        with pytest.raises(pydantic.ValidationError):
            PinListConfig(initial_pinned_ids=[True])

    @pytest.mark.parametrize("bad", [0, -3])
    def test_non_positive_capacity_rejected(self, bad):
        with pytest.raises(pydantic.ValidationError):
            PinListConfig(max_pinned_items=bad)

    def test_negative_event_log_rejected(self):
        with pytest.raises(pydantic.ValidationError):
            PinListConfig(event_log_size=-1)

    def test_frozen(self):
        config = PinListConfig()
        with pytest.raises(pydantic.ValidationError):
            config.max_pinned_items = 3

    def test_callback_must_be_callable(self):
        with pytest.raises(pydantic.ValidationError):
            PinListConfig(on_pinned_items_change="not callable")


class TestConfigErrors:
    def test_invalid_option_raises_config_error(self):
        with pytest.raises(PinListConfigError) as exc_info:
            PinList(make_items(), get_id, max_pinned_items=0)

        assert exc_info.value.option == "max_pinned_items"
        assert isinstance(exc_info.value.__cause__, pydantic.ValidationError)
        assert isinstance(exc_info.value, PinListError)

    def test_unknown_keyword_rejected(self):
        with pytest.raises(PinListConfigError) as exc_info:
            PinList(make_items(), get_id, max_pinned=3)
        assert exc_info.value.option == "max_pinned"

    def test_config_and_keywords_conflict(self):
        with pytest.raises(PinListConfigError) as exc_info:
            PinList(make_items(), get_id, config=PinListConfig(), max_pinned_items=2)
        assert exc_info.value.option == "config"
        assert "max_pinned_items" in str(exc_info.value)

    def test_identity_function_must_be_callable(self):
        with pytest.raises(PinListConfigError, match="callable"):
            PinList(make_items(), "id")

    def test_set_items_identity_function_must_be_callable(self):
        pins = PinList(make_items(), get_id)
        with pytest.raises(PinListConfigError):
            pins.set_items(make_items(), get_item_id=42)

    def test_identity_function_errors_propagate(self):
        with pytest.raises(KeyError):
            PinList([{"name": "no id"}], get_id)
