"""Tests for field access and hydration on BaseObject."""

from __future__ import annotations

import json
import logging

import pytest

from tgobjects.base import BaseObject, TelegramObject
from tgobjects.collection import Collection
from tgobjects.exceptions import TelegramSDKError, UnknownFieldError, UnknownMethodError
from tgobjects.objects import User
from tgobjects.registry import ObjectRegistry


class Item(BaseObject):
    """Not registered: only reachable through a declared relation."""


class Basket(BaseObject):
    def relations(self):
        return {"items": Item, "owner": Item}


@pytest.fixture
def record() -> TelegramObject:
    return TelegramObject(
        {
            "total": 5,
            "label": "groceries",
            "meta": {"source": "api"},
            "tags": ["a", "b"],
            "empty": None,
            "user": {"id": 7},
        }
    )


def test_round_trip_of_plain_mapping() -> None:
    payload = {"a": 1, "b": {"c": [1, 2, {"d": None}]}, "e": "x", "f": True}
    assert TelegramObject(payload).to_array() == payload


def test_envelope_is_unwrapped() -> None:
    record = TelegramObject({"ok": True, "result": {"id": 1, "name": "x"}})
    assert record.all() == {"id": 1, "name": "x"}
    assert record.to_array() == {"id": 1, "name": "x"}
    assert record.get_status() is True


def test_envelope_with_scalar_result() -> None:
    record = TelegramObject({"ok": True, "result": True})
    assert record.all() is True
    assert record.count() == 1
    assert record.get_status() is True


def test_envelope_with_null_result_is_empty() -> None:
    record = TelegramObject({"ok": True, "result": None})
    assert record.all() == {}
    assert record.count() == 0


def test_status_defaults_to_false() -> None:
    assert TelegramObject({"id": 1}).get_status() is False
    assert TelegramObject({"ok": False, "description": "Bad Request"}).get_status() is False


def test_construction_defaults_and_copies() -> None:
    assert TelegramObject().all() == {}
    assert TelegramObject(None).all() == {}

    payload = {"a": {"b": 1}}
    record = TelegramObject(payload)
    record.put("a.b", 2)
    assert payload == {"a": {"b": 1}}


def test_construction_normalizes_tuples_and_records() -> None:
    assert TelegramObject({"items": (1, 2)}).all() == {"items": [1, 2]}
    assert TelegramObject(User({"id": 1})).all() == {"id": 1}
    assert TelegramObject({"user": User({"id": 1})}).all() == {"user": {"id": 1}}


def test_construction_rejects_unserializable_values() -> None:
    with pytest.raises(TypeError):
        TelegramObject({"when": object()})


def test_from_json() -> None:
    record = TelegramObject.from_json('{"ok": true, "result": {"id": 3}}')
    assert record.all() == {"id": 3}
    assert record.get_status() is True
    with pytest.raises(json.JSONDecodeError):
        TelegramObject.from_json("{not json")


def test_make_builds_the_calling_type() -> None:
    assert isinstance(User.make({"id": 1}), User)


def test_get_with_default(record: TelegramObject) -> None:
    assert record.get("total") == 5
    assert record.get("missing", "default") == "default"
    assert record.get("missing") is None


def test_get_with_lazy_default_runs_only_on_miss(record: TelegramObject) -> None:
    calls = []

    def producer():
        calls.append(1)
        return "lazy"

    assert record.get("total", producer) == 5
    assert calls == []
    assert record.get("missing", producer) == "lazy"
    assert calls == [1]


def test_null_field_counts_as_missing(record: TelegramObject) -> None:
    assert not record.exists("empty")
    assert record.get("empty", "default") == "default"
    assert record.empty is None
    # the raw view still sees the stored null
    assert record.raw_get("empty", "default") is None


def test_exists_uses_a_single_segment(record: TelegramObject) -> None:
    assert record.exists("meta")
    assert record.has("meta")
    assert not record.exists("meta.source")
    assert "meta" in record
    assert "missing" not in record


def test_raw_get_uses_dot_paths(record: TelegramObject) -> None:
    assert record.raw_get("meta.source") == "api"
    assert record.raw_get("tags.1") == "b"
    assert record.raw_get("meta.missing", "default") == "default"
    assert record["meta.source"] == "api"
    assert record["meta"] == {"source": "api"}


def test_put_creates_nested_fields() -> None:
    record = TelegramObject()
    assert record.put("a.b.c", 1) is record
    assert record.all() == {"a": {"b": {"c": 1}}}

    record["a.d"] = 2
    assert record.raw_get("a.d") == 2


def test_put_stores_record_fields() -> None:
    record = TelegramObject().put("user", User({"id": 1}))
    assert record.all() == {"user": {"id": 1}}
    assert isinstance(record.user, User)


def test_put_into_list_payload() -> None:
    record = TelegramObject({"items": [1, 2]})
    record.put("items.2", 3)
    assert record.all() == {"items": [1, 2, 3]}
    with pytest.raises(TypeError):
        record.put("items.name", 1)


def test_forget_one_or_many_keys() -> None:
    record = TelegramObject({"a": 1, "b": 2, "c": 3})
    assert record.forget(["a", "b"]) is record
    assert not record.exists("a")
    assert not record.exists("b")
    assert record.all() == {"c": 3}

    record.forget("c")
    record.forget("missing")
    assert record.all() == {}


def test_delete_via_attribute_and_subscript() -> None:
    record = TelegramObject({"a": 1, "b": 2})
    del record.a
    del record["b"]
    assert record.all() == {}


def test_count_and_len(record: TelegramObject) -> None:
    assert record.count() == 6
    assert len(record) == 6
    assert list(record) == ["total", "label", "meta", "tags", "empty", "user"]


def test_list_payload_is_addressable_by_index() -> None:
    record = TelegramObject([{"a": 1}, {"a": 2}])
    assert record.exists(0)
    assert record.exists("1")
    assert not record.exists(2)
    assert record.count() == 2
    first = record.get(0)
    assert isinstance(first, TelegramObject)
    assert first.all() == {"a": 1}
    assert record.raw_get("1.a") == 2


def test_declared_relation_maps_sequences() -> None:
    basket = Basket({"items": [{"a": 1}, {"a": 2}]})
    items = basket.items
    assert isinstance(items, list)
    assert len(items) == 2
    assert all(isinstance(item, Item) for item in items)
    assert [item.all() for item in items] == [{"a": 1}, {"a": 2}]


def test_declared_relation_wraps_single_values() -> None:
    basket = Basket({"owner": {"id": 7}})
    assert isinstance(basket.owner, Item)
    assert basket.owner.id == 7


def test_declared_relation_takes_precedence_over_registry() -> None:
    class Order(BaseObject):
        def relations(self):
            return {"user": Item}

    assert isinstance(Order({"user": {"id": 7}}).user, Item)


def test_registered_type_resolves_by_field_name(record: TelegramObject) -> None:
    user = record.user
    assert isinstance(user, User)
    assert user.all() == {"id": 7}


def test_custom_registry_is_consulted() -> None:
    registry = ObjectRegistry()

    @registry.register
    class Owner(BaseObject):
        pass

    class Shop(BaseObject):
        pass

    Shop.registry = registry

    shop = Shop({"owner": {"id": 1}, "user": {"id": 2}})
    assert isinstance(shop.owner, Owner)
    # User lives in the default registry only
    assert type(shop.user) is TelegramObject


def test_unregistered_structures_become_generic_records(record: TelegramObject) -> None:
    meta = record.meta
    assert type(meta) is TelegramObject
    assert meta.source == "api"

    tags = record.tags
    assert type(tags) is TelegramObject
    assert tags.all() == ["a", "b"]


def test_scalars_pass_through(record: TelegramObject) -> None:
    assert record.total == 5
    assert record.label == "groceries"
    assert record.get("total") == 5
    assert record.resolve("total") == 5


def test_missing_attribute_reads_as_none(record: TelegramObject) -> None:
    assert record.missing is None
    assert record.resolve("missing") is None


def test_hydration_is_logged(caplog) -> None:
    with caplog.at_level(logging.DEBUG, logger="tgobjects.base"):
        Basket({"items": [{"a": 1}]}).items

    assert "declared relation Item" in caplog.text


def test_assignment_to_existing_field(record: TelegramObject) -> None:
    record.total = 6
    assert record.total == 6
    assert record.all()["total"] == 6


def test_assignment_to_missing_field_raises(record: TelegramObject) -> None:
    with pytest.raises(UnknownFieldError) as excinfo:
        record.totl = 6

    assert excinfo.value.field == "totl"
    assert isinstance(excinfo.value, TelegramSDKError)
    assert isinstance(excinfo.value, AttributeError)
    assert "totl" not in record


def test_assignment_to_null_field_raises(record: TelegramObject) -> None:
    with pytest.raises(UnknownFieldError):
        record.empty = 1


def test_private_attributes_are_not_fields(record: TelegramObject) -> None:
    assert not hasattr(record, "_nope")


def test_collection_delegation(record: TelegramObject) -> None:
    numbers = TelegramObject({"a": 1, "b": 2, "c": 3})
    view = Collection({"a": 1, "b": 2, "c": 3})

    assert numbers.first(lambda v: v > 1) == view.first(lambda v: v > 1)
    assert numbers.call("first", lambda v: v > 1) == 2
    assert numbers.filter(lambda v: v > 1).all() == {"b": 2, "c": 3}
    assert numbers.search(3) == "c"
    assert numbers.collect() == view


def test_fields_shadow_collection_operations() -> None:
    record = TelegramObject({"first": "field"})
    assert record.first == "field"
    assert record.call("first") == "field"


def test_unknown_delegated_method_raises(record: TelegramObject) -> None:
    with pytest.raises(UnknownMethodError) as excinfo:
        record.call("explode")

    assert excinfo.value.method == "explode"
    assert "Method [explode] does not exist." in str(excinfo.value)


def test_to_json_forwards_options() -> None:
    record = TelegramObject({"b": 2, "a": "é"})
    assert record.to_json(sort_keys=True) == '{"a": "\\u00e9", "b": 2}'
    assert record.to_json(sort_keys=True, ensure_ascii=False) == '{"a": "é", "b": 2}'
    assert str(record) == record.to_json()


def test_equality_and_repr() -> None:
    assert TelegramObject({"a": 1}) == TelegramObject({"a": 1})
    assert TelegramObject({"a": 1}) != TelegramObject({"a": 2})
    assert TelegramObject({"a": 1}) != User({"a": 1})
    assert repr(User({"id": 1})) == "User({'id': 1})"


def test_direct_call_of_unknown_method_is_not_checked(record: TelegramObject) -> None:
    """Only call() raises UnknownMethodError; a direct call hits the None read."""
    assert record.explode is None
    with pytest.raises(TypeError):
        record.explode()
    with pytest.raises(UnknownMethodError):
        record.call("explode")


def test_nested_result_key_is_unwrapped_on_hydration() -> None:
    record = TelegramObject({"wrapper": {"result": {"id": 1}, "other": 2}})
    wrapper = record.wrapper
    assert type(wrapper) is TelegramObject
    assert wrapper.all() == {"id": 1}
    # the raw view is untouched
    assert record.raw_get("wrapper.other") == 2
