import types

import pytest

from keyedcollection import Collection

RECORDS = [
    {"id": 1, "name": "John"},
    {"id": 2, "name": "Carter"},
    {"id": 3, "name": "Steve"},
]


def as_objects(records):
    return [types.SimpleNamespace(**record) for record in records]


@pytest.mark.parametrize("records", [RECORDS, as_objects(RECORDS)])
def test_column(records):
    collection = Collection(records)
    assert collection.column("name").to_dict() == {0: "John", 1: "Carter", 2: "Steve"}


@pytest.mark.parametrize("records", [RECORDS, as_objects(RECORDS)])
def test_column_with_index(records):
    collection = Collection(records)
    assert collection.column("name", "id").to_dict() == {
        1: "John",
        2: "Carter",
        3: "Steve",
    }


def test_column_whole_record_with_index():
    objects = as_objects(RECORDS)
    collection = Collection(objects)
    assert collection.column(None, "id").to_dict() == {
        1: objects[0],
        2: objects[1],
        3: objects[2],
    }


def test_column_skips_records_without_the_field():
    collection = Collection([{"name": "John"}, {"id": 2}, {"name": "Steve"}])
    assert collection.column("name").to_dict() == {0: "John", 1: "Steve"}


def test_column_index_missing_appends():
    collection = Collection(
        [{"id": 5, "name": "John"}, {"name": "Carter"}, {"id": "x", "name": "Steve"}]
    )
    assert collection.column("name", "id").to_dict() == {
        5: "John",
        6: "Carter",
        "x": "Steve",
    }


def test_keys():
    collection = Collection({"a": 1, "b": 2, "c": 3, "d": 4})
    assert collection.keys().to_dict() == {0: "a", 1: "b", 2: "c", 3: "d"}


def test_keys_empty():
    assert Collection().keys().to_dict() == {}


def test_values():
    collection = Collection({10: "ten", 11: "eleven", 12: "twelve"})
    result = collection.values()
    assert result.to_dict() == {0: "ten", 1: "eleven", 2: "twelve"}
    assert result is not collection


def test_values_is_a_new_instance_even_when_dense():
    collection = Collection(["a", "b"])
    result = collection.values()
    assert result == collection
    assert result is not collection
    result.push("c")
    assert len(collection) == 2


def test_values_is_idempotent():
    collection = Collection({"x": 1, 7: 2, "y": 3})
    assert collection.values().values() == collection.values()
