import pytest

from keyedcollection import Collection
from keyedcollection.pagination import window


@pytest.mark.parametrize(
    "size, offset, length, expected",
    [
        (5, 0, None, (0, 5)),
        (5, 2, 2, (2, 4)),
        (5, 4, 10, (4, 5)),
        (5, 10, None, (5, 5)),
        (5, -2, None, (3, 5)),
        (5, -10, 2, (0, 2)),
        (5, 1, -1, (1, 4)),
        (5, 3, -4, (3, 3)),
        (0, 0, 3, (0, 0)),
    ],
)
def test_window(size, offset, length, expected):
    assert window(size, offset, length) == expected


def test_slice():
    collection = Collection([1, 2, 3, 4, 5, 6])
    assert collection.slice(3).to_dict() == {0: 4, 1: 5, 2: 6}
    assert collection.slice(1, 2).to_dict() == {0: 2, 1: 3}


def test_slice_negative():
    collection = Collection([1, 2, 3, 4, 5, 6])
    assert collection.slice(-2).to_list() == [5, 6]
    assert collection.slice(1, -2).to_list() == [2, 3, 4]


def test_slice_out_of_range():
    assert Collection([1, 2, 3]).slice(10).to_dict() == {}


def test_slice_preserves_string_keys():
    collection = Collection({"a": 1, 0: 2, "b": 3, 5: 4})
    assert collection.slice(1).to_dict() == {0: 2, "b": 3, 1: 4}


def test_slice_does_not_modify_collection():
    collection = Collection([1, 2, 3])
    collection.slice(1)
    assert collection.to_list() == [1, 2, 3]


def test_splice():
    collection = Collection([1, 2, 3, 4, 5])
    removed = collection.splice(2)
    assert removed.to_dict() == {0: 3, 1: 4, 2: 5}
    assert collection.to_dict() == {0: 1, 1: 2}


def test_splice_with_length():
    collection = Collection([1, 2, 3, 4, 5])
    removed = collection.splice(1, 2)
    assert removed.to_list() == [2, 3]
    assert collection.to_dict() == {0: 1, 1: 4, 2: 5}


def test_splice_with_replacements():
    collection = Collection([1, 2, 3, 4, 5])
    removed = collection.splice(1, 2, "x", "y", "z")
    assert removed.to_list() == [2, 3]
    assert collection.to_dict() == {0: 1, 1: "x", 2: "y", 3: "z", 4: 4, 5: 5}


def test_splice_insert_only():
    collection = Collection(["a", "c"])
    assert collection.splice(1, 0, "b").to_dict() == {}
    assert collection.to_list() == ["a", "b", "c"]


def test_splice_preserves_string_keys():
    collection = Collection({"a": 1, 4: 2, "b": 3, 9: 4})
    removed = collection.splice(1, 1)
    assert removed.to_list() == [2]
    assert collection.to_dict() == {"a": 1, "b": 3, 0: 4}


def test_splice_negative_offset():
    colors = Collection(["red", "green", "yellow", "blue"])
    removed = colors.splice(-2)
    assert removed.to_list() == ["yellow", "blue"]
    assert colors.to_dict() == {0: "red", 1: "green"}


def test_splice_negative_offset_and_length():
    colors = Collection(["red", "green", "yellow", "blue"])
    removed = colors.splice(-3, -1, "black")
    assert removed.to_list() == ["green", "yellow"]
    assert colors.to_list() == ["red", "black", "blue"]


@pytest.mark.parametrize(
    "data, start, end, expected",
    [
        ([], 0, 5, ["foo"] * 6),
        ([], 5, None, []),
        (["a", "b", "c", "d"], 1, 3, ["a", "foo", "foo", "foo"]),
        (["a", "b", "c", "d"], 1, None, ["a", "foo", "foo", "foo"]),
        (["a", "b", "c", "d"], 1, 2, ["a", "foo", "foo", "d"]),
        (["a", "b", "c", "d"], 0, 1, ["foo", "foo", "c", "d"]),
        (["a", "b", "c"], 2, 4, ["a", "b", "foo", "foo", "foo"]),
        (["a", "b", "c"], 0, 0, ["a", "b", "c"]),
        (["a", "b", "c", "d", "e"], 3, 1, ["a", "b", "c", "d", "e"]),
        (["a", "b", "c"], 5, 1, ["a", "b", "c"]),
    ],
)
def test_fill(data, start, end, expected):
    assert Collection(data).fill(start, end, "foo").to_list() == expected


def test_fill_default_value():
    assert Collection([1, 2]).fill(0).to_list() == [None, None]


def test_fill_does_not_modify_collection():
    collection = Collection(["a", "b", "c", "d"])
    result = collection.fill(1, 3, "foo")
    assert collection.to_list() == ["a", "b", "c", "d"]
    assert result is not collection
