import math

import pytest

from keyedcollection import Collection


def test_map():
    collection = Collection([1, 2, 3, 4, 5])
    result = collection.map(lambda v: v * 2)
    assert result.to_list() == [2, 4, 6, 8, 10]
    assert collection.to_list() == [1, 2, 3, 4, 5]


def test_map_empty():
    assert Collection().map(lambda v: v * 2).to_dict() == {}


def test_map_preserves_keys():
    collection = Collection({"a": 1, 5: 2})
    assert collection.map(str).to_dict() == {"a": "1", 5: "2"}


@pytest.mark.parametrize(
    "data, depth, expected",
    [
        ([1, 2, 3, [4, 5]], 1, [1, 2, 3, 4, 5]),
        ([1, 2, 3, [4, 5, [6, 7]]], 1, [1, 2, 3, 4, 5, [6, 7]]),
        ([1, 2, 3, [4, 5, [6, 7]]], 2, [1, 2, 3, 4, 5, 6, 7]),
        ([1, 2, 3, [4, 5, [6, 7]]], math.inf, [1, 2, 3, 4, 5, 6, 7]),
        ([[1, [2, [3, [4]]]]], 2, [1, 2, [3, [4]]]),
        ([[1, 2], 3, [4]], 1, [1, 2, 3, 4]),
        ([(1, 2), "abc", b"de"], 1, [1, 2, "abc", b"de"]),
        ([1, [2]], 0, [1, [2]]),
        ([], 1, []),
    ],
)
def test_flatten(data, depth, expected):
    assert Collection(data).flatten(depth).to_list() == expected


def test_flatten_default_depth():
    collection = Collection([1, 2, 3, [4, 5, [6, 7]]])
    assert collection.flatten().to_list() == [1, 2, 3, 4, 5, [6, 7]]


def test_flatten_with_string_keys():
    collection = Collection({"a": 1, "b": 2, "c": 3, "d": {"e": 4, "f": 5}})
    assert collection.flatten().to_dict() == {0: 1, 1: 2, 2: 3, 3: 4, 4: 5}


def test_flatten_with_string_keys_and_values():
    collection = Collection(
        {
            "fruits": ["apple", "banana", "orange"],
            "vegetables": ["carrot", "tomato", "cucumber"],
        }
    )
    assert collection.flatten().to_list() == [
        "apple",
        "banana",
        "orange",
        "carrot",
        "tomato",
        "cucumber",
    ]


def test_flatten_with_depth_and_keys():
    collection = Collection(
        {"a": 1, "b": 2, "c": 3, "d": {"e": 4, "f": 5, "g": {"h": 6, "i": 7}}}
    )
    assert collection.flatten().to_list() == [1, 2, 3, 4, 5, {"h": 6, "i": 7}]


def test_flatten_nested_collections():
    collection = Collection([Collection([1, 2]), Collection({"x": 3})])
    assert collection.flatten().to_list() == [1, 2, 3]
