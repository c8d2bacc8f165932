import pytest

from keyedcollection import Collection
from keyedcollection.sorting import SortKey

BOOKS = [
    {"pages": 10, "copies": 2},
    {"pages": 100, "copies": 1},
    {"pages": 1, "copies": 2},
]


def test_sort():
    collection = Collection([3, 1, 5, 2, 4])
    assert collection.sort().to_dict() == {0: 1, 1: 2, 2: 3, 3: 4, 4: 5}
    assert collection.to_list() == [3, 1, 5, 2, 4]


def test_sort_reindexes():
    collection = Collection({"c": 3, "a": 1, "b": 2})
    assert collection.sort().to_dict() == {0: 1, 1: 2, 2: 3}


def test_sort_with_callback():
    result = Collection(BOOKS).sort(lambda b: b["pages"])
    assert result.to_list() == [
        {"pages": 1, "copies": 2},
        {"pages": 10, "copies": 2},
        {"pages": 100, "copies": 1},
    ]


def test_sort_desc():
    collection = Collection([3, 1, 5, 2, 4])
    assert collection.sort_desc().to_list() == [5, 4, 3, 2, 1]


def test_sort_desc_with_callback():
    result = Collection(BOOKS).sort_desc(lambda b: b["pages"])
    assert result.to_list() == [
        {"pages": 100, "copies": 1},
        {"pages": 10, "copies": 2},
        {"pages": 1, "copies": 2},
    ]


def test_sort_is_stable():
    collection = Collection([{"p": 10, "c": 2}, {"p": 1, "c": 2}])
    assert collection.sort(lambda v: v["p"]).to_list() == [
        {"p": 1, "c": 2},
        {"p": 10, "c": 2},
    ]
    ties = Collection([("a", 1), ("b", 0), ("c", 1), ("d", 0)])
    assert ties.sort(lambda v: v[1]).to_list() == [
        ("b", 0),
        ("d", 0),
        ("a", 1),
        ("c", 1),
    ]
    assert ties.sort_desc(lambda v: v[1]).to_list() == [
        ("a", 1),
        ("c", 1),
        ("b", 0),
        ("d", 0),
    ]


def test_sort_is_idempotent():
    collection = Collection([5, 3, 3, 9, 1])
    once = collection.sort()
    assert once.sort() == once
    values = once.to_list()
    assert all(a <= b for a, b in zip(values, values[1:]))


def test_sort_incomparable_values():
    with pytest.raises(TypeError):
        Collection([1, "a"]).sort()


@pytest.mark.parametrize(
    "descending, expected",
    [
        (None, ["Milan/8", "Rome/10", "Rome/15"]),
        ([False, True], ["Milan/8", "Rome/15", "Rome/10"]),
        ([True, False], ["Rome/10", "Rome/15", "Milan/8"]),
    ],
)
def test_sort_by(descending, expected):
    collection = Collection(
        [
            {"city": "Rome", "employees": 10},
            {"city": "Milan", "employees": 8},
            {"city": "Rome", "employees": 15},
        ]
    )
    result = collection.sort_by(["city", "employees"], descending)
    assert [f"{r['city']}/{r['employees']}" for r in result] == expected


def test_sort_by_invalid_descending_length():
    with pytest.raises(ValueError):
        Collection(BOOKS).sort_by(["pages"], [True, False])


def test_sort_by_missing_column():
    with pytest.raises(KeyError):
        Collection(BOOKS).sort_by(["title"])


def test_sort_key_equal_values():
    left = SortKey({"a": 1}, ["a"], [False])
    right = SortKey({"a": 1}, ["a"], [False])
    assert not left < right
    assert not right < left


def test_reverse():
    collection = Collection([1, 2, 3, 4, 5])
    assert collection.reverse().to_dict() == {0: 5, 1: 4, 2: 3, 3: 2, 4: 1}


def test_reverse_with_string_keys():
    collection = Collection({"a": 1, "b": 2, "c": 3, "d": 4})
    result = collection.reverse()
    assert list(result.items()) == [("d", 4), ("c", 3), ("b", 2), ("a", 1)]


@pytest.mark.parametrize(
    "data", [[1, 2, 3], {"a": 1, "b": 2}, {"a": 1, 0: 2, "b": 3, 1: 4}, []]
)
def test_reverse_twice(data):
    collection = Collection(data)
    assert collection.reverse().reverse() == collection
