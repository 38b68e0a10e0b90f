from dataclasses import dataclass

import pytest

from wutils.collection import (
    for_each,
    map_to_lists,
    slice_diff,
    slice_to_map,
    sort_keys,
    sort_slice,
)


def test_for_each_passes_index_and_value():
    seen = []
    for_each([1, 2, 3, 4, 5], lambda i, v: seen.append((i, v)))
    assert seen == [(0, 1), (1, 2), (2, 3), (3, 4), (4, 5)]


def test_map_to_lists():
    keys, values = map_to_lists({"1": 11, "2": 22})
    assert sorted(keys) == ["1", "2"]
    assert dict(zip(keys, values)) == {"1": 11, "2": 22}


def test_slice_to_map_ints():
    assert slice_to_map([1, 2, 3, 4], lambda item: item) == {1: 1, 2: 2, 3: 3, 4: 4}


def test_slice_to_map_strings():
    fruits = ["apple", "banana", "cherry"]
    assert slice_to_map(fruits, lambda item: item) == {f: f for f in fruits}


def test_slice_to_map_struct_field():
    @dataclass(frozen=True)
    class Person:
        id: int
        name: str

    people = [Person(1, "Alice"), Person(2, "Bob"), Person(3, "Charlie")]
    result = slice_to_map(people, lambda p: p.id)
    assert list(result) == [1, 2, 3]
    assert result[2].name == "Bob"


@pytest.mark.parametrize(
    "a, b, miss_in_a, miss_in_b",
    [
        (["a", "b", "c"], ["a", "b", "c"], [], []),
        (["a", "b", "c"], ["d", "e", "f"], ["d", "e", "f"], ["a", "b", "c"]),
        (["a", "b", "c"], ["b", "c", "d"], ["d"], ["a"]),
        ([], ["a", "b", "c"], ["a", "b", "c"], []),
        (["a", "b", "c"], [], [], ["a", "b", "c"]),
    ],
    ids=[
        "no differences",
        "all different",
        "some different",
        "empty a",
        "empty b",
    ],
)
def test_slice_diff(a, b, miss_in_a, miss_in_b):
    assert slice_diff(a, b) == (miss_in_a, miss_in_b)


@pytest.mark.parametrize(
    "mapping, expected",
    [
        ({1: "a", 3: "b", 2: "c", 0: "d", 5: "e"}, [0, 1, 2, 3, 5]),
        ({"1": "a", "3": "b", "2": "c", "0": "d", "5": "e"}, ["0", "1", "2", "3", "5"]),
        ({1.0: "a", 3.0: "b", 2.0: "c", 0.0: "d", 5.0: "e"}, [0.0, 1.0, 2.0, 3.0, 5.0]),
    ],
)
def test_sort_keys(mapping, expected):
    assert sort_keys(mapping) == expected


def test_sort_keys_empty():
    assert sort_keys({}) == []


def test_sort_slice_in_place():
    items = [3, 1, 2]
    result = sort_slice(items)
    assert result is items
    assert items == [1, 2, 3]


def test_sort_slice_unsupported_left_alone():
    items = [3, "a", 1]
    assert sort_slice(items) == [3, "a", 1]