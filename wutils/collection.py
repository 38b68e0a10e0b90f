"""Helpers over lists and dicts."""

from collections.abc import Callable, Hashable, Iterable, Mapping
from typing import Any, TypeVar

from wutils.log import get_logger

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

_logger = get_logger()


def for_each(items: Iterable[V], fn: Callable[[int, V], Any]) -> None:
    """Call ``fn(index, value)`` for every item."""
    for index, value in enumerate(items):
        fn(index, value)


def map_to_lists(mapping: Mapping[K, V]) -> tuple[list[K], list[V]]:
    """Split a mapping into parallel lists of keys and values."""
    return list(mapping.keys()), list(mapping.values())


def slice_to_map(items: Iterable[V], key_selector: Callable[[V], K]) -> dict[K, V]:
    """Index items by the key the selector gives; later items win."""
    return {key_selector(item): item for item in items}


def slice_diff(a: list[V], b: list[V]) -> tuple[list[V], list[V]]:
    """Return (items of b missing in a, items of a missing in b), in order."""
    if not a:
        return list(b), []
    if not b:
        return [], list(a)
    in_a = set(a)
    in_b = set(b)
    missing_in_b = [item for item in a if item not in in_b]
    missing_in_a = [item for item in b if item not in in_a]
    return missing_in_a, missing_in_b


def sort_slice(items: list[V]) -> list[V]:
    """Sort a list in place and return it; unorderable items are left as they are."""
    try:
        ordered = sorted(items)
    except TypeError:
        _logger.warning("Unsupported type")
        return items
    items[:] = ordered
    return items


def sort_keys(mapping: Mapping[K, Any]) -> list[K]:
    """Return the mapping's keys in ascending order."""
    if not mapping:
        return []
    return sort_slice(list(mapping))