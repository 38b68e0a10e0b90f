"""Zero values and loose conversions between plain Python types."""

import queue
import types
from collections.abc import Callable
from typing import Any


def _echo(*args):
    return args


_ZERO_FACTORIES = {
    str: str,
    int: int,
    float: float,
    complex: complex,
    bool: bool,
    bytes: bytes,
    bytearray: bytearray,
    list: list,
    tuple: tuple,
    dict: dict,
    set: set,
    frozenset: frozenset,
    queue.Queue: queue.Queue,
}


def empty_value(kind: Any) -> Any:
    """Return a fresh empty value of ``kind``, or None for kinds without one."""
    factory = _ZERO_FACTORIES.get(kind)
    if factory is not None:
        return factory()
    if kind is Callable or kind is types.FunctionType:
        return _echo
    return None


_TRUE_WORDS = {"1", "t", "true", "y", "yes", "on"}
_FALSE_WORDS = {"", "0", "f", "false", "n", "no", "off"}


def _to_bool(src: Any) -> bool:
    if isinstance(src, str):
        word = src.strip().lower()
        if word in _TRUE_WORDS:
            return True
        if word in _FALSE_WORDS:
            return False
        raise ValueError(f"not a boolean: {src!r}")
    return bool(src)


def _to_int(src: Any) -> int:
    if isinstance(src, str):
        text = src.strip()
        try:
            return int(text)
        except ValueError:
            return int(float(text))
    return int(src)


def _to_str(src: Any) -> str:
    if isinstance(src, bool):
        return "true" if src else "false"
    if isinstance(src, (bytes, bytearray)):
        return bytes(src).decode("utf-8", errors="replace")
    return str(src)


def convert(src: Any, target: type) -> Any:
    """Convert ``src`` to ``target``; on failure return the target's empty value."""
    if type(src) is target:
        return src
    try:
        if target is bool:
            return _to_bool(src)
        if target is int:
            return _to_int(src)
        if target is float:
            return float(src.strip()) if isinstance(src, str) else float(src)
        if target is str:
            return _to_str(src)
        if target in (list, tuple, set, frozenset):
            if isinstance(src, (str, bytes)) or not hasattr(src, "__iter__"):
                return target([src])
            return target(src)
        return target(src)
    except (TypeError, ValueError, OverflowError):
        return empty_value(target)


class _Unsupported(Exception):
    pass


def _convert_items(value: Any, number: type, parse: Callable[[str], Any]) -> list:
    if not isinstance(value, (list, tuple)):
        return []

    def one(item: Any) -> Any:
        if isinstance(item, str):
            try:
                return parse(item)
            except ValueError:
                return number()
        if isinstance(item, bool):
            raise _Unsupported
        if isinstance(item, int) or (number is float and isinstance(item, float)):
            return number(item)
        raise _Unsupported

    try:
        return [one(item) for item in value]
    except _Unsupported:
        return []


def to_int_list(value: Any) -> list[int]:
    """Turn a sequence of ints or numeric strings into a list of ints.

    Strings that do not parse become 0; unsupported inputs give an empty list.
    """
    return _convert_items(value, int, int)


def to_float_list(value: Any) -> list[float]:
    """Turn a sequence of numbers or numeric strings into a list of floats.

    Strings that do not parse become 0.0; unsupported inputs give an empty list.
    """
    return _convert_items(value, float, float)