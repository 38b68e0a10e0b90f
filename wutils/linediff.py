"""Set difference between the names listed in two bracketed log files."""

import os
from typing import Union

from wutils.collection import slice_diff

PathLike = Union[str, os.PathLike]


def read_input_file(path: PathLike) -> list[str]:
    """Return the second bracketed field of every line that has one.

    A line such as ``[date] [name] [extra]`` gives ``name``.
    """
    names = []
    with open(path, encoding="utf-8") as handle:
        for line in handle:
            parts = line.rstrip("\n").split("] [")
            if len(parts) > 1:
                names.append(parts[1].strip())
    return names


def _read_or_empty(path: PathLike) -> list[str]:
    try:
        return read_input_file(path)
    except OSError:
        return []


def check_lines_diff(input_a: PathLike, input_b: PathLike) -> tuple[list[str], list[str]]:
    """Return (names missing in A, names missing in B); unreadable files count as empty."""
    return slice_diff(_read_or_empty(input_a), _read_or_empty(input_b))