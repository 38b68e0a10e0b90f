"""Small expression helpers."""

import re
from typing import TypeVar

from wutils.log import get_logger

T = TypeVar("T")

_logger = get_logger()


def conditional_equal(condition: bool, value1: T, value2: T) -> T:
    """Return ``value1`` when the condition holds, otherwise ``value2``."""
    return value1 if condition else value2


def match(pattern: str, text: str) -> bool:
    """Report whether the pattern matches anywhere in the text.

    An invalid pattern is logged and counts as no match.
    """
    try:
        return re.search(pattern, text) is not None
    except re.error as exc:
        _logger.error(str(exc))
        return False