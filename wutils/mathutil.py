"""Integer powers and random digit strings."""

import random
import time


def int_pow(n: int, m: int) -> int:
    """Return n to the m-th power, for non-negative m."""
    if n == 1 or m == 0:
        return 1
    result = n
    for _ in range(2, m + 1):
        result *= n
    return result


def pow10(n: int) -> int:
    """Return 10 to the n-th power."""
    return int_pow(10, n)


def get_rand_num(digit: int) -> str:
    """Return a random string of ``digit`` decimal digits ("" when digit < 1)."""
    if digit < 1:
        return ""
    rng = random.Random(time.time_ns())
    parts: list[str] = []
    length = 0
    while length < digit:
        chunk = str(rng.getrandbits(63))
        parts.append(chunk)
        length += len(chunk)
    return "".join(parts)[:digit]


def get_verify_code() -> str:
    """Return a six-digit verification code."""
    return get_rand_num(6)