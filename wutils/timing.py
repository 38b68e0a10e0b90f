"""Running callables under a deadline and measuring how long they take."""

import queue
import threading
import time
from collections.abc import Callable
from datetime import timedelta
from typing import Optional, TypeVar, Union

T = TypeVar("T")


def with_timeout(
    timeout: Union[float, timedelta],
    fn: Callable[[], T],
    default: Optional[T] = None,
) -> Optional[T]:
    """Run ``fn`` in the background and return its result, or ``default`` on timeout.

    ``timeout`` is in seconds or a timedelta. An exception raised by ``fn``
    before the deadline is re-raised.
    """
    seconds = timeout.total_seconds() if isinstance(timeout, timedelta) else float(timeout)
    outcome: queue.Queue = queue.Queue(maxsize=1)

    def run() -> None:
        try:
            outcome.put((True, fn()))
        except BaseException as exc:  # handed to the caller below
            outcome.put((False, exc))

    threading.Thread(target=run, daemon=True).start()
    try:
        ok, value = outcome.get(timeout=max(seconds, 0.0))
    except queue.Empty:
        return default
    if not ok:
        raise value
    return value


def time_costs(fn: Callable[[], object]) -> timedelta:
    """Return how long calling ``fn`` took."""
    start = time.perf_counter()
    fn()
    return timedelta(seconds=time.perf_counter() - start)