"""Measuring how quickly a host answers."""

import http.client
import subprocess
import urllib.error
import urllib.request
from datetime import timedelta

from wutils.log import get_logger
from wutils.timing import time_costs, with_timeout

_PING_TIMEOUT = 3.0
_HTTP_TIMEOUT = 5.0

_logger = get_logger()


def normalize_host(host: str) -> str:
    """Strip surrounding blanks and a leading http:// or https:// from a host."""
    host = host.strip()
    host = host.removeprefix("http://")
    return host.removeprefix("https://")


def _fetch(url: str) -> None:
    try:
        with urllib.request.urlopen(url, timeout=_HTTP_TIMEOUT):
            pass
    except urllib.error.HTTPError as exc:
        # Any HTTP answer counts as a response.
        exc.close()


def ping_by_http(host: str) -> int:
    """Return the milliseconds a plain HTTP GET to the host takes.

    Raises OSError when the host cannot be reached.
    """
    url = "http://" + host
    cost = time_costs(lambda: _fetch(url))
    return cost // timedelta(milliseconds=1)


def ping(host: str) -> int:
    """Return the host's response time in milliseconds, or 0 on failure or after 3 s.

    Both ``https://example.com`` and ``example.com`` are accepted.
    """
    target = normalize_host(host)

    def measure() -> int:
        try:
            return ping_by_http(target)
        except (OSError, ValueError, http.client.HTTPException) as exc:
            _logger.error(str(exc))
            return 0

    return with_timeout(_PING_TIMEOUT, measure, default=0)


def net_reachable(host: str) -> bool:
    """Report whether the system ping command reaches the host."""
    try:
        done = subprocess.run(
            ["ping", host, "-c", "4", "-W", "5"],
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            check=False,
        )
    except OSError:
        return False
    return done.returncode == 0