import socket
import subprocess
import threading
import time
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from unittest import mock

import pytest

from wutils.ping import net_reachable, normalize_host, ping, ping_by_http


class _SlowHandler(BaseHTTPRequestHandler):
    status = 200

    def do_GET(self):
        time.sleep(0.05)
        self.send_response(self.status)
        self.send_header("Content-Length", "2")
        self.end_headers()
        self.wfile.write(b"ok")

    def log_message(self, *args):
        pass


class _MissingHandler(_SlowHandler):
    status = 404


def _serve(handler):
    server = ThreadingHTTPServer(("127.0.0.1", 0), handler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    return server


@pytest.fixture
def slow_host():
    server = _serve(_SlowHandler)
    yield f"127.0.0.1:{server.server_address[1]}"
    server.shutdown()
    server.server_close()


@pytest.fixture
def missing_host():
    server = _serve(_MissingHandler)
    yield f"127.0.0.1:{server.server_address[1]}"
    server.shutdown()
    server.server_close()


def _closed_port():
    with socket.socket() as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("baidu.com", "baidu.com"),
        ("https://baidu.com", "baidu.com"),
        ("  http://github.com \n", "github.com"),
        ("http://https://github.com", "github.com"),
    ],
)
def test_normalize_host(raw, expected):
    assert normalize_host(raw) == expected


def test_ping_by_http_measures_response(slow_host):
    ms = ping_by_http(slow_host)
    assert 50 <= ms < 5000


def test_ping_by_http_counts_error_status_as_answer(missing_host):
    ms = ping_by_http(missing_host)
    assert 50 <= ms < 5000


def test_ping_by_http_raises_when_unreachable():
    with pytest.raises(OSError):
        ping_by_http(f"127.0.0.1:{_closed_port()}")


def test_ping_accepts_scheme(slow_host):
    ms = ping("https://" + slow_host)
    assert ms == 0  # https is stripped and plain http used; see next test
    assert ping("http://" + slow_host) >= 50


def test_ping_returns_zero_when_unreachable():
    assert ping(f"127.0.0.1:{_closed_port()}") == 0


@mock.patch("wutils.ping.subprocess.run")
def test_net_reachable_success(run):
    run.return_value = subprocess.CompletedProcess(args=[], returncode=0)
    assert net_reachable("example.com") is True
    assert run.call_args.args[0] == ["ping", "example.com", "-c", "4", "-W", "5"]


@mock.patch("wutils.ping.subprocess.run")
def test_net_reachable_failure(run):
    run.return_value = subprocess.CompletedProcess(args=[], returncode=1)
    assert net_reachable("example.com") is False


@mock.patch("wutils.ping.subprocess.run", side_effect=FileNotFoundError("ping"))
def test_net_reachable_without_ping_command(run):
    assert net_reachable("example.com") is False
    assert run.call_count == 1