"""Shared fixtures for seu-wlan tests."""

import logging
import threading
import time
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from unittest.mock import MagicMock

import pytest
import requests


@pytest.fixture
def logger(caplog):
    caplog.set_level(logging.DEBUG, logger="tests.seu_wlan")
    return logging.getLogger("tests.seu_wlan")


@pytest.fixture
def make_response():
    def _make(body=b"", read_error=None):
        response = MagicMock()
        if read_error is not None:
            response.iter_content.side_effect = read_error
        else:
            response.iter_content.side_effect = lambda chunk_size=1: iter([body])
        return response

    return _make


@pytest.fixture
def session():
    return MagicMock()


@pytest.fixture
def http_session():
    with requests.Session() as http:
        http.trust_env = False
        yield http


@pytest.fixture
def portal_server():
    """Local portal stub. Yields a function that starts it and returns its URL.

    ``header_delay`` waits before the status line; ``byte_delay`` sends the
    body one byte at a time.
    """
    servers = []

    def _start(body=b'{"status":0,"info":"ok"}', header_delay=0.0, byte_delay=0.0):
        class Handler(BaseHTTPRequestHandler):
            def do_POST(self):
                length = int(self.headers.get("Content-Length", 0))
                self.rfile.read(length)
                time.sleep(header_delay)
                try:
                    self.send_response(200)
                    self.send_header("Content-Type", "application/json")
                    self.send_header("Content-Length", str(len(body)))
                    self.end_headers()
                    for i in range(len(body)):
                        self.wfile.write(body[i:i + 1])
                        self.wfile.flush()
                        time.sleep(byte_delay)
                except (BrokenPipeError, ConnectionResetError):
                    pass

            def log_message(self, format, *args):
                pass

        server = ThreadingHTTPServer(("127.0.0.1", 0), Handler)
        server.daemon_threads = True
        threading.Thread(target=server.serve_forever, daemon=True).start()
        servers.append(server)
        return f"http://127.0.0.1:{server.server_address[1]}/index.php/index/login"

    yield _start

    for server in servers:
        server.shutdown()
        server.server_close()
