"""
Integration Test Fixtures.

A real HTTP server on 127.0.0.1 standing in for the blog server, and a
helper that runs cli.py in a subprocess with HOME pointed at tmp_path.
"""

import json
import os
import subprocess
import sys
import threading
from collections.abc import Callable, Generator
from dataclasses import dataclass, field
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).parent.parent.parent


@dataclass
class RecordedRequest:
    method: str
    path: str
    headers: dict[str, str]
    body: bytes


@dataclass
class BlogServer:
    """Handle on the running test server."""

    host: str
    port: int
    requests: list[RecordedRequest] = field(default_factory=list)
    ping_status: int = 200
    ping_body: str = "pong"
    add_body: str = '{"code":0,"msg":"ok"}'

    def posted_json(self) -> list[dict]:
        return [json.loads(r.body) for r in self.requests if r.method == "POST"]


def _make_handler(server: BlogServer) -> type[BaseHTTPRequestHandler]:
    class Handler(BaseHTTPRequestHandler):
        def _record(self) -> None:
            length = int(self.headers.get("Content-Length") or 0)
            server.requests.append(
                RecordedRequest(
                    method=self.command,
                    path=self.path,
                    headers={k.lower(): v for k, v in self.headers.items()},
                    body=self.rfile.read(length),
                )
            )

        def _reply(self, status: int, body: str) -> None:
            data = body.encode("utf-8")
            self.send_response(status)
            self.send_header("Content-Type", "text/plain; charset=utf-8")
            self.send_header("Content-Length", str(len(data)))
            self.end_headers()
            self.wfile.write(data)

        def do_GET(self) -> None:
            self._record()
            if self.path == "/ping":
                self._reply(server.ping_status, server.ping_body)
            else:
                self._reply(404, "not found")

        def do_POST(self) -> None:
            self._record()
            if self.path == "/blogs/updateOrAdd":
                self._reply(200, server.add_body)
            else:
                self._reply(404, "not found")

        def log_message(self, format: str, *args) -> None:
            pass

    return Handler


@pytest.fixture
def blog_server() -> Generator[BlogServer, None, None]:
    """Run a local blog server for the duration of a test."""
    state = BlogServer(host="127.0.0.1", port=0)
    httpd = ThreadingHTTPServer(("127.0.0.1", 0), _make_handler(state))
    state.port = httpd.server_address[1]
    thread = threading.Thread(target=httpd.serve_forever, daemon=True)
    thread.start()
    yield state
    httpd.shutdown()
    httpd.server_close()
    thread.join(timeout=5)


@pytest.fixture
def run_cli(isolated_home: Path) -> Callable[..., subprocess.CompletedProcess]:
    """
    Run cli.py as a separate process.

    Usage:
        result = run_cli("get")
        assert result.returncode == 0
    """
    env = {k: v for k, v in os.environ.items() if not k.startswith("BLOG_CLI_")}
    env["HOME"] = str(isolated_home)

    def _run(*args: str, timeout: float = 30) -> subprocess.CompletedProcess:
        return subprocess.run(
            [sys.executable, "cli.py", *args],
            cwd=PROJECT_ROOT,
            capture_output=True,
            text=True,
            env=env,
            timeout=timeout,
        )

    return _run
