"""Shared fixtures: a threaded mock of the IAM and UAA token services."""

from __future__ import annotations

import base64
import json
import threading
from http.server import BaseHTTPRequestHandler, HTTPServer
from socketserver import ThreadingMixIn
from typing import Any, Iterator
from urllib.parse import parse_qs

import pytest


class TokenServer(ThreadingMixIn, HTTPServer):
    daemon_threads = True
    allow_reuse_address = True

    def __init__(self) -> None:
        super().__init__(("127.0.0.1", 0), _TokenHandler)
        self.requests: list[dict[str, Any]] = []
        self.valid_refresh_tokens = {"iam-refresh", "uaa-refresh"}
        self.fail_with: int | None = None

    @property
    def base_url(self) -> str:
        return f"http://127.0.0.1:{self.server_port}"


class _TokenHandler(BaseHTTPRequestHandler):
    server_version = "MockToken/1.0"
    protocol_version = "HTTP/1.1"

    def do_POST(self) -> None:
        server: TokenServer = self.server  # type: ignore[assignment]
        length = int(self.headers.get("Content-Length", "0"))
        form = {k: v[0] for k, v in parse_qs(self.rfile.read(length).decode("utf-8")).items()}
        server.requests.append(
            {"path": self.path, "form": form, "client": _basic_user(self.headers.get("Authorization"))}
        )

        if self.path not in ("/identity/token", "/oauth/token"):
            self._respond(404, {"error": "not_found"})
            return
        if server.fail_with is not None:
            self._respond(server.fail_with, {"error": "server_error"})
            return
        if form.get("refresh_token") not in server.valid_refresh_tokens:
            if self.path == "/identity/token":
                self._respond(400, {"errorCode": "BXNIM0407E", "errorMessage": "Provided refresh token is invalid"})
            else:
                self._respond(401, {"error": "invalid_token", "error_description": "Invalid refresh token"})
            return

        prefix = "iam" if self.path == "/identity/token" else "uaa"
        self._respond(
            200,
            {
                "access_token": f"new-{prefix}-access",
                "refresh_token": f"new-{prefix}-refresh",
                "token_type": "bearer",
                "expires_in": 3600,
            },
        )

    def _respond(self, status: int, body: dict[str, Any]) -> None:
        payload = json.dumps(body).encode("utf-8")
        self.send_response(status)
        self.send_header("Content-Type", "application/json")
        self.send_header("Content-Length", str(len(payload)))
        self.end_headers()
        self.wfile.write(payload)

    def log_message(self, format: str, *args: object) -> None:
        return


def _basic_user(header: str | None) -> str | None:
    if not header or not header.startswith("Basic "):
        return None
    decoded = base64.b64decode(header[len("Basic "):]).decode("utf-8")
    return decoded.split(":", 1)[0]


def start_token_server() -> TokenServer:
    server = TokenServer()
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    return server


def stop_token_server(server: TokenServer) -> None:
    server.shutdown()
    server.server_close()


@pytest.fixture
def token_server() -> Iterator[TokenServer]:
    server = start_token_server()
    try:
        yield server
    finally:
        stop_token_server(server)
