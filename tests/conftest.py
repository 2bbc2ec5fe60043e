import json
import os
import socket
import sys
from pathlib import Path

import httpx
import pytest


REPO_ROOT = Path(__file__).resolve().parents[1]
SRC = REPO_ROOT / "src"
FIXTURES = Path(__file__).resolve().parent / "fixtures"

# Prefer repo sources over any installed package.
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


@pytest.fixture(autouse=True)
def block_network(monkeypatch):
    if os.getenv("LIVE") == "1":
        return

    real_connect = socket.socket.connect

    def guarded_connect(sock, address):
        host = address[0]
        if host not in ("127.0.0.1", "localhost"):
            raise RuntimeError("Network access blocked in tests")
        return real_connect(sock, address)

    monkeypatch.setattr(socket.socket, "connect", guarded_connect)


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    from reba.config import reset_settings_cache

    for name in ("RAPIDAPI_KEY", "RAPIDAPI_HOST", "REBA_DEMO", "REBA_TIMEOUT", "REBA_DEFAULT_LIMIT"):
        monkeypatch.delenv(name, raising=False)
    reset_settings_cache()
    yield
    reset_settings_cache()


def load_fixture(name):
    return json.loads((FIXTURES / name).read_text(encoding="utf-8"))


def realty_transport(routes, calls=None):
    """Build an httpx.MockTransport answering by request path.

    ``routes`` maps a path to either a JSON-able body (status 200) or a
    ``(status, body)`` tuple.
    """

    def handler(request: httpx.Request) -> httpx.Response:
        if calls is not None:
            calls.append(request)
        answer = routes.get(request.url.path)
        if answer is None:
            return httpx.Response(404, json={"message": "not found"})
        if isinstance(answer, tuple):
            status, body = answer
        else:
            status, body = 200, answer
        if isinstance(body, (bytes, str)):
            return httpx.Response(status, content=body)
        return httpx.Response(status, json=body)

    return httpx.MockTransport(handler)
