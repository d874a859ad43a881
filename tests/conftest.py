"""Shared fixtures: a fake HTTP layer and a clean configuration environment."""

import io
import json
import logging
import os
import urllib.error

import pytest


class FakeResponse:
    def __init__(self, status: int, body: bytes):
        self.status = status
        self._body = body

    def read(self) -> bytes:
        return self._body

    def __enter__(self):
        return self

    def __exit__(self, *args):
        return False


class FakeServer:
    """Stands in for urllib.request.urlopen; replays queued responses in order."""

    def __init__(self):
        self.requests = []
        self._responses = []

    def queue(self, body=None, status: int = 200, error: Exception | None = None):
        if error is not None:
            self._responses.append(error)
            return
        if not isinstance(body, (str, bytes)):
            body = json.dumps(body)
        if isinstance(body, str):
            body = body.encode('utf-8')
        self._responses.append((status, body))

    def __call__(self, req, timeout=None):
        self.requests.append((req, timeout))
        item = self._responses.pop(0)
        if isinstance(item, Exception):
            raise item
        status, body = item
        if status >= 400:
            raise urllib.error.HTTPError(req.full_url, status, "error", {}, io.BytesIO(body))
        return FakeResponse(status, body)

    def payload(self, index: int = -1) -> dict:
        return json.loads(self.requests[index][0].data)

    def url(self, index: int = -1) -> str:
        return self.requests[index][0].full_url

    def header(self, name: str, index: int = -1):
        return self.requests[index][0].get_header(name)

    def timeout(self, index: int = -1):
        return self.requests[index][1]


@pytest.fixture
def server(monkeypatch):
    """Replace urlopen with a scripted fake server."""
    fake = FakeServer()
    monkeypatch.setattr("urllib.request.urlopen", fake)
    return fake


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """No config file, no GIT_MSG_* or credential variables."""
    for name in list(os.environ):
        if name.startswith("GIT_MSG_"):
            monkeypatch.delenv(name)
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    monkeypatch.delenv("HUGGINGFACE_TOKEN", raising=False)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("pathlib.Path.home", lambda: tmp_path / "fakehome")
    return tmp_path


@pytest.fixture(autouse=True)
def plain_terminal(monkeypatch):
    """Captured output is uncolored unless a test opts in."""
    monkeypatch.delenv("FORCE_COLOR", raising=False)


@pytest.fixture(autouse=True)
def reset_logging():
    """main() installs a stderr handler; drop it so later tests see a clean logger."""
    yield
    logger = logging.getLogger("git_msg")
    logger.handlers = []
    logger.setLevel(logging.NOTSET)
