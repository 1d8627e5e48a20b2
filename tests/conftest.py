"""Pytest fixtures for gistup tests."""

import io
from unittest.mock import MagicMock

import pytest
import requests


class FakeStream(io.StringIO):
    """StringIO that can pretend to be a terminal."""

    def __init__(self, value: str = "", tty: bool = False):
        super().__init__(value)
        self._tty = tty

    def isatty(self) -> bool:
        if self.closed:
            raise ValueError("I/O operation on closed file")
        return self._tty


@pytest.fixture
def piped_stdin():
    """Factory for non-interactive stdin streams."""
    return lambda text="": FakeStream(text, tty=False)


@pytest.fixture
def tty_stdin():
    return FakeStream(tty=True)


@pytest.fixture
def make_response():
    """Build a requests.Response with the given status and body."""

    def _make(status_code: int, body: str = "") -> requests.Response:
        response = requests.Response()
        response.status_code = status_code
        response._content = body.encode("utf-8")
        response.encoding = "utf-8"
        return response

    return _make


@pytest.fixture
def session(make_response):
    """Mock session whose post() returns a 201 with a gist URL."""
    mock = MagicMock(spec=requests.Session)
    mock.post.return_value = make_response(201, '{"html_url": "https://gist.example/abc123"}')
    return mock


@pytest.fixture
def text_files(tmp_path):
    """Create a few text files and return their paths as strings."""

    def _make(*names: str, content: str | None = None) -> list[str]:
        paths = []
        for name in names:
            path = tmp_path / name
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content if content is not None else f"contents of {name}", encoding="utf-8")
            paths.append(str(path))
        return paths

    return _make
