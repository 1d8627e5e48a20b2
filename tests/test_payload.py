"""Unit tests for the gist request body."""

import json

import pytest

from gistup.errors import PayloadEncodeError
from gistup.github.payload import build_request, encode_payload
from gistup.sources import NamedContent


class TestEncodePayload:
    def test_wire_format(self):
        """The body should match the POST /gists schema."""
        items = [NamedContent("a.txt", "alpha"), NamedContent("b.py", "print('b')")]
        body = json.loads(encode_payload("my notes", True, items))
        assert body == {
            "description": "my notes",
            "public": True,
            "files": {"a.txt": {"content": "alpha"}, "b.py": {"content": "print('b')"}},
        }

    def test_secret_with_empty_description(self):
        body = json.loads(encode_payload("", False, [NamedContent("x", "y")]))
        assert body["public"] is False
        assert body["description"] == ""

    def test_keeps_file_order(self):
        items = [NamedContent(name, name) for name in ("z.txt", "a.txt", "m.txt")]
        body = json.loads(encode_payload("", True, items))
        assert list(body["files"]) == ["z.txt", "a.txt", "m.txt"]

    def test_non_ascii_is_utf8(self):
        body = encode_payload("café", True, [NamedContent("ü.txt", "naïve ☃")])
        assert "naïve ☃".encode("utf-8") in body
        assert json.loads(body.decode("utf-8"))["files"]["ü.txt"]["content"] == "naïve ☃"

    def test_requires_a_file(self):
        with pytest.raises(PayloadEncodeError):
            encode_payload("", True, [])

    def test_unencodable_content(self):
        """Lone surrogates cannot be sent and must not be dropped silently."""
        with pytest.raises(PayloadEncodeError):
            encode_payload("", True, [NamedContent("bad.txt", "oops \udc80")])


class TestBuildRequest:
    def test_files_map_to_content_records(self):
        request = build_request("d", True, [NamedContent("n", "c")])
        assert request.files["n"].content == "c"
