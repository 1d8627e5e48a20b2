"""GitHub gist API: request encoding and upload."""

from gistup.github.client import upload
from gistup.github.payload import GistFile, GistRequest, encode_payload

__all__ = ["GistFile", "GistRequest", "encode_payload", "upload"]
