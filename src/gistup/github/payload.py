"""Request body for creating a gist."""

import json
from collections.abc import Sequence

from pydantic import BaseModel

from gistup.errors import PayloadEncodeError
from gistup.sources import NamedContent


class GistFile(BaseModel):
    content: str


class GistRequest(BaseModel):
    """Body of POST /gists."""

    description: str = ""
    public: bool = False
    files: dict[str, GistFile]


def build_request(description: str, public: bool, items: Sequence[NamedContent]) -> GistRequest:
    """Map each item's name to its content, keeping item order."""
    if not items:
        raise PayloadEncodeError("a gist needs at least one file")
    files = {item.name: GistFile(content=item.content) for item in items}
    return GistRequest(description=description, public=public, files=files)


def encode_payload(description: str, public: bool, items: Sequence[NamedContent]) -> bytes:
    """
    Serialize the gist request to UTF-8 JSON.

    Args:
        description: Gist description (may be empty)
        public: Visibility of the gist
        items: Files to upload

    Returns:
        Encoded request body
    """
    try:
        request = build_request(description, public, items)
        return json.dumps(request.model_dump(), ensure_ascii=False).encode("utf-8")
    except (TypeError, ValueError) as e:
        raise PayloadEncodeError() from e
