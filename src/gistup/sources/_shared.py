"""Shared types and name handling for input sources."""

import os
from collections.abc import Sequence
from dataclasses import dataclass

from rich.console import Console
from rich.markup import escape

from gistup.errors import DuplicateFileNameError, EmptyFileNameError, TooManyOverrideNamesError

DEFAULT_FILE_NAME = "gistfile1.txt"


@dataclass(frozen=True)
class NamedContent:
    """One file of the gist: its name, its text and where it came from."""

    name: str
    content: str
    source: str = ""


def parse_override_names(raw: str | None) -> list[str]:
    """
    Split the comma separated --name value into positional overrides.

    Entries are kept verbatim, surrounding whitespace included.
    """
    if not raw:
        return []
    return raw.split(",")


def check_override_count(overrides: Sequence[str], item_count: int) -> None:
    """Fail when more override names were given than there are items."""
    if len(overrides) > item_count:
        raise TooManyOverrideNamesError()


def resolve_name(overrides: Sequence[str], index: int, default: str) -> str:
    """Return the override at index if there is one, else default."""
    if index < len(overrides):
        if not overrides[index]:
            raise EmptyFileNameError(index + 1)
        return overrides[index]
    return default


def default_name_for_path(path: str) -> str:
    """Final path segment of path: dir/sub/file.txt -> file.txt."""
    return os.path.basename(path)


def check_unique_names(items: Sequence[NamedContent]) -> None:
    """Gist files are keyed by name, so every name may appear only once."""
    seen: set[str] = set()
    for item in items:
        if item.name in seen:
            raise DuplicateFileNameError(item.name)
        seen.add(item.name)


def report(items: Sequence[NamedContent], console: Console | None) -> None:
    """Print one progress line per item."""
    if console is None:
        return
    for item in items:
        console.print(
            f"Uploading [cyan]{escape(item.source)}[/cyan] as [bold]{escape(item.name)}[/bold]",
            highlight=False,
            soft_wrap=True,
        )
