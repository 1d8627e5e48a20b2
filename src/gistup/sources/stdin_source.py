"""Collect gist content from standard input."""

import sys
from typing import TextIO

from rich.console import Console

from gistup.log import get_logger
from gistup.sources._shared import (
    DEFAULT_FILE_NAME,
    NamedContent,
    check_override_count,
    report,
    resolve_name,
)

logger = get_logger(__name__)


def _read_text(stream: TextIO) -> str:
    """Read the whole stream, replacing bytes that are not valid UTF-8 with U+FFFD."""
    buffer = getattr(stream, "buffer", None)
    if buffer is not None:
        data = buffer.read()
    else:
        # Already decoded; undo surrogateescape so bad bytes get replaced too
        data = stream.read().encode("utf-8", errors="surrogateescape")
    return data.decode("utf-8", errors="replace")


def read_stdin(stream: TextIO | None = None) -> str:
    """Read stdin to EOF and rejoin its lines with "\\n" (no trailing newline)."""
    if stream is None:
        stream = sys.stdin

    lines = _read_text(stream).split("\n")
    if lines[-1] == "":
        lines.pop()
    return "\n".join(line.removesuffix("\r") for line in lines)


def collect_from_stdin(
    overrides: list[str],
    stream: TextIO | None = None,
    console: Console | None = None,
) -> list[NamedContent]:
    """
    Build the single gist file for piped input.

    Args:
        overrides: Parsed --name overrides (at most one allowed)
        stream: Input stream, defaults to sys.stdin
        console: Rich console for progress output

    Returns:
        One NamedContent, named by the override or gistfile1.txt
    """
    check_override_count(overrides, 1)
    name = resolve_name(overrides, 0, DEFAULT_FILE_NAME)

    content = read_stdin(stream)
    logger.debug("Read %d characters from stdin", len(content))

    items = [NamedContent(name=name, content=content, source="stdin")]
    report(items, console)
    return items
