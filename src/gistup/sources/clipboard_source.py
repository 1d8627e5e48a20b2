"""Collect gist content from the system clipboard."""

from collections.abc import Callable

import pyperclip
from rich.console import Console

from gistup.errors import ClipboardReadError, TokenInClipboardError
from gistup.log import get_logger
from gistup.sources._shared import (
    DEFAULT_FILE_NAME,
    NamedContent,
    check_override_count,
    report,
    resolve_name,
)

logger = get_logger(__name__)


def read_clipboard(paste: Callable[[], str] | None = None) -> str:
    """Return the clipboard text, raising ClipboardReadError on failure."""
    if paste is None:
        paste = pyperclip.paste
    try:
        text = paste()
    except pyperclip.PyperclipException as e:
        logger.debug("Clipboard access failed: %s", e)
        raise ClipboardReadError() from e
    if text is None:
        raise ClipboardReadError()
    return text


def collect_from_clipboard(
    overrides: list[str],
    token: str,
    paste: Callable[[], str] | None = None,
    console: Console | None = None,
) -> list[NamedContent]:
    """
    Build the single gist file from the clipboard.

    Refuses to upload when the clipboard holds exactly the API token, which
    happens easily right after copying it from GitHub.

    Args:
        overrides: Parsed --name overrides (at most one allowed)
        token: API token the upload will authenticate with
        paste: Clipboard reader, defaults to pyperclip.paste
        console: Rich console for progress output

    Returns:
        One NamedContent, named by the override or gistfile1.txt
    """
    check_override_count(overrides, 1)
    name = resolve_name(overrides, 0, DEFAULT_FILE_NAME)

    text = read_clipboard(paste)
    if token and text == token:
        raise TokenInClipboardError()

    items = [NamedContent(name=name, content=text, source="clipboard")]
    report(items, console)
    return items
