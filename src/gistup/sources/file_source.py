"""Collect gist content from local files."""

from collections.abc import Sequence
from pathlib import Path

from rich.console import Console

from gistup.errors import FileReadError
from gistup.log import get_logger
from gistup.sources._shared import (
    NamedContent,
    check_override_count,
    check_unique_names,
    default_name_for_path,
    report,
    resolve_name,
)

logger = get_logger(__name__)


def read_file(path: str) -> str:
    """Read a whole file as UTF-8 text, line endings untouched."""
    try:
        return Path(path).read_bytes().decode("utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("Failed to read %s: %s", path, e)
        raise FileReadError(path) from e


def collect_from_files(
    paths: Sequence[str],
    overrides: list[str],
    console: Console | None = None,
) -> list[NamedContent]:
    """
    Build one gist file per path, in the order given.

    Flow:
    1. Check the override count against the number of paths
    2. Read every file, aborting on the first failure
    3. Name each file by its override, or by its final path segment
    4. Reject duplicate names

    Args:
        paths: File paths as passed on the command line
        overrides: Parsed --name overrides, applied positionally
        console: Rich console for progress output

    Returns:
        List of NamedContent in argument order
    """
    check_override_count(overrides, len(paths))

    items: list[NamedContent] = []
    for i, path in enumerate(paths):
        content = read_file(path)
        name = resolve_name(overrides, i, default_name_for_path(path))
        items.append(NamedContent(name=name, content=content, source=path))

    check_unique_names(items)
    report(items, console)
    return items
