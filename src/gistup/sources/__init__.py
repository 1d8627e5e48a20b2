"""Input sources: mode resolution and assembly of the gist files."""

from collections.abc import Callable
from typing import TextIO

from rich.console import Console

from gistup.config import RunConfig
from gistup.errors import NoInputDataError
from gistup.sources._shared import DEFAULT_FILE_NAME, NamedContent, parse_override_names
from gistup.sources.clipboard_source import collect_from_clipboard
from gistup.sources.file_source import collect_from_files
from gistup.sources.mode import InputMode, resolve_mode
from gistup.sources.stdin_source import collect_from_stdin


def assemble(
    mode: InputMode,
    config: RunConfig,
    stdin: TextIO | None = None,
    paste: Callable[[], str] | None = None,
    console: Console | None = None,
) -> list[NamedContent]:
    """Collect the gist files for an already resolved input mode."""
    overrides = parse_override_names(config.names)

    if mode is InputMode.STDIN:
        return collect_from_stdin(overrides, stream=stdin, console=console)
    if mode is InputMode.GLOBS:
        return collect_from_files(config.files, overrides, console=console)
    if mode is InputMode.CLIPBOARD:
        return collect_from_clipboard(overrides, config.token, paste=paste, console=console)
    raise NoInputDataError()


__all__ = [
    "DEFAULT_FILE_NAME",
    "InputMode",
    "NamedContent",
    "assemble",
    "collect_from_clipboard",
    "collect_from_files",
    "collect_from_stdin",
    "parse_override_names",
    "resolve_mode",
]
