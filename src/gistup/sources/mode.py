"""Decide which input source an invocation uses."""

import sys
from collections.abc import Sequence
from enum import Enum
from typing import TextIO


class InputMode(str, Enum):
    """Mutually exclusive input sources."""

    STDIN = "stdin"
    GLOBS = "globs"
    CLIPBOARD = "clipboard"
    ERROR = "error"


def is_interactive(stream: TextIO | None) -> bool:
    """True when stream is a terminal (or missing), false when piped or redirected."""
    if stream is None:
        return True
    try:
        return stream.isatty()
    except ValueError:
        # closed stream
        return True


def resolve_mode(
    args: Sequence[str],
    clipboard: bool,
    stdin: TextIO | None = None,
) -> InputMode:
    """
    Resolve the input mode from the positional arguments and clipboard flag.

    Priority:
    1. clipboard flag wins, arguments are ignored
    2. no arguments: piped stdin, or an error when stdin is a terminal
    3. otherwise the arguments are file paths

    Args:
        args: Positional arguments (shell-expanded file paths)
        clipboard: Whether --clipboard was given
        stdin: Stream to inspect, defaults to sys.stdin

    Returns:
        The resolved InputMode
    """
    if clipboard:
        return InputMode.CLIPBOARD
    if not args:
        if stdin is None:
            stdin = sys.stdin
        if is_interactive(stdin):
            return InputMode.ERROR
        return InputMode.STDIN
    return InputMode.GLOBS
