"""
Errors raised while collecting input and uploading a gist.

Every error is terminal: it is raised where it is detected and travels
unchanged to the CLI, which prints its message once and exits non-zero.
"""


class GistError(Exception):
    """Base exception for all gist errors."""

    message = "an unknown error occurred"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class NoInputDataError(GistError):
    message = "no input data has been specified"


class TooManyOverrideNamesError(GistError):
    message = "more override file names than inputs have been provided"


class FileReadError(GistError):
    """Raised when one of the given files cannot be read."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"cannot read file {path}")


class ClipboardReadError(GistError):
    message = "cannot read data from clipboard"


class TokenInClipboardError(GistError):
    message = "the clipboard is populated with the API token"


class DuplicateFileNameError(GistError):
    """Raised when two inputs resolve to the same gist file name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"file name {name!r} is used more than once")


class EmptyFileNameError(GistError):
    """Raised when an override in the --name list is empty."""

    def __init__(self, position: int) -> None:
        self.position = position
        super().__init__(f"override file name {position} is empty")


class PayloadEncodeError(GistError):
    message = "cannot encode gist payload"


class MissingTokenError(GistError):
    message = "no API token provided (use --token or set GIST_KEY)"


class InvalidAuthError(GistError):
    message = "invalid API token"


class NetworkError(GistError):
    message = "cannot send request to GitHub"


class BadResponseError(GistError):
    message = "cannot read reply from GitHub"


class UpstreamError(GistError):
    """Raised for any unexpected status; carries the raw response body."""

    def __init__(self, body: str, status_code: int | None = None) -> None:
        self.body = body
        self.status_code = status_code
        super().__init__(body or f"GitHub returned status {status_code}")


class ConfigError(GistError):
    message = "invalid configuration"
