"""CLI entrypoint for gist uploads."""

from pathlib import Path
from typing import Annotated

import typer
from dotenv import find_dotenv, load_dotenv
from rich.console import Console
from rich.markup import escape

from gistup.config import TOKEN_ENV_VAR, RunConfig, load_api_config
from gistup.errors import GistError
from gistup.log import configure_logging, get_logger

app = typer.Typer(
    name="gist",
    help="Unofficial toolkit for file uploads to GitHub gist",
    no_args_is_help=True,
)
console = Console(stderr=True)
logger = get_logger(__name__)

LICENSE_TEXT = """\
gist - unofficial toolkit for file uploads to GitHub gist

Use of this software is governed by a BSD-style license.

Third-party libraries:
  typer, rich, pydantic, requests  (MIT / BSD licenses)
  pyperclip                        (BSD 3-clause license)
  python-dotenv, PyYAML            (BSD / MIT licenses)
"""

FilesArg = Annotated[
    list[str] | None,
    typer.Argument(help="Files to upload (globs are expanded by the shell)", show_default=False),
]
TokenOpt = Annotated[
    str,
    typer.Option(
        "--token", "-t", envvar=TOKEN_ENV_VAR, help="required GitHub Gist access token", show_default=False
    ),
]
ClipboardOpt = Annotated[bool, typer.Option("--clipboard", "-c", help="read from clipboard")]
NameOpt = Annotated[
    str, typer.Option("--name", "-n", help="comma separated file name override for Gist", show_default=False)
]
DescriptionOpt = Annotated[
    str, typer.Option("--description", "-d", help="gist description", show_default=False)
]
ConfigOpt = Annotated[
    Path | None,
    typer.Option("--config", help="API settings YAML (default: ~/.config/gist/config.yaml)"),
]
VerboseOpt = Annotated[bool, typer.Option("--verbose", "-v", help="Show debug logging")]


def _version_callback(value: bool) -> None:
    if value:
        from gistup import __version__

        typer.echo(f"gist version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option("--version", callback=_version_callback, is_eager=True, help="Print the version"),
    ] = False,
):
    """Unofficial toolkit for file uploads to GitHub gist."""
    # Values already in the environment win over .env
    load_dotenv(find_dotenv(usecwd=True), override=False)


def run_upload(config: RunConfig) -> str:
    """Resolve the input, assemble the files and upload them. Returns the gist URL."""
    from gistup.github import encode_payload, upload
    from gistup.sources import assemble, resolve_mode

    mode = resolve_mode(config.files, config.clipboard)
    logger.debug("Input mode: %s", mode.value)

    items = assemble(mode, config, console=console)
    body = encode_payload(config.description, config.public, items)
    return upload(body, config.token, api=config.api)


def _execute(
    public: bool,
    files: list[str] | None,
    token: str,
    clipboard: bool,
    name: str,
    description: str,
    config_path: Path | None,
    verbose: bool,
) -> None:
    configure_logging(verbose)
    try:
        config = RunConfig(
            public=public,
            token=token,
            clipboard=clipboard,
            names=name,
            description=description,
            files=tuple(files or ()),
            api=load_api_config(config_path),
        )
        url = run_upload(config)
    except GistError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]", highlight=False, soft_wrap=True)
        raise typer.Exit(1) from e

    typer.echo(url)


@app.command("public")
def public(
    files: FilesArg = None,
    token: TokenOpt = "",
    clipboard: ClipboardOpt = False,
    name: NameOpt = "",
    description: DescriptionOpt = "",
    config: ConfigOpt = None,
    verbose: VerboseOpt = False,
):
    """upload one or more public files"""
    _execute(True, files, token, clipboard, name, description, config, verbose)


@app.command("secret")
def secret(
    files: FilesArg = None,
    token: TokenOpt = "",
    clipboard: ClipboardOpt = False,
    name: NameOpt = "",
    description: DescriptionOpt = "",
    config: ConfigOpt = None,
    verbose: VerboseOpt = False,
):
    """upload one or more secret files (shh! it's a secret)"""
    _execute(False, files, token, clipboard, name, description, config, verbose)


@app.command("license")
def license_():
    """show licensing information"""
    typer.echo(LICENSE_TEXT)


@app.command()
def version():
    """Show version information."""
    from gistup import __version__

    typer.echo(f"gist version {__version__}")


# Short aliases: p / s / l
app.command("p", hidden=True)(public)
app.command("s", hidden=True)(secret)
app.command("l", hidden=True)(license_)


if __name__ == "__main__":
    app()
