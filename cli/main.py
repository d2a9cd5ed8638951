"""pho CLI — scraper for photo gallery 3 galleries.

Usage:
    python cli/main.py --help

Commands:
    ls     → print the remote album tree
    diff   → print remote albums missing from a local directory
    fetch  → download remote JPEG/PNG images into a local directory
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from pho.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import logging
from dataclasses import dataclass
from typing import Optional

import typer

from pho import __version__
from pho.config import ConfigError, settings
from pho.crawler import (
    Backoff,
    DiffVisitor,
    Fetcher,
    FetchVisitor,
    ListVisitor,
    TreeWalker,
    Visitor,
    WalkError,
    build_client,
)

app = typer.Typer(
    name="pho",
    help="scraper for photo gallery 3 galleries",
    no_args_is_help=True,
)

_RECURSE = typer.Option(False, "--recurse", "-r", help="will recursively walk the gallery")


@dataclass
class GlobalOptions:
    url: Optional[str]
    verbose: bool


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger("pho").setLevel(logging.DEBUG if verbose else logging.WARNING)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"pho {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    url: Optional[str] = typer.Option(
        None, "--url", envvar="PHOTO_GALLERY_URL", help="base url to the photo gallery"
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Log every traversed node and request."),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show the version and exit."
    ),
) -> None:
    """scraper for photo gallery 3 galleries"""
    _configure_logging(verbose)
    ctx.obj = GlobalOptions(url=url, verbose=verbose)


def _walk(ctx: typer.Context, remote_path: str, visitor: Visitor, recurse: bool) -> None:
    """Run one walk from *remote_path*, turning any failure into exit code 1."""
    options: GlobalOptions = ctx.obj
    try:
        address = options.url or settings.require_gallery_url()
    except ConfigError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1)

    with build_client(settings) as client:
        fetcher = Fetcher(client, Backoff.from_settings(settings))
        walker = TreeWalker(fetcher, address, prefix=settings.albums_prefix)
        try:
            walker.walk(remote_path, visitor, recurse=recurse)
        except WalkError as exc:
            typer.echo(f"Error: {exc}", err=True)
            raise typer.Exit(code=1)


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

@app.command("ls")
def ls(
    ctx: typer.Context,
    remote_path: str = typer.Argument("", help="Remote album path."),
    recurse: bool = _RECURSE,
) -> None:
    """pho ls [path]"""
    _walk(ctx, remote_path, ListVisitor(echo=typer.echo), recurse)


app.command("list", help="Alias of ls.")(ls)


@app.command("diff")
def diff(
    ctx: typer.Context,
    remote_path: str = typer.Argument("/", help="Remote album path."),
    local_path: str = typer.Argument(".", help="Local directory mirroring the gallery."),
    recurse: bool = _RECURSE,
) -> None:
    """pho diff [remote path] [local path]"""
    _walk(ctx, remote_path, DiffVisitor(local_path, echo=typer.echo), recurse)


@app.command("fetch")
def fetch(
    ctx: typer.Context,
    remote_path: str = typer.Argument("/", help="Remote album path."),
    local_path: str = typer.Argument(".", help="Local directory to download into."),
    recurse: bool = _RECURSE,
) -> None:
    """pho fetch [remote path] [local path]"""
    _walk(ctx, remote_path, FetchVisitor(local_path, echo=typer.echo), recurse)


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
