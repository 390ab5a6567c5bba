"""Typer-based CLI for git-open."""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from . import __version__
from .app import resolve_browse_target
from .browser import launch
from .config import load_settings
from .exceptions import BrowserError, GitOpenError
from .models import BrowseTarget

app = typer.Typer(add_completion=False, help="Open the web page of the current git repository")
err_console = Console(stderr=True)


def configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s", force=True)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"git-open {__version__}")
        raise typer.Exit()


@app.command()
def main(
    path: Path | None = typer.Argument(None, help="File or directory to open (defaults to the current directory)."),
    master: bool = typer.Option(False, "-m", "--master", help="Open the master branch instead of the current one."),
    root: bool = typer.Option(False, "-r", "--root", help="Open the root of the repository."),
    no_open: bool = typer.Option(False, "-n", "--no-open", help="Do not open a browser, just print the link."),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable verbose logging."),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the git-open version and exit.",
    ),
) -> None:
    """Open the browse page for PATH on the repository's web server."""

    _ = version  # handled via callback
    configure_logging(verbose)
    try:
        settings = load_settings()
        target = resolve_browse_target(
            Path.cwd(),
            path,
            use_default_branch=master,
            root_only=root,
        )
    except GitOpenError as exc:
        _fail(str(exc))

    if verbose:
        _render_target(target)

    if no_open or settings.no_open:
        typer.echo(f"URL: {target.url}")
        return

    typer.echo(f"Opening: {target.url}")
    try:
        launch(target.url, override=settings.browser_command)
    except BrowserError as exc:
        typer.secho(f"Failed to open browser: {exc}", err=True, fg=typer.colors.YELLOW)
        typer.echo("Please open the following URL manually:")
        typer.echo(target.url)


def _render_target(target: BrowseTarget) -> None:
    table = Table(show_header=False, box=None)
    table.add_column("Key", style="bold")
    table.add_column("Value")
    table.add_row("Repository", escape(str(target.repo_root)))
    table.add_row("Remote", escape(target.remote_url))
    table.add_row("Server", escape(target.repo.slug))
    branch = target.branch + (" (default)" if target.is_default_branch else "")
    table.add_row("Branch", escape(branch))
    table.add_row("Path", escape(target.relative_path or "/"))
    err_console.print(table)


def _fail(message: str, code: int = 1) -> None:
    typer.secho(f"Error: {message}", err=True, fg=typer.colors.RED)
    raise typer.Exit(code)


if __name__ == "__main__":
    app()
