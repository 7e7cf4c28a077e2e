"""Main CLI application for whatsup."""

from __future__ import annotations

import logging
from enum import IntEnum

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from whatsup.cli.atyper import ATyper
from whatsup.config.settings import CONFIG_ERRORS
from whatsup.config.settings import Config
from whatsup.config.settings import get_config

# Create the main app
app = ATyper(
    name="whatsup",
    help="Check third-party status pages",
    add_completion=False,
    no_args_is_help=False,
    invoke_without_command=True,
)


class ExitCode(IntEnum):
    """Exit codes for whatsup."""

    SUCCESS = 0
    GENERAL_ERROR = 1
    REQUEST_ERROR = 3
    CONFIG_ERROR = 4
    PARTIAL_FAILURE = 5


def configure_logging(verbose: bool) -> None:
    """Send library log records to stderr through Rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[
            RichHandler(console=Console(stderr=True), show_path=False)
        ],
        force=True,
    )


def load_cli_config() -> Config:
    """Load the user config, exiting with CONFIG_ERROR if it is invalid."""
    try:
        return get_config()
    except CONFIG_ERRORS as e:
        console = Console(stderr=True)
        console.print(f"[red]Invalid configuration:[/red] {escape(str(e))}")
        raise typer.Exit(ExitCode.CONFIG_ERROR) from None


@app.callback()
def main(
    ctx: typer.Context,
    json: bool = typer.Option(False, "--json", "-j", help="Enable JSON output mode"),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose output"
    ),
    version: bool = typer.Option(False, "--version", help="Show version and exit"),
) -> None:
    """Whatsup - Check third-party status pages."""
    if version:
        from whatsup import __version__

        typer.echo(f"whatsup {__version__}")
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()

    configure_logging(verbose)

    ctx.meta["json"] = json
    ctx.meta["verbose"] = verbose


def run_app() -> None:
    """Run the CLI application."""
    app()


# Import command modules - they register themselves with the app
# These imports must come after app is defined
from whatsup.cli.commands import config  # noqa: E402, F401
from whatsup.cli.commands import status  # noqa: E402, F401
