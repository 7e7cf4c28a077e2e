"""Config management commands for whatsup."""

from __future__ import annotations

import httpx
import msgspec
import typer
from rich.console import Console
from rich.markup import escape

from whatsup.cli.app import ExitCode
from whatsup.cli.app import app
from whatsup.cli.app import load_cli_config
from whatsup.cli.atyper import ATyper
from whatsup.config.paths import config_file
from whatsup.config.settings import save_config

# Create config group
config_app = ATyper(help="Manage configuration settings.")
app.add_typer(config_app, name="config")


@config_app.command("show")
def config_show_command(ctx: typer.Context) -> None:
    """Display current settings."""
    config = load_cli_config()

    if ctx.meta.get("json", False):
        from whatsup.display.json import output_json_pretty

        output_json_pretty(
            {
                "slack": config.slack,
                "fetch": {
                    "timeout": config.fetch.timeout,
                    "user_agent": config.fetch.user_agent,
                },
                "pages": config.pages,
                "path": str(config_file()),
            }
        )
        return

    console = Console()
    console.print(f"[dim]{config_file()}[/dim]\n")
    console.print(f"slack = {config.slack}")
    console.print(f"fetch.timeout = {config.fetch.timeout}")
    console.print(f"fetch.user_agent = {escape(config.fetch.user_agent)}")
    if not config.pages:
        console.print("pages = [dim](none)[/dim]")
    for name, url in config.pages.items():
        console.print(f"pages.{escape(name)} = {escape(url)}")


@config_app.command("path")
def config_path_command() -> None:
    """Show the config file path."""
    typer.echo(str(config_file()))


@config_app.command("add-page")
def config_add_page_command(
    name: str = typer.Argument(..., help="Label for the status page"),
    url: str = typer.Argument(..., help="Statuspage.io page or status API URL"),
) -> None:
    """Add or replace a Statuspage.io page."""
    console = Console()

    try:
        parsed = httpx.URL(url)
    except httpx.InvalidURL:
        parsed = None

    if parsed is None or parsed.scheme not in ("http", "https") or not parsed.host:
        console.print(f"[red]Invalid status page URL:[/red] {escape(url)}")
        raise typer.Exit(ExitCode.CONFIG_ERROR)

    config = load_cli_config()
    pages = {**config.pages, name: url}
    save_config(msgspec.structs.replace(config, pages=pages))
    console.print(f"[green]Added[/green] {escape(name)}")


@config_app.command("remove-page")
def config_remove_page_command(
    name: str = typer.Argument(..., help="Label of the page to remove"),
) -> None:
    """Remove a configured page."""
    console = Console()
    config = load_cli_config()

    if name not in config.pages:
        console.print(f"[yellow]No page named[/yellow] {escape(name)}")
        raise typer.Exit(ExitCode.CONFIG_ERROR)

    pages = {k: v for k, v in config.pages.items() if k != name}
    save_config(msgspec.structs.replace(config, pages=pages))
    console.print(f"[green]Removed[/green] {escape(name)}")
