"""Status page commands for whatsup."""

from __future__ import annotations

import asyncio
import time
from datetime import UTC
from datetime import datetime

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from whatsup.cli.app import ExitCode
from whatsup.cli.app import app
from whatsup.cli.app import load_cli_config
from whatsup.client import StatusPageClient
from whatsup.providers import slack
from whatsup.status import StatusResult


@app.command("slack")
async def slack_command(
    ctx: typer.Context,
    json_output: bool = typer.Option(
        False,
        "--json",
        "-j",
        help="Output in JSON format",
    ),
) -> None:
    """Show the current Slack status."""
    client = StatusPageClient(load_cli_config())
    result = await client.slack()
    render_results(ctx, {slack.SERVICE_NAME: result}, json_output)
    raise typer.Exit(exit_code_for({slack.SERVICE_NAME: result}))


@app.command("page")
async def page_command(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Label for the status page"),
    url: str = typer.Argument(..., help="Statuspage.io page or status API URL"),
    json_output: bool = typer.Option(
        False,
        "--json",
        "-j",
        help="Output in JSON format",
    ),
) -> None:
    """Show the status of a Statuspage.io-hosted page."""
    client = StatusPageClient(load_cli_config())
    result = await client.statuspage_io_service(name, url)
    render_results(ctx, {name: result}, json_output)
    raise typer.Exit(exit_code_for({name: result}))


@app.command("status")
async def status_command(
    ctx: typer.Context,
    json_output: bool = typer.Option(
        False,
        "--json",
        "-j",
        help="Output in JSON format",
    ),
) -> None:
    """Show Slack and every configured status page."""
    console = Console()
    config = load_cli_config()

    if not config.slack and not config.pages:
        console.print(
            "[yellow]No status pages configured.[/yellow] "
            "Add one with [cyan]whatsup config add-page NAME URL[/cyan]"
        )
        raise typer.Exit(ExitCode.CONFIG_ERROR)

    start_time = time.monotonic()
    results = await fetch_all_statuses(
        StatusPageClient(config), config.slack, config.pages
    )
    duration_ms = (time.monotonic() - start_time) * 1000

    render_results(ctx, results, json_output)
    if ctx.meta.get("verbose", False) and not _json_mode(ctx, json_output):
        console.print(f"\n[dim]Fetched in {duration_ms:.0f}ms[/dim]")

    raise typer.Exit(exit_code_for(results))


async def fetch_all_statuses(
    client: StatusPageClient,
    include_slack: bool,
    pages: dict[str, str],
) -> dict[str, StatusResult]:
    """Fetch Slack (optionally) and all pages concurrently."""
    if include_slack:
        slack_result, page_results = await asyncio.gather(
            client.slack(), client.statuspage_io_services(pages)
        )
        return {slack.SERVICE_NAME: slack_result, **page_results}
    return await client.statuspage_io_services(pages)


def exit_code_for(results: dict[str, StatusResult]) -> ExitCode:
    """Pick the exit code for a set of results."""
    failed = sum(1 for result in results.values() if result.error is not None)
    if failed == 0:
        return ExitCode.SUCCESS
    if failed == len(results):
        return ExitCode.REQUEST_ERROR
    return ExitCode.PARTIAL_FAILURE


def _json_mode(ctx: typer.Context, json_output: bool) -> bool:
    return json_output or ctx.meta.get("json", False)


def render_results(
    ctx: typer.Context,
    results: dict[str, StatusResult],
    json_output: bool = False,
) -> None:
    """Render results as JSON or as a table."""
    if _json_mode(ctx, json_output):
        from whatsup.display.json import from_result
        from whatsup.display.json import output_json_pretty

        output_json_pretty(
            [from_result(service, result) for service, result in results.items()]
        )
        return

    display_status_table(Console(), results)


def display_status_table(console: Console, results: dict[str, StatusResult]) -> None:
    """Display results in a table."""
    table = Table(title="Status", show_header=True, header_style="bold")
    table.add_column("Service", style="cyan")
    table.add_column("Indicator", style="bold")
    table.add_column("Name")
    table.add_column("Updated", style="dim")
    table.add_column("URL", style="dim")

    for service, result in results.items():
        if result.error is not None:
            table.add_row(
                service,
                "[red]error[/red]",
                str(result.error.code),
                "",
                escape(str(result.error.cause or result.error.message)),
            )
            continue

        details = result.details
        color = indicator_color(details.indicator)
        table.add_row(
            service,
            f"[{color}]{escape(details.indicator)}[/{color}]",
            escape(details.name),
            format_status_updated(details.updated_at),
            details.url,
        )

    console.print(table)


def indicator_color(indicator: str) -> str:
    """Get color for a provider indicator."""
    return {
        "none": "green",
        "ok": "green",
        "minor": "yellow",
        "maintenance": "blue",
        "major": "red",
        "active": "red",
        "critical": "bold red",
    }.get(indicator, "white")


def format_status_updated(dt: datetime) -> str:
    """Format status updated time."""
    now = datetime.now(UTC)
    delta = now - dt

    if delta.total_seconds() < 60:
        return "just now"
    if delta.days > 0:
        return f"{delta.days}d ago"
    hours = delta.seconds // 3600
    if hours > 0:
        return f"{hours}h ago"
    minutes = delta.seconds // 60
    if minutes > 0:
        return f"{minutes}m ago"
    return "just now"
