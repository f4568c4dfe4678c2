"""Shared CLI output formatters and options."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click
from rich.console import Console
from rich.table import Table

if TYPE_CHECKING:
    from volmcp.protocols.mcp.models import ToolDescriptor

console = Console()
err_console = Console(stderr=True)

BACKEND_CHOICES = ["auto", "memory", "amixer", "osascript"]

config_option = click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="YAML settings file.",
)
backend_option = click.option(
    "--backend",
    type=click.Choice(BACKEND_CHOICES),
    default=None,
    help="Audio backend (default: auto-detect by platform).",
)


def print_status(volume: int, muted: bool) -> None:
    """Pretty-print the current audio state."""
    state = "[yellow]muted[/yellow]" if muted else "[green]not muted[/green]"
    console.print(f"Current volume: [bold]{volume}%[/bold]")
    console.print(f"System is {state}")


def print_tools_table(tools: tuple[ToolDescriptor, ...], *, as_json: bool = False) -> None:
    """Pretty-print the tool catalog as a table."""
    if as_json:
        console.print_json(json.dumps([t.model_dump(by_alias=True) for t in tools]))
        return

    table = Table(title="Volume Control Tools")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Arguments")
    table.add_column("Description")

    for tool in tools:
        properties = tool.input_schema.get("properties", {})
        table.add_row(tool.name, ", ".join(properties) or "-", _truncate(tool.description))

    console.print(table)


def _truncate(text: str, max_len: int = 80) -> str:
    if len(text) <= max_len:
        return text
    return text[: max_len - 3] + "..."
