"""``volmcp tools`` — list the tools the server advertises."""

from __future__ import annotations

import click

from volmcp.cli_commands._output import print_tools_table


@click.command()
@click.option("--step", type=click.IntRange(1, 100), default=10, help="Percent per increase/decrease.")
@click.option("--json", "as_json", is_flag=True, help="Print the catalog as JSON.")
def tools(step: int, as_json: bool) -> None:
    """Show the tool catalog returned by ``tools/list``."""
    from volmcp.protocols.mcp.catalog import build_catalog

    print_tools_table(build_catalog(step), as_json=as_json)
