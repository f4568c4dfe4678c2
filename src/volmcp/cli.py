"""volmcp CLI entrypoint."""

from __future__ import annotations

import click

from volmcp import __version__


@click.group()
@click.version_option(version=__version__, prog_name="volmcp")
def main() -> None:
    """volmcp — system volume control tools for MCP clients."""


# Register subcommands
from volmcp.cli_commands import register_commands  # noqa: E402

register_commands(main)

if __name__ == "__main__":
    main()
