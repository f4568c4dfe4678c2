"""``volmcp status`` — show the current volume and mute state."""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

import click

from volmcp.cli_commands._output import backend_option, config_option, console, print_status


@click.command()
@config_option
@backend_option
def status(config_path: str | None, backend: str | None) -> None:
    """Print the current system volume and mute status."""
    from volmcp.audio.controller import AudioController
    from volmcp.audio.factory import create_backend
    from volmcp.config import load_settings

    async def _read() -> tuple[int, bool]:
        settings = load_settings(Path(config_path) if config_path else None, backend=backend)
        audio = AudioController(create_backend(settings.backend), step=settings.volume_step)
        return await audio.get_volume(), await audio.get_muted()

    try:
        volume, muted = asyncio.run(_read())
    except Exception as exc:
        console.print(f"[red]Error reading audio state:[/red] {exc}")
        sys.exit(1)

    print_status(volume, muted)
