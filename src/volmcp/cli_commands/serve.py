"""``volmcp serve`` — run the tool server on stdin/stdout."""

from __future__ import annotations

import asyncio
import logging
import sys
from pathlib import Path

import click

from volmcp.cli_commands._output import backend_option, config_option, err_console

logger = logging.getLogger(__name__)


@click.command()
@config_option
@backend_option
@click.option("--step", type=click.IntRange(1, 100), default=None, help="Percent per increase/decrease.")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Diagnostic log level (logs go to stderr).",
)
@click.option("--telemetry", is_flag=True, help="Enable OpenTelemetry tracing.")
def serve(
    config_path: str | None,
    backend: str | None,
    step: int | None,
    log_level: str | None,
    telemetry: bool,
) -> None:
    """Serve volume tools over line-delimited JSON-RPC on stdin/stdout.

    stdout carries protocol messages only; diagnostics are written to stderr.
    """
    from volmcp.audio.errors import BackendError
    from volmcp.config import ConfigValidationError, load_settings
    from volmcp.protocols.mcp.server import build_server
    from volmcp.utils.diagnostics import stderr_diagnostics

    try:
        settings = load_settings(
            Path(config_path) if config_path else None,
            backend=backend,
            step=step,
            log_level=log_level,
            telemetry=telemetry,
        )
    except ConfigValidationError as exc:
        err_console.print(f"[red]Configuration error:[/red] {exc}")
        sys.exit(1)

    protocol_in = sys.stdin.buffer
    protocol_out = sys.stdout.buffer

    with stderr_diagnostics(settings.log_level):
        if settings.telemetry.enabled:
            from volmcp.utils.telemetry import configure_telemetry

            try:
                configure_telemetry(
                    service_name=settings.name,
                    otlp_endpoint=settings.telemetry.otlp_endpoint,
                )
            except ImportError as exc:
                logger.error("Telemetry disabled: %s", exc)

        try:
            server = build_server(settings, stdin=protocol_in, stdout=protocol_out)
        except BackendError as exc:
            logger.error("Cannot start server: %s", exc)
            sys.exit(1)

        try:
            asyncio.run(server.serve())
        except KeyboardInterrupt:
            logger.info("Interrupted")
