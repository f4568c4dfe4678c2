"""Tracing for the volmcp request path.

The dispatcher opens one ``mcp.request`` span per answered line and tags
it with the JSON-RPC method and request id. ``tools/call`` spans also
record the tool name, whether the result was an error and, for errors,
the failure kind (``validation``, ``unknown_tool`` or ``backend``).

Only ``opentelemetry-api`` is a hard dependency, so these spans cost
nothing until ``volmcp serve --telemetry`` (or ``telemetry.enabled`` in
the settings file) calls :func:`configure_telemetry`, which needs the
``otel`` extra. Console span output is written to stderr because stdout
is the protocol channel.
"""

from __future__ import annotations

import sys
from typing import Any

from opentelemetry import trace

# Attributes set on ``mcp.request`` spans
ATTR_METHOD = "volmcp.rpc.method"
ATTR_REQUEST_ID = "volmcp.rpc.request_id"
ATTR_TOOL_NAME = "volmcp.tool.name"
ATTR_TOOL_IS_ERROR = "volmcp.tool.is_error"
ATTR_FAILURE_KIND = "volmcp.tool.failure_kind"

_INSTRUMENTATION_NAME = "volmcp"

_INSTALL_HINT = "Install it with: pip install volume-control-mcp[otel]"


def get_tracer(name: str | None = None) -> trace.Tracer:
    """Tracer for *name*, defaulting to the ``volmcp`` instrumentation scope."""
    return trace.get_tracer(name or _INSTRUMENTATION_NAME)


def configure_telemetry(
    *,
    service_name: str = "volmcp",
    export_to_console: bool = True,
    otlp_endpoint: str | None = None,
) -> None:
    """Install a global tracer provider for the server process.

    Parameters
    ----------
    service_name:
        Reported as ``service.name``; ``serve`` passes the configured server name.
    export_to_console:
        Print finished request spans to stderr.
    otlp_endpoint:
        Also ship spans to this OTLP/gRPC collector (``telemetry.otlp_endpoint``).

    Raises
    ------
    ImportError
        If ``opentelemetry-sdk`` (or, with *otlp_endpoint*, the OTLP exporter)
        is missing. ``serve`` logs this and keeps running untraced.
    """
    try:
        from opentelemetry.sdk.resources import Resource  # pyright: ignore[reportMissingImports]
        from opentelemetry.sdk.trace import TracerProvider  # pyright: ignore[reportMissingImports]
        from opentelemetry.sdk.trace.export import BatchSpanProcessor, SimpleSpanProcessor  # pyright: ignore[reportMissingImports]
    except ImportError as exc:
        msg = f"opentelemetry-sdk is required for request tracing. {_INSTALL_HINT}"
        raise ImportError(msg) from exc

    provider = TracerProvider(resource=Resource.create({"service.name": service_name}))

    if export_to_console:
        _add_console_exporter(provider, SimpleSpanProcessor)
    if otlp_endpoint:
        _add_otlp_exporter(provider, BatchSpanProcessor, otlp_endpoint)

    trace.set_tracer_provider(provider)


def _add_console_exporter(provider: Any, processor_cls: Any) -> None:
    from opentelemetry.sdk.trace.export import ConsoleSpanExporter  # pyright: ignore[reportMissingImports]

    # never stdout: that stream carries JSON-RPC responses
    provider.add_span_processor(processor_cls(ConsoleSpanExporter(out=sys.stderr)))


def _add_otlp_exporter(provider: Any, processor_cls: Any, endpoint: str) -> None:
    try:
        from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter  # pyright: ignore[reportMissingImports]
    except ImportError as exc:
        msg = f"opentelemetry-exporter-otlp is required to export spans to {endpoint}."
        raise ImportError(f"{msg} {_INSTALL_HINT}") from exc

    provider.add_span_processor(processor_cls(OTLPSpanExporter(endpoint=endpoint)))
