"""MCPServer — reads request lines, dispatches them, writes response lines.

Every line is handled in its own task, so a slow backend call does not
stop intake of further lines. Responses are therefore not guaranteed to
leave in arrival order; callers correlate them by ``id``.
"""

from __future__ import annotations

import asyncio
import logging
import sys
from typing import TYPE_CHECKING, BinaryIO

from volmcp.audio.controller import AudioController
from volmcp.audio.factory import create_backend
from volmcp.protocols.mcp.dispatcher import Dispatcher
from volmcp.protocols.mcp.transport import LineReader, LineWriter

if TYPE_CHECKING:
    from volmcp.audio.backend import AudioBackend
    from volmcp.config.models import ServerSettings

logger = logging.getLogger(__name__)


class MCPServer:
    """Pumps lines from a :class:`LineReader` through a :class:`Dispatcher`."""

    def __init__(self, dispatcher: Dispatcher, reader: LineReader, writer: LineWriter) -> None:
        self._dispatcher = dispatcher
        self._reader = reader
        self._writer = writer
        self._pending: set[asyncio.Task[None]] = set()

    async def serve(self) -> None:
        """Run until the input stream ends and all in-flight requests are answered."""
        logger.info("Server ready; waiting for requests on stdin")
        async for line in self._reader:
            task = asyncio.create_task(self._handle(line))
            self._pending.add(task)
            task.add_done_callback(self._pending.discard)

        if self._pending:
            logger.debug("Input closed; waiting for %d in-flight request(s)", len(self._pending))
            await asyncio.gather(*self._pending)
        logger.info("Server stopped")

    async def _handle(self, line: str) -> None:
        try:
            response = await self._dispatcher.handle_line(line)
            if response is not None:
                await self._writer.write_line(response.to_line())
        except Exception:
            logger.exception("Unhandled error while processing message")


def build_server(
    settings: ServerSettings,
    *,
    backend: AudioBackend | None = None,
    stdin: BinaryIO | None = None,
    stdout: BinaryIO | None = None,
) -> MCPServer:
    """Wire backend, controller, dispatcher and stdio framing from *settings*."""
    if backend is None:
        backend = create_backend(settings.backend)
    audio = AudioController(backend, step=settings.volume_step)
    dispatcher = Dispatcher(audio, server_name=settings.name, server_version=settings.version)
    logger.info(
        "Using %s backend (step %d%%)", type(backend).__name__, settings.volume_step
    )
    return MCPServer(
        dispatcher,
        LineReader(stdin if stdin is not None else sys.stdin.buffer),
        LineWriter(stdout if stdout is not None else sys.stdout.buffer),
    )
