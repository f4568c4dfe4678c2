"""Stdio framing — newline-delimited UTF-8 text over byte streams.

``LineReader`` turns an inbound byte stream into an async sequence of
text lines; ``LineWriter`` writes whole response lines to the outbound
stream. Neither looks at message content.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterator
from typing import BinaryIO

logger = logging.getLogger(__name__)


class LineReader:
    """Lazily yields one decoded line per newline-terminated chunk of *stream*.

    Blocking reads run in the default executor so the event loop keeps
    serving in-flight requests while waiting for input. Undecodable bytes
    are replaced rather than rejected. The sequence ends when the stream
    reaches EOF or raises; no partial line is synthesized on error.
    """

    def __init__(self, stream: BinaryIO, *, encoding: str = "utf-8") -> None:
        self._stream = stream
        self._encoding = encoding

    def __aiter__(self) -> AsyncIterator[str]:
        return self._lines()

    async def _lines(self) -> AsyncIterator[str]:
        loop = asyncio.get_running_loop()
        while True:
            try:
                raw: bytes = await loop.run_in_executor(None, self._stream.readline)
            except (OSError, ValueError) as exc:
                logger.error("Input stream failed: %s", exc)
                return
            if not raw:
                logger.debug("Input stream closed")
                return
            yield raw.decode(self._encoding, errors="replace").rstrip("\r\n")


class LineWriter:
    """Writes complete lines to *stream*, one writer at a time."""

    def __init__(self, stream: BinaryIO, *, encoding: str = "utf-8") -> None:
        self._stream = stream
        self._encoding = encoding
        self._lock = asyncio.Lock()

    async def write_line(self, line: str) -> None:
        """Write *line* (newline appended if missing) and flush."""
        if not line.endswith("\n"):
            line += "\n"
        data = line.encode(self._encoding)
        async with self._lock:
            self._stream.write(data)
            self._stream.flush()
