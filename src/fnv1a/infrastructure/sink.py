from __future__ import annotations

import asyncio
import sys
from typing import Callable, TextIO

from fnv1a.infrastructure.cancellation import CancellationToken


class LineSink:
    """
    Writes text lines to a stream. The async variant runs the write and
    flush in a worker thread so slow streams do not block the event loop.
    """

    def __init__(
        self,
        stream: TextIO | None = None,
        logger: Callable[[str], None] | None = None,
    ) -> None:
        self.stream = stream if stream is not None else sys.stdout
        self._logger = logger
        self.lines_written = 0

    def _log(self, message: str) -> None:
        if self._logger:
            self._logger(message)

    def write_line(self, text: str) -> None:
        self.stream.write(f"{text}\n")
        self.lines_written += 1
        self._log(f"[SINK] wrote: {text}")

    async def write_line_async(
        self,
        text: str,
        token: CancellationToken | None = None,
    ) -> None:
        if token is not None:
            token.raise_if_cancelled()
        await asyncio.to_thread(self._write_and_flush, text)
        self._log(f"[SINK] wrote (async): {text}")

    def _write_and_flush(self, text: str) -> None:
        self.stream.write(f"{text}\n")
        self.stream.flush()
        self.lines_written += 1
