"""Shared output writer for all pod streams."""

from __future__ import annotations

import asyncio
import sys
from typing import TextIO

from kubecronlogs.utils.colors import format_log_line


class OutputSink:
    """Serializes whole-line writes from concurrent pod streamers.

    Every write holds the lock for one complete, already formatted line, so
    lines from different pods can interleave but never split. Characters the
    stream's encoding cannot represent are written as backslash escapes.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream if stream is not None else sys.stdout
        self._encoding = getattr(self._stream, "encoding", None)
        self._lock = asyncio.Lock()
        self.lines_written = 0

    def _encodable(self, text: str) -> str:
        if not self._encoding:
            return text
        return text.encode(self._encoding, "backslashreplace").decode(self._encoding)

    async def write_line(self, pod_name: str, line: str) -> None:
        """Write a single colored, pod-prefixed log line."""
        text = self._encodable(format_log_line(pod_name, line))
        async with self._lock:
            self._stream.write(text)
            self._stream.flush()
            self.lines_written += 1
