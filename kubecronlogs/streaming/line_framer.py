"""Line framing for chunked log streams.

Log bytes arrive from kubectl in reads of arbitrary size, so a single line can
be split across several chunks and a chunk can hold many lines. LineFramer
keeps the unterminated tail of the previous chunk and only hands out lines
once their newline has been seen (or the stream has ended).

Usage:
    framer = LineFramer()
    for chunk in chunks:
        for line in framer.feed(chunk):
            ...
    for line in framer.flush():
        ...
"""

from __future__ import annotations

import codecs
from collections.abc import AsyncIterable, AsyncIterator, Iterable, Iterator


class LineFramer:
    """Reassembles complete, NUL-free, non-blank lines from stream chunks."""

    def __init__(self, encoding: str = "utf-8") -> None:
        self._decoder = codecs.getincrementaldecoder(encoding)(errors="replace")
        self._residual = ""

    @staticmethod
    def _clean(line: str) -> str | None:
        """Strip NULs and a CR terminator; None when nothing printable is left."""
        line = line.replace("\x00", "")
        if line.endswith("\r"):
            line = line[:-1]
        if not line.strip():
            return None
        return line

    def feed(self, chunk: bytes | str) -> list[str]:
        """Consume one chunk and return the lines it completed, in order."""
        text = self._decoder.decode(chunk) if isinstance(chunk, bytes) else chunk
        if not text:
            return []

        segments = (self._residual + text).split("\n")
        self._residual = segments.pop()

        lines: list[str] = []
        for segment in segments:
            line = self._clean(segment)
            if line is not None:
                lines.append(line)
        return lines

    def flush(self) -> list[str]:
        """Emit the trailing line that had no newline at end-of-stream."""
        tail = self._residual + self._decoder.decode(b"", final=True)
        self._residual = ""
        line = self._clean(tail)
        return [line] if line is not None else []

    @property
    def pending(self) -> str:
        """Text carried over and not yet emitted."""
        return self._residual


def iter_lines(chunks: Iterable[bytes | str]) -> Iterator[str]:
    """Lazily frame a synchronous chunk iterable into lines."""
    framer = LineFramer()
    for chunk in chunks:
        yield from framer.feed(chunk)
    yield from framer.flush()


async def aiter_lines(chunks: AsyncIterable[bytes | str]) -> AsyncIterator[str]:
    """Lazily frame an asynchronous chunk iterable into lines."""
    framer = LineFramer()
    async for chunk in chunks:
        for line in framer.feed(chunk):
            yield line
    for line in framer.flush():
        yield line
