"""Tests for OutputSink."""

from __future__ import annotations

import asyncio
import io

import pytest

from kubecronlogs.streaming.output_sink import OutputSink
from kubecronlogs.utils.colors import format_log_line


class TestOutputSink:
    """Tests for OutputSink."""

    @pytest.mark.asyncio
    async def test_writes_formatted_line(self, output: io.StringIO, sink: OutputSink) -> None:
        await sink.write_line("pod-a", "hello")

        assert output.getvalue() == format_log_line("pod-a", "hello")
        assert sink.lines_written == 1

    @pytest.mark.asyncio
    async def test_concurrent_writers_never_split_lines(
        self, output: io.StringIO, sink: OutputSink
    ) -> None:
        async def writer(pod: str) -> None:
            for index in range(50):
                await sink.write_line(pod, f"{pod} line {index}")

        await asyncio.gather(writer("pod-a"), writer("pod-b"), writer("pod-c"))

        rendered = output.getvalue().splitlines(keepends=True)
        assert len(rendered) == 150
        expected = {
            format_log_line(pod, f"{pod} line {index}")
            for pod in ("pod-a", "pod-b", "pod-c")
            for index in range(50)
        }
        assert set(rendered) == expected

    @pytest.mark.asyncio
    async def test_unencodable_characters_are_escaped(self) -> None:
        raw = io.BytesIO()
        stream = io.TextIOWrapper(raw, encoding="ascii", newline="\n")
        sink = OutputSink(stream)

        await sink.write_line("pod-a", "café �")

        assert raw.getvalue() == format_log_line("pod-a", "caf\\xe9 \\ufffd").encode("ascii")
        assert sink.lines_written == 1
