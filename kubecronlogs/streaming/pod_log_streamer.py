"""Per-pod log streaming onto the shared output sink."""

from __future__ import annotations

import asyncio
import logging
import time
from contextlib import nullcontext
from typing import Any

from kubecronlogs.constants.enums import StreamState
from kubecronlogs.controllers.base import StreamResult
from kubecronlogs.controllers.cronjob.errors import ClusterError
from kubecronlogs.models.core.cronjob_info import PodInfo
from kubecronlogs.streaming.line_framer import aiter_lines
from kubecronlogs.streaming.output_sink import OutputSink

logger = logging.getLogger(__name__)


class PodLogStreamer:
    """Streams one pod's log at a time through the line framer into the sink.

    A single instance is shared by all pod tasks of a run; each ``stream``
    call owns exactly one log stream and always closes it.
    """

    def __init__(
        self,
        open_stream_func: Any,
        sink: OutputSink,
        *,
        container: str | None = None,
        follow: bool = False,
        timestamps: bool = False,
        stream_gate: asyncio.Semaphore | None = None,
    ) -> None:
        """Initialize the streamer.

        Args:
            open_stream_func: Async function returning a PodLogStream
            sink: Shared output sink
            container: Container to read from, cluster default when None
            follow: Keep streaming past the current end of the log
            timestamps: Ask kubectl for timestamp prefixes
            stream_gate: Optional semaphore bounding concurrently open streams
        """
        self._open_stream = open_stream_func
        self._sink = sink
        self.container = container
        self.follow = follow
        self.timestamps = timestamps
        self._stream_gate = stream_gate

    async def stream(self, pod: PodInfo) -> StreamResult:
        """Stream a pod's log until end-of-stream, failure or cancellation.

        Failures are returned as a failed StreamResult. Cancellation is
        re-raised after the stream has been closed.
        """
        result = StreamResult(pod_name=pod.name)
        started = time.monotonic()
        gate = self._stream_gate if self._stream_gate is not None else nullcontext()
        try:
            async with gate:
                log_stream = await self._open_stream(
                    pod.namespace,
                    pod.name,
                    container=self.container,
                    follow=self.follow,
                    timestamps=self.timestamps,
                )
                try:
                    async for line in aiter_lines(log_stream):
                        await self._sink.write_line(pod.name, line)
                        result.lines += 1
                finally:
                    await log_stream.aclose()
        except asyncio.CancelledError:
            result.state = StreamState.CANCELLED
            logger.debug("Log stream for %s cancelled after %d lines", pod.name, result.lines)
            raise
        except (ClusterError, OSError, UnicodeError) as exc:
            result.state = StreamState.FAILED
            result.error = str(exc)
            logger.debug("Log stream for pod %s failed: %s", pod.name, exc)
        finally:
            result.duration_ms = (time.monotonic() - started) * 1000

        logger.debug("Log stream for %s finished with %d lines", pod.name, result.lines)
        return result
