"""Log stream framing, fan-in output and per-pod streaming."""

from kubecronlogs.streaming.line_framer import LineFramer, aiter_lines, iter_lines
from kubecronlogs.streaming.output_sink import OutputSink
from kubecronlogs.streaming.pod_log_streamer import PodLogStreamer

__all__ = ["LineFramer", "OutputSink", "PodLogStreamer", "aiter_lines", "iter_lines"]
