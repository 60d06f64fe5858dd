"""All enum definitions for kubecronlogs."""

from enum import Enum


class StreamState(Enum):
    """Terminal state of a single pod log stream."""

    COMPLETED = "completed"
    FAILED = "failed"
    CANCELLED = "cancelled"


class ExitCode(int, Enum):
    """Process exit codes returned by the CLI."""

    OK = 0
    FAILURE = 1
    INTERRUPTED = 130


__all__ = ["ExitCode", "StreamState"]
