"""Shared fixtures: fake kubectl seams and canned cluster objects."""

from __future__ import annotations

import io
import json
from typing import Any

import pytest

from kubecronlogs.controllers.cronjob.errors import ClusterRequestError, LogStreamError
from kubecronlogs.streaming.output_sink import OutputSink

CRONJOB_UID = "cj-uid-1"


class FakeLogStream:
    """In-memory stand-in for PodLogStream."""

    def __init__(
        self,
        pod_name: str,
        chunks: list[bytes],
        error: Exception | None = None,
    ) -> None:
        self.pod_name = pod_name
        self._chunks = list(chunks)
        self._error = error
        self.closed = False

    def __aiter__(self) -> FakeLogStream:
        return self

    async def __anext__(self) -> bytes:
        if self._chunks:
            return self._chunks.pop(0)
        if self._error is not None:
            raise self._error
        raise StopAsyncIteration

    async def aclose(self) -> None:
        self.closed = True


class FakeKubectlClient:
    """Answers kubectl requests from canned JSON and serves fake log streams."""

    def __init__(
        self,
        responses: dict[tuple[str, ...], Any] | None = None,
        logs: dict[str, list[bytes]] | None = None,
    ) -> None:
        self.responses = responses or {}
        self.logs = logs or {}
        self.stream_errors: dict[str, Exception] = {}
        self.open_errors: set[str] = set()
        self.requests: list[tuple[str, ...]] = []
        self.streams: dict[str, FakeLogStream] = {}
        self.open_calls: list[dict[str, Any]] = []

    async def run_kubectl(self, args: tuple[str, ...]) -> str:
        self.requests.append(args)
        response = self.responses.get(args)
        if response is None:
            return json.dumps({"items": []})
        if isinstance(response, Exception):
            raise response
        return response if isinstance(response, str) else json.dumps(response)

    async def open_log_stream(
        self,
        namespace: str,
        pod_name: str,
        *,
        container: str | None = None,
        follow: bool = False,
        timestamps: bool = False,
    ) -> FakeLogStream:
        self.open_calls.append(
            {
                "namespace": namespace,
                "pod_name": pod_name,
                "container": container,
                "follow": follow,
                "timestamps": timestamps,
            }
        )
        if pod_name in self.open_errors:
            raise LogStreamError(pod_name, "container not found")
        stream = FakeLogStream(
            pod_name,
            self.logs.get(pod_name, []),
            self.stream_errors.get(pod_name),
        )
        self.streams[pod_name] = stream
        return stream


def cronjob_object(name: str = "nightly", uid: str = CRONJOB_UID) -> dict[str, Any]:
    return {
        "kind": "CronJob",
        "metadata": {"name": name, "namespace": "batch", "uid": uid},
    }


def job_object(
    name: str,
    uid: str,
    owner_uid: str | None = CRONJOB_UID,
    controller: bool | None = True,
) -> dict[str, Any]:
    metadata: dict[str, Any] = {"name": name, "namespace": "batch", "uid": uid}
    if owner_uid is not None:
        ref: dict[str, Any] = {"kind": "CronJob", "name": "nightly", "uid": owner_uid}
        if controller is not None:
            ref["controller"] = controller
        metadata["ownerReferences"] = [ref]
    return {"kind": "Job", "metadata": metadata}


def pod_object(name: str, phase: str = "Succeeded") -> dict[str, Any]:
    return {
        "kind": "Pod",
        "metadata": {"name": name, "namespace": "batch"},
        "status": {"phase": phase},
    }


def pods_args(uid: str, label: str = "batch.kubernetes.io/controller-uid") -> tuple[str, ...]:
    return ("get", "pods", "-n", "batch", "-l", f"{label}={uid}", "-o", "json")


CRONJOB_ARGS = ("get", "cronjob", "nightly", "-n", "batch", "-o", "json")
JOBS_ARGS = ("get", "jobs", "-n", "batch", "-o", "json")


@pytest.fixture
def output() -> io.StringIO:
    """Captured stdout replacement."""
    return io.StringIO()


@pytest.fixture
def sink(output: io.StringIO) -> OutputSink:
    """Output sink writing into the captured buffer."""
    return OutputSink(output)


@pytest.fixture
def nightly_client() -> FakeKubectlClient:
    """Cluster with CronJob nightly owning one job with two pods."""
    return FakeKubectlClient(
        responses={
            CRONJOB_ARGS: cronjob_object(),
            JOBS_ARGS: {
                "items": [
                    job_object("nightly-28311234", "job-uid-1"),
                    job_object("adhoc-1", "job-uid-2", owner_uid="other-uid"),
                ]
            },
            pods_args("job-uid-1"): {
                "items": [
                    pod_object("nightly-28311234-abcde"),
                    pod_object("nightly-28311234-fghij"),
                ]
            },
            pods_args("job-uid-2"): ClusterRequestError("should never be listed"),
        },
        logs={
            "nightly-28311234-abcde": [b"starting back", b"up\nbackup done\n"],
            "nightly-28311234-fghij": [b"cleanup one\ncleanup two"],
        },
    )
