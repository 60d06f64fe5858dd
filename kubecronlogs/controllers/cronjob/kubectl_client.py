"""kubectl process runner for request/response calls and log streams."""

from __future__ import annotations

import asyncio
import logging
import shutil
import subprocess
from contextlib import suppress

from kubecronlogs.constants.timeouts import (
    CLUSTER_REQUEST_TIMEOUT,
    KUBECTL_COMMAND_TIMEOUT,
    KUBECTL_CONFIG_TIMEOUT,
    LOG_STREAM_TERMINATE_TIMEOUT,
)
from kubecronlogs.constants.values import LOG_READ_CHUNK_SIZE
from kubecronlogs.controllers.cronjob.errors import (
    ClusterRequestError,
    KubectlNotFoundError,
    LogStreamError,
)

logger = logging.getLogger(__name__)


class PodLogStream:
    """Byte stream of one ``kubectl logs`` process.

    Iterating yields raw stdout chunks until end-of-stream. A non-zero kubectl
    exit after the last chunk is raised as LogStreamError. ``aclose`` must be
    called on every exit path; it terminates the process if still running.
    """

    def __init__(
        self,
        process: asyncio.subprocess.Process,
        pod_name: str,
        chunk_size: int = LOG_READ_CHUNK_SIZE,
    ) -> None:
        self._process = process
        self.pod_name = pod_name
        self._chunk_size = chunk_size
        self._closed = False

    async def read(self) -> bytes:
        """Read the next chunk; an empty result means end-of-stream."""
        if self._process.stdout is None:
            return b""
        return await self._process.stdout.read(self._chunk_size)

    def __aiter__(self) -> PodLogStream:
        return self

    async def __anext__(self) -> bytes:
        chunk = await self.read()
        if chunk:
            return chunk
        await self._raise_for_exit_status()
        raise StopAsyncIteration

    async def _raise_for_exit_status(self) -> None:
        returncode = await self._process.wait()
        if returncode == 0:
            return
        stderr = b""
        if self._process.stderr is not None:
            stderr = await self._process.stderr.read()
        message = stderr.decode("utf-8", errors="replace").strip()
        raise LogStreamError(
            self.pod_name, message or f"kubectl logs exited with status {returncode}"
        )

    async def aclose(self) -> None:
        """Release the stream, terminating kubectl if it is still running."""
        if self._closed:
            return
        self._closed = True
        if self._process.returncode is not None:
            return

        with suppress(ProcessLookupError):
            self._process.terminate()
        try:
            await asyncio.wait_for(
                self._process.wait(), timeout=LOG_STREAM_TERMINATE_TIMEOUT
            )
        except asyncio.TimeoutError:
            logger.warning("kubectl logs for %s ignored SIGTERM, killing", self.pod_name)
            with suppress(ProcessLookupError):
                self._process.kill()
            await self._process.wait()

    async def __aenter__(self) -> PodLogStream:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()


class KubectlClient:
    """Runs kubectl against the current (or a named) kubeconfig context."""

    def __init__(self, context: str | None = None, kubectl_path: str | None = None) -> None:
        """Initialize the client.

        Args:
            context: Optional kubeconfig context name.
            kubectl_path: Explicit kubectl binary; looked up on PATH otherwise.

        Raises:
            KubectlNotFoundError: If no kubectl binary is available.
        """
        resolved = kubectl_path or shutil.which("kubectl")
        if not resolved:
            raise KubectlNotFoundError("kubectl not found on PATH")
        self.kubectl_path = resolved
        self.context = context

    def _base_command(self) -> list[str]:
        cmd = [self.kubectl_path]
        if self.context:
            cmd.extend(["--context", self.context])
        return cmd

    def _run_kubectl_sync(
        self,
        args: tuple[str, ...],
        timeout: int = KUBECTL_COMMAND_TIMEOUT,
    ) -> str:
        """Run a kubectl command synchronously (thread-safe wrapper target)."""
        cmd = [*self._base_command(), *args, f"--request-timeout={CLUSTER_REQUEST_TIMEOUT}"]
        logger.debug("Running %s", " ".join(cmd))
        try:
            result = subprocess.run(
                cmd, capture_output=True, text=True, timeout=timeout
            )
        except subprocess.TimeoutExpired as exc:
            raise ClusterRequestError(
                f"kubectl {' '.join(args)} timed out after {timeout}s"
            ) from exc
        except OSError as exc:
            raise ClusterRequestError(f"failed to run kubectl: {exc}") from exc
        if result.returncode != 0:
            stderr = (result.stderr or "").strip()
            raise ClusterRequestError(stderr or "kubectl command failed")
        return result.stdout

    async def run_kubectl(self, args: tuple[str, ...]) -> str:
        """Run a kubectl request off the event loop and return its stdout."""
        return await asyncio.to_thread(self._run_kubectl_sync, args)

    def resolve_namespace(self) -> str | None:
        """Return the namespace of the active kubeconfig context, if it sets one."""
        cmd = [
            *self._base_command(),
            "config",
            "view",
            "--minify",
            "--output",
            "jsonpath={..namespace}",
        ]
        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                timeout=KUBECTL_CONFIG_TIMEOUT,
            )
        except (OSError, subprocess.TimeoutExpired):
            return None

        if result.returncode != 0:
            return None
        resolved = (result.stdout or "").strip()
        return resolved or None

    async def open_log_stream(
        self,
        namespace: str,
        pod_name: str,
        *,
        container: str | None = None,
        follow: bool = False,
        timestamps: bool = False,
    ) -> PodLogStream:
        """Start ``kubectl logs`` for one pod and return its byte stream."""
        cmd = [*self._base_command(), "logs", pod_name, "-n", namespace]
        if container:
            cmd.extend(["-c", container])
        if follow:
            cmd.append("--follow")
        if timestamps:
            cmd.append("--timestamps")

        logger.debug("Opening log stream: %s", " ".join(cmd))
        try:
            process = await asyncio.create_subprocess_exec(
                *cmd,
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as exc:
            raise LogStreamError(pod_name, f"failed to start kubectl: {exc}") from exc
        return PodLogStream(process, pod_name)
