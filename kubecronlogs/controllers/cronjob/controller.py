"""CronJob log controller.

Resolves a CronJob, the Jobs it controls and their Pods, then streams every
pod's log concurrently onto one shared output. One task is started per owned
Job (pod listing) and one per Pod (log streaming); the run returns when all
of them have finished.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field

from kubecronlogs.constants.enums import ExitCode
from kubecronlogs.controllers.base import BaseController, StreamResult
from kubecronlogs.controllers.cronjob.errors import ClusterError
from kubecronlogs.controllers.cronjob.fetchers import CronJobFetcher, PodFetcher
from kubecronlogs.controllers.cronjob.kubectl_client import KubectlClient
from kubecronlogs.models.core.cronjob_info import CronJobInfo, JobInfo, PodInfo
from kubecronlogs.models.state.run_config import RunConfig
from kubecronlogs.streaming.output_sink import OutputSink
from kubecronlogs.streaming.pod_log_streamer import PodLogStreamer
from kubecronlogs.utils.ownership import filter_owned_jobs

logger = logging.getLogger(__name__)


@dataclass
class RunResult:
    """Summary of one aggregated log run."""

    cronjob: CronJobInfo
    jobs: list[JobInfo] = field(default_factory=list)
    pods: list[PodInfo] = field(default_factory=list)
    stream_results: list[StreamResult] = field(default_factory=list)
    job_errors: dict[str, str] = field(default_factory=dict)

    @property
    def failed_streams(self) -> list[StreamResult]:
        return [result for result in self.stream_results if not result.success]

    @property
    def exit_code(self) -> ExitCode:
        """FAILURE when any job listing or pod stream failed."""
        if self.job_errors or self.failed_streams:
            return ExitCode.FAILURE
        return ExitCode.OK


class CronJobLogsController(BaseController):
    """Fan-out/fan-in coordinator for a CronJob's pod logs."""

    def __init__(
        self,
        config: RunConfig,
        client: KubectlClient | None = None,
        sink: OutputSink | None = None,
    ) -> None:
        """Initialize the controller.

        Args:
            config: Run configuration
            client: kubectl client; built from ``config.context`` when omitted
            sink: Shared output sink; stdout when omitted
        """
        self.config = config
        self._client = client if client is not None else KubectlClient(context=config.context)
        self._sink = sink if sink is not None else OutputSink()

        self._cronjob_fetcher = CronJobFetcher(self._client.run_kubectl)
        self._pod_fetcher = PodFetcher(self._client.run_kubectl)

        stream_gate = (
            asyncio.Semaphore(config.max_concurrent_streams)
            if config.max_concurrent_streams is not None
            else None
        )
        self._streamer = PodLogStreamer(
            self._client.open_log_stream,
            self._sink,
            container=config.container,
            follow=config.follow,
            timestamps=config.timestamps,
            stream_gate=stream_gate,
        )
        self._stream_tasks: list[asyncio.Task[StreamResult]] = []

    async def run(self) -> RunResult:
        """Stream logs for every pod of every Job the CronJob controls.

        Raises:
            CronJobNotFoundError: If the CronJob does not exist.
            ClusterRequestError: If the CronJob or Job list cannot be fetched.
        """
        namespace = self.config.namespace
        cronjob = await self._cronjob_fetcher.fetch_cronjob(namespace, self.config.name)
        jobs = await self._cronjob_fetcher.fetch_jobs(namespace)
        owned_jobs = filter_owned_jobs(jobs, cronjob)
        logger.info(
            "CronJob %s/%s controls %d of %d jobs",
            namespace,
            cronjob.name,
            len(owned_jobs),
            len(jobs),
        )

        result = RunResult(cronjob=cronjob, jobs=owned_jobs)
        self._stream_tasks = []
        job_tasks = [
            asyncio.create_task(self._process_job(job, result), name=f"job:{job.name}")
            for job in owned_jobs
        ]
        try:
            await asyncio.gather(*job_tasks)
            # Every job task has finished, so the stream task list is final.
            result.stream_results.extend(await asyncio.gather(*self._stream_tasks))
        finally:
            pending = [task for task in (*job_tasks, *self._stream_tasks) if not task.done()]
            for task in pending:
                task.cancel()
            if pending:
                await asyncio.gather(*pending, return_exceptions=True)

        return result

    async def _process_job(self, job: JobInfo, result: RunResult) -> None:
        """List one Job's pods and start a log stream task per pod."""
        try:
            pods = await self._pod_fetcher.fetch_pods_for_job(job)
        except ClusterError as exc:
            logger.debug("Listing pods for job %s failed: %s", job.name, exc)
            result.job_errors[job.name] = str(exc)
            return

        if not pods:
            logger.info("Job %s has no pods", job.name)
        result.pods.extend(pods)
        for pod in pods:
            self._stream_tasks.append(
                asyncio.create_task(self._streamer.stream(pod), name=f"pod:{pod.name}")
            )
