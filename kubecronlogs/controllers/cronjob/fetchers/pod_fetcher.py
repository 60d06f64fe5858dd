"""Pod fetcher for cronjob controller - lists the pods created by a Job."""

from __future__ import annotations

import json
import logging
from typing import Any

from kubecronlogs.constants.values import (
    JOB_CONTROLLER_UID_LABEL,
    LEGACY_JOB_CONTROLLER_UID_LABEL,
)
from kubecronlogs.controllers.cronjob.errors import ClusterRequestError
from kubecronlogs.controllers.cronjob.parsers import ResourceParser
from kubecronlogs.models.core.cronjob_info import JobInfo, PodInfo

logger = logging.getLogger(__name__)


class PodFetcher:
    """Fetches pod data from the Kubernetes cluster."""

    def __init__(self, run_kubectl_func: Any) -> None:
        """Initialize with kubectl runner function.

        Args:
            run_kubectl_func: Async function to run kubectl commands
        """
        self._run_kubectl = run_kubectl_func

    async def fetch_pods(self, namespace: str, label_selector: str) -> list[PodInfo]:
        """Fetch pods matching a label selector.

        Raises:
            ClusterRequestError: On kubectl or decoding failure.
        """
        output = await self._run_kubectl(
            ("get", "pods", "-n", namespace, "-l", label_selector, "-o", "json")
        )
        if not output:
            return []

        try:
            data = json.loads(output)
        except json.JSONDecodeError as exc:
            raise ClusterRequestError(
                f"invalid pod list JSON for selector {label_selector}"
            ) from exc

        return ResourceParser(namespace).parse_pods(data.get("items") or [])

    async def fetch_pods_for_job(self, job: JobInfo) -> list[PodInfo]:
        """Fetch the pods a Job created, selected by its controller UID.

        Falls back to the unprefixed legacy label when the current label
        matches nothing.
        """
        pods = await self.fetch_pods(
            job.namespace, f"{JOB_CONTROLLER_UID_LABEL}={job.uid}"
        )
        if pods:
            return pods

        logger.debug(
            "No pods for job %s under %s, trying legacy label",
            job.name,
            JOB_CONTROLLER_UID_LABEL,
        )
        return await self.fetch_pods(
            job.namespace, f"{LEGACY_JOB_CONTROLLER_UID_LABEL}={job.uid}"
        )
