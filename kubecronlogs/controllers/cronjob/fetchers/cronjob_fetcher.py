"""CronJob fetcher for cronjob controller - fetches the CronJob and its Jobs."""

from __future__ import annotations

import json
import logging
from typing import Any

from kubecronlogs.controllers.cronjob.errors import (
    ClusterRequestError,
    CronJobNotFoundError,
)
from kubecronlogs.controllers.cronjob.parsers import ResourceParser
from kubecronlogs.models.core.cronjob_info import CronJobInfo, JobInfo

logger = logging.getLogger(__name__)


class CronJobFetcher:
    """Fetches CronJob and Job data from the Kubernetes cluster."""

    def __init__(self, run_kubectl_func: Any) -> None:
        """Initialize with kubectl runner function.

        Args:
            run_kubectl_func: Async function to run kubectl commands
        """
        self._run_kubectl = run_kubectl_func

    @staticmethod
    def _is_not_found_error(error: Exception, name: str) -> bool:
        """Return True when the API server reported this CronJob as missing.

        Other "not found" messages, such as an unknown kubeconfig context,
        are not about the CronJob and must stay request errors.
        """
        message = str(error)
        return "(NotFound)" in message and f'cronjobs.batch "{name}"' in message

    async def fetch_cronjob(self, namespace: str, name: str) -> CronJobInfo:
        """Fetch one CronJob by name.

        Raises:
            CronJobNotFoundError: If the CronJob does not exist.
            ClusterRequestError: On any other kubectl or decoding failure.
        """
        try:
            output = await self._run_kubectl(
                ("get", "cronjob", name, "-n", namespace, "-o", "json")
            )
        except ClusterRequestError as exc:
            if self._is_not_found_error(exc, name):
                raise CronJobNotFoundError(name, namespace) from exc
            raise

        try:
            data = json.loads(output)
        except json.JSONDecodeError as exc:
            raise ClusterRequestError(f"invalid cronjob JSON for {name}") from exc

        try:
            return ResourceParser(namespace).parse_cronjob(data)
        except ValueError as exc:
            raise ClusterRequestError(str(exc)) from exc

    async def fetch_jobs(self, namespace: str) -> list[JobInfo]:
        """Fetch every Job in the namespace (single list call, no paging).

        Raises:
            ClusterRequestError: On kubectl or decoding failure.
        """
        output = await self._run_kubectl(("get", "jobs", "-n", namespace, "-o", "json"))
        if not output:
            return []

        try:
            data = json.loads(output)
        except json.JSONDecodeError as exc:
            raise ClusterRequestError(f"invalid job list JSON in {namespace}") from exc

        jobs = ResourceParser(namespace).parse_jobs(data.get("items") or [])
        logger.debug("Fetched %d jobs in namespace %s", len(jobs), namespace)
        return jobs
