"""Resource parser for cronjob controller - turns kubectl JSON into models."""

from __future__ import annotations

from typing import Any

from kubecronlogs.models.core.cronjob_info import (
    CronJobInfo,
    JobInfo,
    OwnerReferenceInfo,
    PodInfo,
)


class ResourceParser:
    """Parses raw CronJob, Job and Pod dictionaries into snapshot models."""

    def __init__(self, namespace: str) -> None:
        """Initialize resource parser.

        Args:
            namespace: Namespace used when an object omits metadata.namespace
        """
        self.namespace = namespace

    def _metadata(self, item: dict[str, Any]) -> dict[str, Any]:
        metadata = item.get("metadata")
        return metadata if isinstance(metadata, dict) else {}

    def parse_owner_references(
        self, metadata: dict[str, Any]
    ) -> list[OwnerReferenceInfo]:
        """Parse metadata.ownerReferences, skipping entries without a UID."""
        owners: list[OwnerReferenceInfo] = []
        for ref in metadata.get("ownerReferences") or []:
            if not isinstance(ref, dict) or not ref.get("uid"):
                continue
            controller = ref.get("controller")
            owners.append(
                OwnerReferenceInfo(
                    uid=str(ref["uid"]),
                    kind=str(ref.get("kind", "")),
                    name=str(ref.get("name", "")),
                    controller=controller if isinstance(controller, bool) else None,
                )
            )
        return owners

    def parse_cronjob(self, item: dict[str, Any]) -> CronJobInfo:
        """Parse a single CronJob object.

        Raises:
            ValueError: If the object carries no UID or name.
        """
        metadata = self._metadata(item)
        uid = metadata.get("uid")
        name = metadata.get("name")
        if not uid or not name:
            raise ValueError("cronjob object is missing metadata.uid or metadata.name")
        return CronJobInfo(
            uid=str(uid),
            name=str(name),
            namespace=str(metadata.get("namespace") or self.namespace),
        )

    def parse_job(self, item: dict[str, Any]) -> JobInfo | None:
        """Parse a single Job object; None when it has no identity."""
        metadata = self._metadata(item)
        uid = metadata.get("uid")
        name = metadata.get("name")
        if not uid or not name:
            return None
        return JobInfo(
            uid=str(uid),
            name=str(name),
            namespace=str(metadata.get("namespace") or self.namespace),
            owner_references=self.parse_owner_references(metadata),
        )

    def parse_pod(self, item: dict[str, Any]) -> PodInfo | None:
        """Parse a single Pod object; None when it has no name."""
        metadata = self._metadata(item)
        name = metadata.get("name")
        if not name:
            return None
        status = item.get("status") or {}
        return PodInfo(
            name=str(name),
            namespace=str(metadata.get("namespace") or self.namespace),
            phase=str(status.get("phase") or "Unknown"),
        )

    def parse_jobs(self, items: list[dict[str, Any]]) -> list[JobInfo]:
        """Parse a Job list, dropping malformed entries."""
        jobs = (self.parse_job(item) for item in items)
        return [job for job in jobs if job is not None]

    def parse_pods(self, items: list[dict[str, Any]]) -> list[PodInfo]:
        """Parse a Pod list, dropping malformed entries."""
        pods = (self.parse_pod(item) for item in items)
        return [pod for pod in pods if pod is not None]
