"""Controller ownership checks between Jobs and CronJobs."""

from __future__ import annotations

from kubecronlogs.models.core.cronjob_info import CronJobInfo, JobInfo


def is_owned_by_cronjob(job: JobInfo, cronjob: CronJobInfo) -> bool:
    """Return True when the CronJob is the Job's controlling owner.

    An owner reference only counts when its UID matches the CronJob and its
    controller flag is explicitly true.
    """
    return any(
        owner.uid == cronjob.uid and owner.controller is True
        for owner in job.owner_references
    )


def filter_owned_jobs(jobs: list[JobInfo], cronjob: CronJobInfo) -> list[JobInfo]:
    """Keep only the Jobs controlled by the given CronJob, preserving order."""
    return [job for job in jobs if is_owned_by_cronjob(job, cronjob)]
