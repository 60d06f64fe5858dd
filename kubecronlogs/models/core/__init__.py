"""Core cluster resource models."""

from kubecronlogs.models.core.cronjob_info import (
    CronJobInfo,
    JobInfo,
    OwnerReferenceInfo,
    PodInfo,
)

__all__ = ["CronJobInfo", "JobInfo", "OwnerReferenceInfo", "PodInfo"]
