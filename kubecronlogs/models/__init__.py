"""Models for kubecronlogs."""

from kubecronlogs.models.core import CronJobInfo, JobInfo, OwnerReferenceInfo, PodInfo
from kubecronlogs.models.state import ConfigError, RunConfig

__all__ = [
    "ConfigError",
    "CronJobInfo",
    "JobInfo",
    "OwnerReferenceInfo",
    "PodInfo",
    "RunConfig",
]
