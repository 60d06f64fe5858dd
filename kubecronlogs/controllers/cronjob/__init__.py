"""CronJob log domain: kubectl access, fetchers, parsers and errors."""

from kubecronlogs.controllers.cronjob.errors import (
    ClusterError,
    ClusterRequestError,
    CronJobNotFoundError,
    KubectlNotFoundError,
    LogStreamError,
)
from kubecronlogs.controllers.cronjob.kubectl_client import KubectlClient, PodLogStream

__all__ = [
    "ClusterError",
    "ClusterRequestError",
    "CronJobNotFoundError",
    "KubectlClient",
    "KubectlNotFoundError",
    "LogStreamError",
    "PodLogStream",
]
