"""Exceptions raised at the kubectl seam."""

from __future__ import annotations


class ClusterError(Exception):
    """Base exception for cluster access failures."""


class KubectlNotFoundError(ClusterError):
    """Raised when no kubectl binary can be located."""


class ClusterRequestError(ClusterError):
    """Raised when a kubectl request fails, times out, or returns bad JSON."""


class CronJobNotFoundError(ClusterError):
    """Raised when the requested CronJob does not exist in the namespace."""

    def __init__(self, name: str, namespace: str) -> None:
        super().__init__(f'cronjob "{name}" not found in namespace "{namespace}"')
        self.name = name
        self.namespace = namespace


class LogStreamError(ClusterError):
    """Raised when a pod log stream cannot be opened or ends with an error."""

    def __init__(self, pod_name: str, message: str) -> None:
        super().__init__(f"{pod_name}: {message}")
        self.pod_name = pod_name
