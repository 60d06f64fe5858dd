"""Constants module for kubecronlogs.

Centralized constants organized by domain:
- enums.py: All Enum class definitions
- values.py: Scalar constants (labels, ANSI sequences, version)
- timeouts.py: Timeout values (seconds)
"""

from kubecronlogs.constants.enums import ExitCode, StreamState
from kubecronlogs.constants.timeouts import (
    CLUSTER_REQUEST_TIMEOUT,
    KUBECTL_COMMAND_TIMEOUT,
    KUBECTL_CONFIG_TIMEOUT,
    LOG_STREAM_TERMINATE_TIMEOUT,
)
from kubecronlogs.constants.values import (
    ANSI_BOLD_RESET,
    ANSI_FOREGROUND_BASE,
    ANSI_POD_NAME_TEMPLATE,
    ANSI_RESET,
    APP_NAME,
    APP_VERSION,
    DEFAULT_NAMESPACE,
    JOB_CONTROLLER_UID_LABEL,
    LEGACY_JOB_CONTROLLER_UID_LABEL,
    LOG_READ_CHUNK_SIZE,
    PALETTE_SIZE,
)

__all__ = [
    # Terminal colors
    "ANSI_BOLD_RESET",
    "ANSI_FOREGROUND_BASE",
    "ANSI_POD_NAME_TEMPLATE",
    "ANSI_RESET",
    # Application
    "APP_NAME",
    "APP_VERSION",
    # Timeouts
    "CLUSTER_REQUEST_TIMEOUT",
    "DEFAULT_NAMESPACE",
    # Enums
    "ExitCode",
    # Cluster labels
    "JOB_CONTROLLER_UID_LABEL",
    "KUBECTL_COMMAND_TIMEOUT",
    "KUBECTL_CONFIG_TIMEOUT",
    "LEGACY_JOB_CONTROLLER_UID_LABEL",
    "LOG_READ_CHUNK_SIZE",
    "LOG_STREAM_TERMINATE_TIMEOUT",
    "PALETTE_SIZE",
    "StreamState",
]
