"""Timeout constants for kubecronlogs.

All timeout values for cluster requests and stream teardown.
"""

from typing import Final

# ============================================================================
# API/Cluster timeouts (string format for kubectl)
# ============================================================================

CLUSTER_REQUEST_TIMEOUT: Final = "30s"

# Process-level command timeouts (must be greater than request timeout)
KUBECTL_COMMAND_TIMEOUT: Final = 45
KUBECTL_CONFIG_TIMEOUT: Final = 8

# ============================================================================
# Stream teardown (float, in seconds)
# ============================================================================

LOG_STREAM_TERMINATE_TIMEOUT: Final = 5.0

__all__ = [
    "CLUSTER_REQUEST_TIMEOUT",
    "KUBECTL_COMMAND_TIMEOUT",
    "KUBECTL_CONFIG_TIMEOUT",
    "LOG_STREAM_TERMINATE_TIMEOUT",
]
