"""Scalar constants for kubecronlogs.

All application-level constants with proper type hints using Final.
"""

from typing import Final

# ============================================================================
# Application
# ============================================================================

APP_NAME: Final = "kubecronlogs"
APP_VERSION: Final = "0.1.0"

DEFAULT_NAMESPACE: Final = "default"

# ============================================================================
# Cluster labels
# ============================================================================

# Label set by the Job controller on every pod it creates (Kubernetes >= 1.27).
JOB_CONTROLLER_UID_LABEL: Final = "batch.kubernetes.io/controller-uid"
# Pre-1.27 clusters only carry the unprefixed label.
LEGACY_JOB_CONTROLLER_UID_LABEL: Final = "controller-uid"

# ============================================================================
# Terminal colors (ANSI SGR sequences)
# ============================================================================

ANSI_FOREGROUND_BASE: Final = 31  # red; palette runs 31..36
PALETTE_SIZE: Final = 6
ANSI_POD_NAME_TEMPLATE: Final = "\033[1;{color}m"
ANSI_BOLD_RESET: Final = "\033[0;1m"
ANSI_RESET: Final = "\033[0;0m"

# ============================================================================
# Streaming
# ============================================================================

LOG_READ_CHUNK_SIZE: Final = 1024

__all__ = [
    "ANSI_BOLD_RESET",
    "ANSI_FOREGROUND_BASE",
    "ANSI_POD_NAME_TEMPLATE",
    "ANSI_RESET",
    "APP_NAME",
    "APP_VERSION",
    "DEFAULT_NAMESPACE",
    "JOB_CONTROLLER_UID_LABEL",
    "LEGACY_JOB_CONTROLLER_UID_LABEL",
    "LOG_READ_CHUNK_SIZE",
    "PALETTE_SIZE",
]
