"""kubecronlogs - aggregated, colored log tailing for Kubernetes CronJobs.

Package Structure:
    - cli.py: Command-line interface and entry point
    - controllers/: kubectl access and the fan-out coordinator
    - streaming/: Line framing, shared output and per-pod streaming
    - models/: Resource snapshots and run configuration
    - utils/: Ownership filter and pod name colors
"""

from kubecronlogs.constants.values import APP_VERSION

__version__ = APP_VERSION
