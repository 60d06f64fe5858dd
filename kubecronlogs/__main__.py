"""
Entry point for running kubecronlogs as a Python module.

    python -m kubecronlogs <cronjob-name>
"""

import sys

from kubecronlogs.cli import main

if __name__ == "__main__":
    sys.exit(main())
