"""Run state models."""

from kubecronlogs.models.state.run_config import ConfigError, RunConfig

__all__ = ["ConfigError", "RunConfig"]
