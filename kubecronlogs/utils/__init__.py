"""Utility helpers for kubecronlogs."""

from kubecronlogs.utils.colors import color_for, color_index_for, format_log_line
from kubecronlogs.utils.ownership import filter_owned_jobs, is_owned_by_cronjob

__all__ = [
    "color_for",
    "color_index_for",
    "filter_owned_jobs",
    "format_log_line",
    "is_owned_by_cronjob",
]
