"""Fetchers for the cronjob controller."""

from kubecronlogs.controllers.cronjob.fetchers.cronjob_fetcher import CronJobFetcher
from kubecronlogs.controllers.cronjob.fetchers.pod_fetcher import PodFetcher

__all__ = ["CronJobFetcher", "PodFetcher"]
