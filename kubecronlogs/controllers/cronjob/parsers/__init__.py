"""Parsers for the cronjob controller."""

from kubecronlogs.controllers.cronjob.parsers.resource_parser import ResourceParser

__all__ = ["ResourceParser"]
