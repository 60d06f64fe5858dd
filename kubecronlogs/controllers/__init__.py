"""Controllers module for kubecronlogs.

Controllers orchestrate kubectl-backed fetchers. The CronJob log controller
lives in ``kubecronlogs.controllers.cronjob.controller``.
"""

from __future__ import annotations

from kubecronlogs.controllers.base import BaseController, StreamResult

__all__ = ["BaseController", "StreamResult"]
