"""Base controller and result types for kubecronlogs.

Controllers orchestrate kubectl-backed fetchers and report per-task outcomes
as result objects instead of letting one failure abort sibling tasks.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from kubecronlogs.constants.enums import StreamState

logger = logging.getLogger(__name__)


@dataclass
class StreamResult:
    """Outcome of streaming one pod's logs."""

    pod_name: str
    state: StreamState = StreamState.COMPLETED
    lines: int = 0
    error: str | None = None
    duration_ms: float = 0.0

    @property
    def success(self) -> bool:
        return self.state is StreamState.COMPLETED


class BaseController(ABC):
    """Base controller class.

    Subclasses implement ``run`` to perform their whole operation and return
    a summary of what happened.
    """

    @abstractmethod
    async def run(self) -> Any:
        """Run the controller to completion.

        Returns:
            Controller-specific result summary
        """
        ...
