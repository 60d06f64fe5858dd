"""Base classes for controllers."""

from kubecronlogs.controllers.base.base_controller import BaseController, StreamResult

__all__ = ["BaseController", "StreamResult"]
