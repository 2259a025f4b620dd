"""
Unsupported host for Framefit.

Selected when there is no frame framefit can control: the windowing system
is not recognized, or it is but we are not attached to a terminal. Requests
do nothing and never raise.
"""

import logging
from typing import Optional

from .base import Host
from ..types import FrameResult, HostAction, WindowSystem

logger = logging.getLogger(__name__)


class UnsupportedHost(Host):
    """Host for environments without a controllable frame."""

    @property
    def name(self) -> str:
        return "unsupported"

    def __init__(
        self,
        window_system: WindowSystem = WindowSystem.NONE,
        reason: Optional[str] = None
    ):
        """
        Initialize unsupported host.

        Args:
            window_system: Window system that was detected or configured.
            reason: Why no frame can be controlled. Defaults to the window
                system not being supported.
        """
        self._window_system = window_system
        self.reason = reason or f"window system {window_system.value!r} is not supported"

    @property
    def window_system(self) -> WindowSystem:
        return self._window_system

    def is_available(self) -> bool:
        """Always available."""
        return True

    def maximize(self, sizer, dry_run: bool = False) -> FrameResult:
        logger.info("No controllable frame (%s), not maximizing", self.reason)
        return FrameResult(action=HostAction.NONE, host=self.name, applied=False)

    def restore(self, dry_run: bool = False) -> FrameResult:
        logger.info("No controllable frame (%s), not restoring", self.reason)
        return FrameResult(action=HostAction.NONE, host=self.name, applied=False)
