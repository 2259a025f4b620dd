"""
Base host interface for Framefit.

A host owns the frame being sized. There are three kinds:

- NativeHost: the windowing system maximizes and restores on its own.
- ResizeHost: framefit computes a character grid and resizes/moves the frame.
- UnsupportedHost: nothing can be done, every request is a no-op.
"""

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from ..types import FrameResult, HostAction, WindowSystem

if TYPE_CHECKING:
    from ..sizer import FrameSizer

logger = logging.getLogger(__name__)


class Host(ABC):
    """Abstract base class for frame hosts."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Host name."""
        pass

    @property
    @abstractmethod
    def window_system(self) -> WindowSystem:
        """Windowing system this host drives."""
        pass

    @abstractmethod
    def is_available(self) -> bool:
        """Check if this host is usable in the current environment."""
        pass

    @abstractmethod
    def maximize(self, sizer: "FrameSizer", dry_run: bool = False) -> FrameResult:
        """
        Maximize the frame.

        Args:
            sizer: Sizer holding padding and width override.
            dry_run: Report without touching the frame.

        Returns:
            FrameResult describing the action taken.
        """
        pass

    @abstractmethod
    def restore(self, dry_run: bool = False) -> FrameResult:
        """Restore the frame to its pre-maximize size."""
        pass


class NativeHost(Host):
    """Host whose windowing system provides maximize and restore commands."""

    @abstractmethod
    def send_maximize(self) -> None:
        """Send the native maximize command."""
        pass

    @abstractmethod
    def send_restore(self) -> None:
        """Send the native restore command."""
        pass

    def maximize(self, sizer: "FrameSizer", dry_run: bool = False) -> FrameResult:
        if not dry_run:
            self.send_maximize()
        return FrameResult(action=HostAction.NATIVE_MAXIMIZE, host=self.name,
                           applied=not dry_run)

    def restore(self, dry_run: bool = False) -> FrameResult:
        if not dry_run:
            self.send_restore()
        return FrameResult(action=HostAction.NATIVE_RESTORE, host=self.name,
                           applied=not dry_run)


class ResizeHost(Host):
    """
    Host that reports its measurements and accepts size/position requests.

    Maximizing computes the largest grid that fits the display, resizes the
    frame to it and moves the frame to the top left corner.
    """

    @abstractmethod
    def display_size(self) -> tuple[int, int]:
        """
        Get display dimensions.

        Returns:
            Tuple of (width, height) in pixels.
        """
        pass

    @abstractmethod
    def char_cell_size(self) -> tuple[int, int]:
        """
        Get character cell dimensions.

        Returns:
            Tuple of (width, height) in pixels.
        """
        pass

    @abstractmethod
    def scroll_bar_width(self) -> int:
        """Width of the frame's scroll bar in pixels."""
        pass

    @abstractmethod
    def fringe_widths(self) -> tuple[int, int]:
        """
        Get fringe widths.

        Returns:
            Tuple of (left, right) in pixels.
        """
        pass

    @abstractmethod
    def set_frame_size(self, columns: int, rows: int) -> None:
        """Resize the frame, in character cells."""
        pass

    @abstractmethod
    def set_frame_position(self, x: int, y: int) -> None:
        """Move the frame, in pixels."""
        pass

    def maximize(self, sizer: "FrameSizer", dry_run: bool = False) -> FrameResult:
        geometry = sizer.geometry(self)
        size = sizer.compute(geometry)
        logger.debug("%s: usable %dx%d px -> %s cells", self.name,
                     geometry.usable_width, geometry.usable_height, size)

        if not dry_run:
            self.set_frame_size(size.columns, size.rows)
            self.set_frame_position(0, 0)

        return FrameResult(action=HostAction.RESIZE, host=self.name, size=size,
                           geometry=geometry, applied=not dry_run)

    def restore(self, dry_run: bool = False) -> FrameResult:
        logger.info("%s has no restore command, nothing to do", self.name)
        return FrameResult(action=HostAction.NONE, host=self.name, applied=False)
