"""
Framefit frame sizer.

Converts the usable pixel area of a display into the largest character grid
that fits, and hands maximize/restore requests to the selected host.
"""

import logging
from typing import Optional, TYPE_CHECKING

from .config import DisplayConfig
from .types import DisplayGeometry, FrameSize, FrameResult

if TYPE_CHECKING:
    from .hosts.base import Host, ResizeHost

logger = logging.getLogger(__name__)


def max_columns(
    width_pixels: int,
    scroll_bar_width_pixels: int,
    left_fringe_width_pixels: int,
    right_fringe_width_pixels: int,
    padding_width_pixels: int,
    char_cell_width_pixels: int
) -> int:
    """
    Maximum number of columns that fit in the given width.

    Floor division rounds toward negative infinity, so chrome wider than the
    display yields a negative count. The result is not clamped.
    """
    usable = (
        width_pixels
        - scroll_bar_width_pixels
        - left_fringe_width_pixels
        - right_fringe_width_pixels
        - padding_width_pixels
    )
    return usable // char_cell_width_pixels


def max_rows(
    height_pixels: int,
    padding_height_pixels: int,
    char_cell_height_pixels: int
) -> int:
    """Maximum number of rows that fit in the given height."""
    return (height_pixels - padding_height_pixels) // char_cell_height_pixels


class FrameSizer:
    """Sizes frames to fill the display."""

    def __init__(self, config: Optional[DisplayConfig] = None):
        """
        Initialize sizer.

        Args:
            config: Padding and width override. Defaults if None.
        """
        self.config = config or DisplayConfig()

    def compute(self, geometry: DisplayGeometry) -> FrameSize:
        """Compute the frame size for a geometry."""
        return FrameSize(
            columns=max_columns(
                geometry.width_pixels,
                geometry.scroll_bar_width_pixels,
                geometry.left_fringe_width_pixels,
                geometry.right_fringe_width_pixels,
                geometry.padding_width_pixels,
                geometry.char_cell_width_pixels,
            ),
            rows=max_rows(
                geometry.height_pixels,
                geometry.padding_height_pixels,
                geometry.char_cell_height_pixels,
            ),
        )

    def geometry(self, host: "ResizeHost") -> DisplayGeometry:
        """
        Assemble display geometry from host queries and configuration.

        The configured max_width replaces the reported display width, since
        hosts spanning several monitors report the combined width.
        """
        width, height = host.display_size()
        if self.config.max_width is not None:
            logger.debug("Using max width override %d (display reports %d)",
                         self.config.max_width, width)
            width = self.config.max_width

        cell_width, cell_height = host.char_cell_size()
        left_fringe, right_fringe = host.fringe_widths()

        return DisplayGeometry(
            width_pixels=width,
            height_pixels=height,
            char_cell_width_pixels=cell_width,
            char_cell_height_pixels=cell_height,
            padding_width_pixels=self.config.padding_width,
            padding_height_pixels=self.config.padding_height,
            scroll_bar_width_pixels=host.scroll_bar_width(),
            left_fringe_width_pixels=left_fringe,
            right_fringe_width_pixels=right_fringe,
        )

    def maximize(self, host: "Host", dry_run: bool = False) -> FrameResult:
        """
        Maximize the host's frame.

        Args:
            host: Host selected at startup.
            dry_run: Compute and report without touching the frame.

        Returns:
            FrameResult describing what the host did.
        """
        result = host.maximize(self, dry_run=dry_run)
        logger.info("maximize via %s: %s%s", result.host, result.action.value,
                    f" {result.size}" if result.size else "")
        return result

    def restore(self, host: "Host", dry_run: bool = False) -> FrameResult:
        """Restore the host's frame where the host supports it."""
        result = host.restore(dry_run=dry_run)
        logger.info("restore via %s: %s", result.host, result.action.value)
        return result
