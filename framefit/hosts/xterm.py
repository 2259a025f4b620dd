"""
xterm host for Framefit.

Sizes the terminal emulator window framefit runs in, using xterm's window
manipulation sequences (CSI Ps t). Supported by xterm, VTE-based terminals,
iTerm2, kitty, WezTerm and others, though some disable the resize and move
operations by default.
"""

import logging
from typing import Optional

from .base import ResizeHost
from ..errors import HostError
from ..termio import CSI, bCSI, TermIO
from ..types import WindowSystem

logger = logging.getLogger(__name__)

# Requests and the prefixes of their reports
REPORT_TEXT_AREA = ("14t", bCSI + b"4;")
REPORT_SCREEN = ("15t", bCSI + b"5;")
REPORT_CELL = ("16t", bCSI + b"6;")


class XtermHost(ResizeHost):
    """Host for xterm-compatible terminal windows."""

    @property
    def name(self) -> str:
        return "xterm"

    def __init__(
        self,
        term: Optional[TermIO] = None,
        scroll_bar_width: int = 0,
        left_fringe_width: int = 0,
        right_fringe_width: int = 0,
        window_system: WindowSystem = WindowSystem.X,
        timeout: float = 0.5
    ):
        """
        Initialize xterm host.

        Terminals don't report scroll bar or border widths, so those come
        from configuration.

        Args:
            term: Terminal to talk to. Defaults to stdin/stdout.
            scroll_bar_width: Scroll bar width in pixels.
            left_fringe_width: Left border width in pixels.
            right_fringe_width: Right border width in pixels.
            window_system: Window system the terminal runs under.
            timeout: Seconds to wait for a report.
        """
        self.term = term or TermIO(timeout=timeout)
        self._scroll_bar_width = scroll_bar_width
        self._left_fringe_width = left_fringe_width
        self._right_fringe_width = right_fringe_width
        self._window_system = window_system

    @property
    def window_system(self) -> WindowSystem:
        return self._window_system

    def is_available(self) -> bool:
        """Check that we are attached to a terminal."""
        return self.term.is_terminal()

    def _request_pair(self, request: tuple[str, bytes]) -> Optional[tuple[int, int]]:
        """Send a report request and return its (width, height) pair."""
        query, prefix = request
        numbers = self.term.request_numbers(CSI, query, prefix=prefix, suffix=b"t")
        if len(numbers) != 2:
            logger.debug("No usable answer to CSI %s", query)
            return None
        height, width = numbers
        return width, height

    def display_size(self) -> tuple[int, int]:
        size = self._request_pair(REPORT_SCREEN)
        if size is None:
            raise HostError("terminal did not report the screen size")
        return size

    def char_cell_size(self) -> tuple[int, int]:
        """
        Get character cell size.

        Falls back to dividing the text area by the grid size for terminals
        that only answer the text area request.
        """
        size = self._request_pair(REPORT_CELL)
        if size is not None and size[0] > 0 and size[1] > 0:
            return size

        area = self._request_pair(REPORT_TEXT_AREA)
        if area is None:
            raise HostError("terminal did not report its character cell size")
        try:
            columns, rows = self.term.query_size()
        except (OSError, ValueError) as e:
            raise HostError(f"cannot determine terminal grid size: {e}") from e
        if columns == 0 or rows == 0:
            raise HostError("terminal reports an empty grid")
        return area[0] // columns, area[1] // rows

    def scroll_bar_width(self) -> int:
        return self._scroll_bar_width

    def fringe_widths(self) -> tuple[int, int]:
        return self._left_fringe_width, self._right_fringe_width

    def set_frame_size(self, columns: int, rows: int) -> None:
        self.term.escape(CSI, "8;", rows, ";", columns, "t").flush()

    def set_frame_position(self, x: int, y: int) -> None:
        self.term.escape(CSI, "3;", x, ";", y, "t").flush()
