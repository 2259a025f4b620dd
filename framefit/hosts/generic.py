"""
Generic host for Framefit.

A host that works with manually provided measurements.
Useful for library usage and custom integrations.
"""

from typing import Optional, Callable

from .base import ResizeHost
from ..types import FrameSize, WindowSystem


class GenericHost(ResizeHost):
    """
    Generic host for custom integrations.

    This host doesn't talk to any windowing system. Measurements are provided
    programmatically and size/position requests update internal state and
    call optional callbacks.
    """

    @property
    def name(self) -> str:
        return "generic"

    def __init__(
        self,
        display_width: int = 1920,
        display_height: int = 1080,
        char_width: int = 8,
        char_height: int = 16,
        scroll_bar_width: int = 0,
        left_fringe_width: int = 0,
        right_fringe_width: int = 0,
        window_system: WindowSystem = WindowSystem.X,
        on_resize: Optional[Callable[[int, int], None]] = None,
        on_move: Optional[Callable[[int, int], None]] = None
    ):
        """
        Initialize generic host.

        Args:
            display_width: Display width in pixels.
            display_height: Display height in pixels.
            char_width: Character cell width in pixels.
            char_height: Character cell height in pixels.
            scroll_bar_width: Scroll bar width in pixels.
            left_fringe_width: Left fringe width in pixels.
            right_fringe_width: Right fringe width in pixels.
            window_system: Window system to report.
            on_resize: Callback with (columns, rows) when the frame is resized.
            on_move: Callback with (x, y) when the frame is moved.
        """
        self._display_width = display_width
        self._display_height = display_height
        self._char_width = char_width
        self._char_height = char_height
        self._scroll_bar_width = scroll_bar_width
        self._left_fringe_width = left_fringe_width
        self._right_fringe_width = right_fringe_width
        self._window_system = window_system
        self._on_resize = on_resize
        self._on_move = on_move

        self.frame_size: Optional[FrameSize] = None
        self.frame_position: Optional[tuple[int, int]] = None

    @property
    def window_system(self) -> WindowSystem:
        return self._window_system

    def is_available(self) -> bool:
        """Always available."""
        return True

    def set_display_size(self, width: int, height: int) -> None:
        """Set display dimensions."""
        self._display_width = width
        self._display_height = height

    def display_size(self) -> tuple[int, int]:
        return self._display_width, self._display_height

    def char_cell_size(self) -> tuple[int, int]:
        return self._char_width, self._char_height

    def scroll_bar_width(self) -> int:
        return self._scroll_bar_width

    def fringe_widths(self) -> tuple[int, int]:
        return self._left_fringe_width, self._right_fringe_width

    def set_frame_size(self, columns: int, rows: int) -> None:
        """Resize frame (updates internal state and calls callback)."""
        self.frame_size = FrameSize(columns=columns, rows=rows)
        if self._on_resize:
            self._on_resize(columns, rows)

    def set_frame_position(self, x: int, y: int) -> None:
        """Move frame (updates internal state and calls callback)."""
        self.frame_position = (x, y)
        if self._on_move:
            self._on_move(x, y)
