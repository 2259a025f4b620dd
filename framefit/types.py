"""
Framefit core types.

Plain data containers shared by the sizer, hosts, and CLI.
"""

from dataclasses import dataclass, asdict
from enum import Enum
from typing import Optional


class WindowSystem(Enum):
    """Windowing system a host runs under."""

    W32 = "w32"    # Windows family, native maximize/restore
    X = "x"        # X11 and compatible
    NS = "ns"      # macOS
    NONE = "none"  # Plain tty or anything unrecognized


class HostAction(Enum):
    """What a host did in response to a request."""

    NATIVE_MAXIMIZE = "native-maximize"
    NATIVE_RESTORE = "native-restore"
    RESIZE = "resize"
    NONE = "none"


@dataclass
class DisplayGeometry:
    """Pixel measurements used to size a frame for one maximize call."""

    width_pixels: int
    height_pixels: int
    char_cell_width_pixels: int
    char_cell_height_pixels: int
    padding_width_pixels: int = 0
    padding_height_pixels: int = 45
    scroll_bar_width_pixels: int = 0
    left_fringe_width_pixels: int = 0
    right_fringe_width_pixels: int = 0

    @property
    def usable_width(self) -> int:
        """Pixel width left for text after chrome is subtracted."""
        return (
            self.width_pixels
            - self.scroll_bar_width_pixels
            - self.left_fringe_width_pixels
            - self.right_fringe_width_pixels
            - self.padding_width_pixels
        )

    @property
    def usable_height(self) -> int:
        return self.height_pixels - self.padding_height_pixels

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class FrameSize:
    """Frame size in character cells."""

    columns: int
    rows: int

    def __str__(self) -> str:
        return f"{self.columns}x{self.rows}"


@dataclass
class FrameResult:
    """Outcome of a maximize or restore request."""

    action: HostAction
    host: str
    size: Optional[FrameSize] = None
    geometry: Optional[DisplayGeometry] = None
    applied: bool = True

    def to_dict(self) -> dict:
        """Convert to a JSON-friendly dictionary."""
        return {
            "action": self.action.value,
            "host": self.host,
            "applied": self.applied,
            "size": asdict(self.size) if self.size else None,
            "geometry": self.geometry.to_dict() if self.geometry else None,
        }
