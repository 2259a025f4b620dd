"""
Framefit hosts.

Hosts abstract the interaction with the windowing system that owns the
frame. One is selected at startup with select_host().
"""

import logging
import os
import sys
from typing import Optional

from .base import Host, NativeHost, ResizeHost
from .generic import GenericHost
from .unsupported import UnsupportedHost
from .win32 import Win32Host
from .xterm import XtermHost
from ..config import FramefitConfig
from ..types import WindowSystem

logger = logging.getLogger(__name__)

__all__ = [
    "Host",
    "NativeHost",
    "ResizeHost",
    "GenericHost",
    "UnsupportedHost",
    "Win32Host",
    "XtermHost",
    "detect_window_system",
    "parse_window_system",
    "select_host",
]


def detect_window_system(
    platform: Optional[str] = None,
    environ: Optional[dict] = None
) -> WindowSystem:
    """
    Detect the windowing system we are running under.

    Args:
        platform: Platform string. Uses sys.platform if None.
        environ: Environment mapping. Uses os.environ if None.
    """
    platform = platform or sys.platform
    environ = os.environ if environ is None else environ

    if platform == "win32":
        return WindowSystem.W32
    if platform == "darwin":
        return WindowSystem.NS
    if environ.get("DISPLAY") or environ.get("WAYLAND_DISPLAY"):
        return WindowSystem.X
    return WindowSystem.NONE


def parse_window_system(value: str) -> WindowSystem:
    """
    Convert a configured window system name.

    Unrecognized names map to WindowSystem.NONE, which selects the
    unsupported host instead of failing.
    """
    try:
        return WindowSystem(value)
    except ValueError:
        logger.warning("Unknown window system %r, treating it as unsupported", value)
        return WindowSystem.NONE


def select_host(
    config: Optional[FramefitConfig] = None,
    window_system: Optional[WindowSystem] = None
) -> Host:
    """
    Select the host for this process.

    Args:
        config: Loaded configuration. Defaults if None.
        window_system: Explicit window system, overriding config and detection.

    Returns:
        Win32Host on Windows, XtermHost on X11/macOS when attached to a
        terminal, UnsupportedHost otherwise.
    """
    config = config or FramefitConfig()

    if window_system is None:
        if config.host.window_system == "auto":
            window_system = detect_window_system()
        else:
            window_system = parse_window_system(config.host.window_system)
    logger.debug("Window system: %s", window_system.value)

    if window_system == WindowSystem.W32:
        return Win32Host(hwnd=config.host.window_handle)

    if window_system in (WindowSystem.X, WindowSystem.NS):
        host = XtermHost(
            scroll_bar_width=config.display.scroll_bar_width,
            left_fringe_width=config.display.left_fringe_width,
            right_fringe_width=config.display.right_fringe_width,
            window_system=window_system,
            timeout=config.host.query_timeout,
        )
        if host.is_available():
            return host
        return UnsupportedHost(window_system, reason="not attached to a terminal")

    return UnsupportedHost(window_system)
