"""
Win32 host for Framefit.

Windows maximizes and restores windows itself, so this host only sends the
WM_SYSCOMMAND messages a title bar button would.
"""

import ctypes
import logging
import sys

from .base import NativeHost
from ..errors import HostError
from ..types import WindowSystem

logger = logging.getLogger(__name__)

WM_SYSCOMMAND = 0x0112
SC_MAXIMIZE = 0xF030
SC_RESTORE = 0xF120


def _load_user32():
    """Load user32/kernel32 with the prototypes we call."""
    from ctypes import wintypes

    user32 = ctypes.windll.user32
    kernel32 = ctypes.windll.kernel32

    user32.SendMessageW.restype = wintypes.LPARAM
    user32.SendMessageW.argtypes = [wintypes.HWND, wintypes.UINT, wintypes.WPARAM, wintypes.LPARAM]
    user32.GetForegroundWindow.restype = wintypes.HWND
    user32.GetForegroundWindow.argtypes = []
    user32.IsWindow.restype = wintypes.BOOL
    user32.IsWindow.argtypes = [wintypes.HWND]
    kernel32.GetConsoleWindow.restype = wintypes.HWND
    kernel32.GetConsoleWindow.argtypes = []

    return user32, kernel32


class Win32Host(NativeHost):
    """Host for native Windows windows."""

    @property
    def name(self) -> str:
        return "win32"

    def __init__(self, hwnd: int = 0, user32=None, kernel32=None):
        """
        Initialize Win32 host.

        Args:
            hwnd: Window handle to command. 0 picks the console window hosting
                this process, falling back to the foreground window.
            user32: user32 library. Loaded through ctypes if None.
            kernel32: kernel32 library. Loaded through ctypes if None.
        """
        self._hwnd = hwnd
        self._user32 = user32
        self._kernel32 = kernel32

    @property
    def window_system(self) -> WindowSystem:
        return WindowSystem.W32

    def _libraries(self):
        if self._user32 is None or self._kernel32 is None:
            if sys.platform != "win32":
                raise HostError("user32 is only available on Windows")
            self._user32, self._kernel32 = _load_user32()
        return self._user32, self._kernel32

    def is_available(self) -> bool:
        """Check that user32 is loadable and a target window exists."""
        try:
            return bool(self.window_handle())
        except HostError:
            return False

    def window_handle(self) -> int:
        """Resolve the window to command."""
        user32, kernel32 = self._libraries()
        if self._hwnd:
            if not user32.IsWindow(self._hwnd):
                raise HostError(f"window handle 0x{self._hwnd:X} is not a window")
            return self._hwnd

        hwnd = kernel32.GetConsoleWindow() or user32.GetForegroundWindow()
        if not hwnd:
            raise HostError("no console or foreground window to command")
        return hwnd

    def _send_syscommand(self, command: int) -> None:
        user32, _ = self._libraries()
        hwnd = self.window_handle()
        logger.debug("WM_SYSCOMMAND 0x%04X -> hwnd 0x%X", command, hwnd)
        user32.SendMessageW(hwnd, WM_SYSCOMMAND, command, 0)

    def send_maximize(self) -> None:
        self._send_syscommand(SC_MAXIMIZE)

    def send_restore(self) -> None:
        self._send_syscommand(SC_RESTORE)
