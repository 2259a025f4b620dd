"""
Framefit - Size a window's character grid to fill the display.

Computes how many columns and rows fit on the display once menu bars,
title bars, scroll bars and fringes are accounted for, then asks the
windowing system to resize the frame and move it to the top left corner.
On Windows the native maximize/restore commands are used instead.

Basic Usage:
    from framefit import FrameSizer, select_host, load_config

    config = load_config()
    host = select_host(config)   # once, at startup

    sizer = FrameSizer(config.display)
    result = sizer.maximize(host)
    print(result.action, result.size)

    sizer.restore(host)          # native restore where supported

Arithmetic only:
    from framefit import max_columns, max_rows

    max_columns(1600, 15, 8, 8, 0, 9)   # 174
    max_rows(1200, 45, 18)              # 64
"""

__version__ = "0.1.0"
__author__ = "Framefit Contributors"

# Core types
from .types import (
    DisplayGeometry,
    FrameSize,
    FrameResult,
    HostAction,
    WindowSystem,
)

# Core classes
from .sizer import FrameSizer, max_columns, max_rows
from .errors import FramefitError, HostError

# Configuration
from .config import (
    WINDOW_SYSTEMS,
    FramefitConfig,
    DisplayConfig,
    HostConfig,
    load_config,
    save_config,
    init_config,
    get_config_path,
)

from .logging_config import setup_logging

# Submodules
from . import hosts
from .hosts import Host, select_host, detect_window_system

__all__ = [
    # Version
    "__version__",
    # Types
    "DisplayGeometry",
    "FrameSize",
    "FrameResult",
    "HostAction",
    "WindowSystem",
    # Classes
    "FrameSizer",
    "max_columns",
    "max_rows",
    "FramefitError",
    "HostError",
    # Config
    "WINDOW_SYSTEMS",
    "FramefitConfig",
    "DisplayConfig",
    "HostConfig",
    "load_config",
    "save_config",
    "init_config",
    "get_config_path",
    "setup_logging",
    # Hosts
    "hosts",
    "Host",
    "select_host",
    "detect_window_system",
]
