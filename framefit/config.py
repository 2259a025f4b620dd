"""
Framefit configuration management.

Configuration priority (highest to lowest):
1. CLI arguments (--padding-height, --max-width, etc.)
2. Config file (~/.config/framefit/config.json or platform-specific)
3. Environment variables (FRAMEFIT_*)
4. Default values (zero-config)

The loaded configuration is passed explicitly to FrameSizer and hosts;
nothing here is read behind the caller's back at maximize time.
"""

import json
import logging
import os
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Optional

import platformdirs

logger = logging.getLogger(__name__)

WINDOW_SYSTEMS = ("auto", "w32", "x", "ns", "none")


@dataclass
class DisplayConfig:
    """Chrome allowances subtracted from the display before sizing."""

    padding_width: int = 0
    padding_height: int = 45  # Menu bar (22) + title bar (23)
    max_width: Optional[int] = None  # Override for multi-monitor setups
    scroll_bar_width: int = 0
    left_fringe_width: int = 0
    right_fringe_width: int = 0


@dataclass
class HostConfig:
    """Host selection settings."""

    window_system: str = "auto"  # auto, w32, x, ns, none
    query_timeout: float = 0.5  # Seconds to wait for a terminal report
    window_handle: int = 0  # Win32 HWND, 0 picks the console/foreground window


@dataclass
class FramefitConfig:
    """Main configuration container."""

    display: DisplayConfig = field(default_factory=DisplayConfig)
    host: HostConfig = field(default_factory=HostConfig)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "display": asdict(self.display),
            "host": asdict(self.host),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "FramefitConfig":
        """Create from dictionary."""
        return cls(
            display=DisplayConfig(**data.get("display", {})),
            host=HostConfig(**data.get("host", {})),
        )

    def apply_env_overrides(self) -> "FramefitConfig":
        """
        Apply environment variable overrides.

        Environment variables:
            FRAMEFIT_PADDING_WIDTH - pixels
            FRAMEFIT_PADDING_HEIGHT - pixels
            FRAMEFIT_MAX_WIDTH - pixels
            FRAMEFIT_WINDOW_SYSTEM - auto/w32/x/ns/none
        """
        padding_width = _env_int("FRAMEFIT_PADDING_WIDTH")
        if padding_width is not None:
            self.display.padding_width = padding_width
        padding_height = _env_int("FRAMEFIT_PADDING_HEIGHT")
        if padding_height is not None:
            self.display.padding_height = padding_height
        max_width = _env_int("FRAMEFIT_MAX_WIDTH")
        if max_width is not None:
            self.display.max_width = max_width

        window_system = os.environ.get("FRAMEFIT_WINDOW_SYSTEM")
        if window_system:
            if window_system in WINDOW_SYSTEMS:
                self.host.window_system = window_system
            else:
                logger.warning("Ignoring FRAMEFIT_WINDOW_SYSTEM=%r, expected one of %s",
                               window_system, ", ".join(WINDOW_SYSTEMS))

        return self


def _env_int(name: str) -> Optional[int]:
    """Read an integer environment variable, ignoring malformed values."""
    value = os.environ.get(name)
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        logger.warning("Ignoring %s=%r, not an integer", name, value)
        return None


def get_config_dir() -> Path:
    """
    Get platform-specific user config directory.

    Returns:
        - Linux: ~/.config/framefit (or $XDG_CONFIG_HOME/framefit)
        - macOS: ~/Library/Application Support/framefit
        - Windows: C:\\Users\\<user>\\AppData\\Roaming\\framefit
    """
    return Path(platformdirs.user_config_dir("framefit", appauthor=False))


def get_config_path() -> Path:
    """Get configuration file path."""
    return get_config_dir() / "config.json"


def load_config(path: Optional[Path] = None, apply_env: bool = True) -> FramefitConfig:
    """
    Load configuration from file.

    Args:
        path: Config file path. Uses default if None.
        apply_env: Apply environment variable overrides.

    Returns:
        FramefitConfig with loaded or default values.
    """
    config_path = path or get_config_path()
    config = FramefitConfig()

    if config_path.exists():
        try:
            with open(config_path) as f:
                data = json.load(f)
            config = FramefitConfig.from_dict(data)
        except (json.JSONDecodeError, TypeError, KeyError):
            logger.warning("Ignoring malformed config file %s", config_path)

    if apply_env:
        config.apply_env_overrides()

    return config


def save_config(config: FramefitConfig, path: Optional[Path] = None) -> bool:
    """
    Save configuration to file.

    Args:
        config: Configuration to save.
        path: Config file path. Uses default if None.

    Returns:
        True if successful.
    """
    config_path = path or get_config_path()

    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(config_path, "w") as f:
            json.dump(config.to_dict(), f, indent=2)
        return True
    except OSError as e:
        logger.error("Could not write config file %s: %s", config_path, e)
        return False


def init_config(path: Optional[Path] = None) -> Path:
    """
    Initialize configuration file with defaults.

    Args:
        path: Config file path. Uses default if None.

    Returns:
        Path to created config file.
    """
    config_path = path or get_config_path()
    config = FramefitConfig()
    save_config(config, config_path)
    return config_path
