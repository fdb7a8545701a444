"""Selection of the platform-specific parts for the running system."""

from __future__ import annotations

import os
import sys
from pathlib import Path

from qmkonnect import linux, macos, windows
from qmkonnect.monitor import WindowMonitor
from qmkonnect.x11 import X11Monitor


def _platform() -> str:
    if sys.platform.startswith("linux"):
        return "linux"
    if sys.platform == "win32":
        return "windows"
    if sys.platform == "darwin":
        return "macos"
    return "other"


def get_config_paths() -> list[Path]:
    """Return the configuration files to look for on this platform."""
    match _platform():
        case "linux":
            return linux.get_config_paths()
        case "windows":
            return windows.get_config_paths()
        case "macos":
            return macos.get_config_paths()
        case _:
            return []


def _default_config_dir() -> Path:
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config is not None:
        config_dir = Path(xdg_config) / "qmk-notifier"
    else:
        try:
            home = Path.home()
        except RuntimeError as exc:
            raise RuntimeError("Could not determine configuration directory") from exc
        config_dir = home / ".config" / "qmk-notifier"
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def create_config_dir() -> Path:
    """Create the configuration directory for this platform and return it."""
    match _platform():
        case "linux":
            return linux.create_config_dir()
        case "windows":
            return windows.create_config_dir()
        case "macos":
            return macos.create_config_dir()
        case _:
            return _default_config_dir()


def create_monitor(verbose: bool = False) -> WindowMonitor:
    """Return the window monitor for this platform."""
    if _platform() == "linux":
        return X11Monitor(verbose)
    raise RuntimeError("No suitable monitor for this platform")