"""Window filtering and configuration locations on Windows."""

from __future__ import annotations

import os
import sys
from pathlib import Path

from qmkonnect.window import WindowInfo

APP_NAME = "QMKonnect"
CONFIG_FILE_NAME = "config.toml"

IGNORED_CLASSES = frozenset(
    {
        "ForegroundStaging",
        "XamlExplorerHostIslandWindow",
        "Windows.UI.Composition.DesktopWindowContentBridge",
        "Windows.UI.Input.InputSite.WindowClass",
        "TaskSwitcherWnd",
        "TaskSwitcherOverlayWnd",
        "Windows.UI.Core.CoreWindow",
        # UWP app frame; the actual content window is what matters.
        "ApplicationFrameWindow",
    }
)

EMPTY_TITLE_ALLOWED_CLASSES = frozenset(
    {
        "CASCADIA_HOSTING_WINDOW_CLASS",
        "Chrome_WidgetWin_1",
    }
)


def should_ignore_window(window_info: WindowInfo) -> bool:
    """Tell whether a focus change belongs to a shell component, not an application."""
    if window_info.app_class in IGNORED_CLASSES:
        return True

    title = window_info.title
    if not title:
        return window_info.app_class not in EMPTY_TITLE_ALLOWED_CLASSES

    # Titles shorter than two bytes are unlikely to be real applications.
    return len(title.encode("utf-8")) < 2


def _executable_dir() -> Path | None:
    program = sys.argv[0] if sys.argv and sys.argv[0] else sys.executable
    if not program:
        return None
    try:
        return Path(program).resolve().parent
    except OSError:
        return None


def get_config_paths() -> list[Path]:
    """Return candidate configuration files, most preferred first."""
    paths: list[Path] = []
    app_data = os.environ.get("APPDATA")
    if app_data is not None:
        paths.append(Path(app_data) / APP_NAME / CONFIG_FILE_NAME)
    local_app_data = os.environ.get("LOCALAPPDATA")
    if local_app_data is not None:
        paths.append(Path(local_app_data) / APP_NAME / CONFIG_FILE_NAME)
    exe_dir = _executable_dir()
    if exe_dir is not None:
        paths.append(exe_dir / CONFIG_FILE_NAME)
    return paths


def create_config_dir() -> Path:
    """Create the per-user configuration directory under APPDATA and return it."""
    app_data = os.environ.get("APPDATA")
    if app_data is None:
        raise RuntimeError("Could not determine APPDATA directory")
    config_dir = Path(app_data) / APP_NAME
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir