"""Configuration locations on macOS."""

from __future__ import annotations

from pathlib import Path

APP_NAME = "QMKonnect"
CONFIG_FILE_NAME = "config.toml"
SYSTEM_CONFIG_PATH = Path("/etc/qmk-notifier/config.toml")


def _home_dir() -> Path | None:
    try:
        return Path.home()
    except RuntimeError:
        return None


def _app_support_dir(home: Path) -> Path:
    return home / "Library" / "Application Support" / APP_NAME


def get_config_paths() -> list[Path]:
    """Return candidate configuration files, most preferred first."""
    paths: list[Path] = []
    home = _home_dir()
    if home is not None:
        paths.append(_app_support_dir(home) / CONFIG_FILE_NAME)
        paths.append(home / ".config" / "qmk-notifier" / CONFIG_FILE_NAME)
    paths.append(SYSTEM_CONFIG_PATH)
    return paths


def create_config_dir() -> Path:
    """Create the Application Support directory for the program and return it."""
    home = _home_dir()
    if home is None:
        raise RuntimeError("Could not determine home directory")
    config_dir = _app_support_dir(home)
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir