"""Configuration locations and udev rule handling on Linux."""

from __future__ import annotations

import os
import subprocess
import tempfile
from pathlib import Path

APP_DIR_NAME = "qmk-notifier"
CONFIG_FILE_NAME = "config.toml"
SYSTEM_CONFIG_PATH = Path("/etc/qmk-notifier/config.toml")
UDEV_RULES_PATH = Path("/etc/udev/rules.d/99-qmkonnect.rules")
_TEMP_RULES_NAME = "99-qmkonnect.rules.tmp"


def _home_dir() -> Path | None:
    try:
        return Path.home()
    except RuntimeError:
        return None


def get_config_paths() -> list[Path]:
    """Return candidate configuration files, most preferred first."""
    paths: list[Path] = []
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config is not None:
        paths.append(Path(xdg_config) / APP_DIR_NAME / CONFIG_FILE_NAME)
    home = _home_dir()
    if home is not None:
        paths.append(home / ".config" / APP_DIR_NAME / CONFIG_FILE_NAME)
    paths.append(SYSTEM_CONFIG_PATH)
    return paths


def create_config_dir() -> Path:
    """Create the per-user configuration directory and return it."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config is not None:
        config_dir = Path(xdg_config) / APP_DIR_NAME
    else:
        home = _home_dir()
        if home is None:
            raise RuntimeError("Could not determine configuration directory")
        config_dir = home / ".config" / APP_DIR_NAME
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def extract_attr_value(content: str, attr: str) -> str:
    """Return the quoted value of the first ``ATTRS{attr}=="..."`` in the rules."""
    pattern = f'ATTRS{{{attr}}}=="'
    for line in content.splitlines():
        found = line.find(pattern)
        if found < 0:
            continue
        start = found + len(pattern)
        end = line.find('"', start)
        if end >= 0:
            return line[start:end]
    raise ValueError(f"Could not find {attr} in udev rules")


def _format_id(value: str) -> str:
    while value.startswith("0x"):
        value = value[2:]
    return value.lower()


def rewrite_udev_rules(content: str, vendor_id: str, product_id: str) -> str:
    """Return the rules with their vendor and product identifiers replaced."""
    vendor = _format_id(vendor_id)
    product = _format_id(product_id)
    old_vendor = extract_attr_value(content, "idVendor")
    old_product = extract_attr_value(content, "idProduct")
    return content.replace(
        f'ATTRS{{idVendor}}=="{old_vendor}"', f'ATTRS{{idVendor}}=="{vendor}"'
    ).replace(
        f'ATTRS{{idProduct}}=="{old_product}"', f'ATTRS{{idProduct}}=="{product}"'
    )


def update_udev_rules(
    vendor_id: str,
    product_id: str,
    verbose: bool = False,
    rules_path: str | Path = UDEV_RULES_PATH,
) -> None:
    """Rewrite the installed udev rules for new identifiers, moving them in with sudo."""
    rules_path = Path(rules_path)
    if verbose:
        print(f"Updating udev rules at {rules_path}")

    if not rules_path.exists():
        raise FileNotFoundError(
            f"Udev rules file not found at {rules_path}. This operation may need "
            "to be run by root during package installation."
        )

    if verbose:
        print(
            f"Using formatted vendor_id: {_format_id(vendor_id)} "
            f"and product_id: {_format_id(product_id)}"
        )

    content = rules_path.read_text(encoding="utf-8")
    updated = rewrite_udev_rules(content, vendor_id, product_id)

    temp_path = Path(tempfile.gettempdir()) / _TEMP_RULES_NAME
    temp_path.write_text(updated, encoding="utf-8")

    result = subprocess.run(
        ["sudo", "mv", str(temp_path), str(rules_path)],
        capture_output=True,
        check=False,
    )
    if result.returncode != 0:
        stderr = (result.stderr or b"").decode("utf-8", errors="replace")
        raise RuntimeError(f"Failed to update udev rules: {stderr}")


def reload_udev_rules() -> None:
    """Ask udev to reload its rules."""
    result = subprocess.run(
        ["sudo", "udevadm", "control", "--reload-rules"],
        capture_output=True,
        check=False,
    )
    if result.returncode != 0:
        stderr = (result.stderr or b"").decode("utf-8", errors="replace")
        raise RuntimeError(f"Failed to reload udev rules: {stderr}")


def decimal_to_hex(value: int) -> str:
    """Format a 16-bit identifier as four lower-case hex digits."""
    if not 0 <= value <= 0xFFFF:
        raise ValueError(f"identifier out of range: {value}")
    return f"{value:04x}"