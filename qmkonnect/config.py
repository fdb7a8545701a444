"""Reading and writing the keyboard configuration file."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass
from pathlib import Path

_MAX_ID = 0xFFFF


class ConfigError(ValueError):
    """Raised when a configuration file cannot be understood."""


def _check_id(name: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"{name} must be an integer, got {value!r}")
    if not 0 <= value <= _MAX_ID:
        raise ConfigError(f"{name} must be between 0 and 0xffff, got {value}")
    return value


@dataclass(frozen=True)
class Config:
    """USB identifiers of the QMK keyboard to notify."""

    vendor_id: int
    product_id: int

    def __post_init__(self) -> None:
        _check_id("vendor_id", self.vendor_id)
        _check_id("product_id", self.product_id)


def render_config(vendor_id: int, product_id: int) -> str:
    """Return the text of a configuration file holding the given identifiers."""
    _check_id("vendor_id", vendor_id)
    _check_id("product_id", product_id)
    return (
        "# QMKonnect Configuration\n"
        "\n"
        "# Your QMK keyboard's vendor ID (in hex)\n"
        f"vendor_id = 0x{vendor_id:04x}\n"
        "\n"
        "# Your QMK keyboard's product ID (in hex)\n"
        f"product_id = 0x{product_id:04x}\n"
        "\n"
        "# Add any other configuration options here\n"
    )


DEFAULT_CONFIG = render_config(0xFEED, 0x0000)


def parse_config(config_path: str | Path) -> Config:
    """Read a TOML configuration file and return its identifiers."""
    path = Path(config_path)
    text = path.read_text(encoding="utf-8")
    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"invalid TOML in {path}: {exc}") from exc

    missing = [key for key in ("vendor_id", "product_id") if key not in data]
    if missing:
        raise ConfigError(f"missing field `{missing[0]}` in {path}")
    return Config(
        vendor_id=_check_id("vendor_id", data["vendor_id"]),
        product_id=_check_id("product_id", data["product_id"]),
    )


def create_default_config(config_path: str | Path) -> bool:
    """Write the default configuration unless the file exists.

    Returns True when a file was written, False when one was already there.
    """
    path = Path(config_path)
    if path.exists():
        print(f"Configuration already exists at: {path}")
        return False

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(DEFAULT_CONFIG, encoding="utf-8")

    print(f"Configuration created successfully at: {path}")
    print(
        "Note: You'll need to reload configuration with 'qmkonnect -r' "
        "to update udev rules."
    )
    return True