"""Finding, loading and creating the configuration on the running platform."""

from __future__ import annotations

import sys
from pathlib import Path

from qmkonnect import linux, platforms
from qmkonnect.config import Config, create_default_config, parse_config

CONFIG_FILE_NAME = "config.toml"


class ConfigManager:
    """Configuration handling shared by every platform.

    Platforms with nothing extra to do when the configuration changes use
    this class as it is.
    """

    def get_config_paths(self) -> list[Path]:
        """Return candidate configuration files, most preferred first."""
        return platforms.get_config_paths()

    def create_config_dir(self) -> Path:
        """Create the configuration directory and return it."""
        return platforms.create_config_dir()

    def find_config_file(self) -> Path:
        """Return the first candidate configuration file that exists."""
        found = next((path for path in self.get_config_paths() if path.exists()), None)
        if found is None:
            raise FileNotFoundError(
                "No configuration file found in any of the expected locations"
            )
        return found

    def load_config(self) -> Config:
        """Find the configuration file and parse it."""
        return parse_config(self.find_config_file())

    def create_default_config(self) -> Path:
        """Write the default configuration unless one exists; return its path."""
        config_path = self.create_config_dir() / CONFIG_FILE_NAME
        create_default_config(config_path)
        return config_path

    def update_platform_config(self, config: Config, verbose: bool = False) -> None:
        """Bring system files in line with the configuration; nothing to do here."""
        return None


class _LinuxConfigManager(ConfigManager):
    """Keeps the udev rules in line with the configured identifiers."""

    def update_platform_config(self, config: Config, verbose: bool = False) -> None:
        vendor_hex = linux.decimal_to_hex(config.vendor_id)
        product_hex = linux.decimal_to_hex(config.product_id)

        try:
            linux.update_udev_rules(vendor_hex, product_hex, verbose)
        except (OSError, ValueError, RuntimeError) as exc:
            if verbose:
                print(f"Warning: Could not update udev rules: {exc}")

        try:
            linux.reload_udev_rules()
        except (OSError, RuntimeError) as exc:
            if verbose:
                print(f"Warning: Could not reload udev rules: {exc}")


def create_config_manager() -> ConfigManager:
    """Return the configuration manager for the running platform."""
    if sys.platform.startswith("linux"):
        return _LinuxConfigManager()
    return ConfigManager()