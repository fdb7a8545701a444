"""Command-line entry point of the QMK window notifier."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

from qmkonnect import platforms
from qmkonnect.config import create_default_config, parse_config
from qmkonnect.config_manager import ConfigManager, create_config_manager
from qmkonnect.runner import create_runner

_FALLBACK_VERSION = "0.1.0"


def _version() -> str:
    try:
        return version("qmkonnect")
    except PackageNotFoundError:
        return _FALLBACK_VERSION


def print_help() -> None:
    """Print the usage summary."""
    print(f"QMKonnect v{_version()}")
    print("Usage: qmkonnect [OPTIONS]")
    print("\nOptions:")
    print("  -h, --help     Display this help message")
    print("  -v, --verbose  Enable verbose logging")
    print("  -c, --config   Create a configuration file")
    print("  -r, --reload   Reload configuration and update system files")
    print("  -l, --list     List supported platforms")
    print("\nRunning without options will start the notifier service")


def get_config_path() -> Path:
    """Return the first existing configuration file for this platform."""
    return ConfigManager().find_config_file()


def reload_config(verbose: bool = False) -> None:
    """Re-read the configuration and update system files that depend on it."""
    print("Reloading configuration...")

    try:
        config_path = get_config_path()
    except FileNotFoundError as exc:
        print(f"Note: Could not update system configuration: {exc}")
        return

    config = parse_config(config_path)

    if verbose:
        print(f"Read configuration from {config_path}")
        print(
            f"Using vendor_id: {config.vendor_id:#06x}, "
            f"product_id: {config.product_id:#06x}"
        )

    if sys.platform.startswith("linux"):
        create_config_manager().update_platform_config(config, verbose)

    print("Configuration reloaded successfully.")


def create_config() -> Path:
    """Create the default configuration file if needed and return its path."""
    print("Creating configuration...")
    config_path = platforms.create_config_dir() / "config.toml"
    create_default_config(config_path)
    return config_path


def _run(args: list[str]) -> None:
    verbose = any(arg in ("-v", "--verbose") for arg in args)

    if any(arg in ("-h", "--help") for arg in args):
        print_help()
        return
    if any(arg in ("-c", "--config") for arg in args):
        create_config()
        return
    if any(arg in ("-r", "--reload") for arg in args):
        reload_config(verbose)
        return

    create_runner(verbose).run(args)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line; return the process exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        _run(args)
    except Exception as exc:
        print(f"Application error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())