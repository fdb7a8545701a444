"""Detection of a running Hyprland compositor and focus-change bookkeeping."""

from __future__ import annotations

import os
import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path

_SIGNATURE_VAR = "HYPRLAND_INSTANCE_SIGNATURE"
_RUNTIME_VAR = "XDG_RUNTIME_DIR"
_SOCKET_NAME = ".socket.sock"


class HyprlandError(RuntimeError):
    """Raised when no usable Hyprland instance can be found."""


@dataclass(frozen=True)
class WindowState:
    """Last known application class and title of the focused window."""

    app_class: str
    title: str


def window_changed(last: WindowState | None, current: WindowState | None) -> bool:
    """Tell whether moving from ``last`` to ``current`` is worth reporting."""
    if last is None and current is None:
        return False
    if last is None or current is None:
        return True
    if last.app_class == "empty" and current.app_class == "empty":
        return False
    return last != current


def _find_socket_dir(runtime_dir: Path) -> Path | None:
    hypr_dir = runtime_dir / "hypr"
    if not hypr_dir.exists():
        return None
    try:
        entries = sorted(hypr_dir.iterdir())
    except OSError:
        return None
    for entry in entries:
        if (entry / _SOCKET_NAME).exists():
            return entry
    return None


def check_hyprland_environment() -> None:
    """Make sure a Hyprland socket is reachable; raise HyprlandError if not.

    When the instance signature is not set but a socket is found, the
    signature variable is set to the instance that owns it.
    """
    runtime = os.environ.get(_RUNTIME_VAR)
    signature = os.environ.get(_SIGNATURE_VAR)

    if signature is not None and runtime is not None:
        if (Path(runtime) / "hypr" / signature / _SOCKET_NAME).exists():
            return

    if runtime is not None:
        instance = _find_socket_dir(Path(runtime))
        if instance is not None:
            os.environ[_SIGNATURE_VAR] = instance.name
            return

    try:
        result = subprocess.run(
            ["ps", "-e", "-o", "comm="], capture_output=True, check=False
        )
    except OSError as exc:
        raise HyprlandError(f"could not list processes: {exc}") from exc

    processes = result.stdout.decode("utf-8", errors="replace")
    if any("Hyprland" in line for line in processes.splitlines()):
        raise HyprlandError(
            "Hyprland is running but socket not found. "
            "Ensure XDG_RUNTIME_DIR is set and accessible."
        )
    raise HyprlandError("Hyprland is not running")


def is_hyprland_running() -> bool:
    """Return True when a Hyprland instance can be reached."""
    try:
        check_hyprland_environment()
    except HyprlandError as exc:
        print(f"Hyprland environment check failed: {exc}", file=sys.stderr)
        return False
    return True