"""Polling window monitor for X11 sessions."""

from __future__ import annotations

import subprocess
import sys
import threading

from qmkonnect import notifier
from qmkonnect.monitor import WindowMonitor
from qmkonnect.window import WindowInfo

POLL_INTERVAL = 0.1


class X11Monitor(WindowMonitor):
    """Polls the X server for the active window and reports changes."""

    def __init__(self, verbose: bool = False) -> None:
        self.verbose = verbose
        self._stop_event = threading.Event()
        self._stop_event.set()
        self._thread: threading.Thread | None = None

    @property
    def running(self) -> bool:
        return not self._stop_event.is_set()

    def platform_name(self) -> str:
        return "Linux (X11)"

    def get_active_window_info(self) -> WindowInfo:
        """Return a description of the active window, or of the desktop."""
        try:
            result = subprocess.run(
                ["xprop", "-root", "_NET_ACTIVE_WINDOW"],
                capture_output=True,
                check=False,
            )
        except OSError:
            return WindowInfo("Linux", "Desktop")
        output = result.stdout.decode("utf-8", errors="replace")
        if "window id" in output:
            return WindowInfo("X11Application", "Active Window")
        return WindowInfo("Linux", "Desktop")

    def start(self) -> None:
        if self.verbose:
            print("Starting Linux X11 window monitor")
        stop_event = threading.Event()
        self._stop_event = stop_event
        self._thread = threading.Thread(
            target=self._poll, args=(stop_event,), daemon=True
        )
        self._thread.start()
        if self.verbose:
            print("Linux X11 monitor started - polling for window changes")

    def _poll(self, stop_event: threading.Event) -> None:
        last: WindowInfo | None = None
        while not stop_event.is_set():
            window_info = self.get_active_window_info()
            if window_info != last:
                if self.verbose:
                    print(
                        f"Window changed - Class: '{window_info.app_class}', "
                        f"Title: '{window_info.title}'"
                    )
                try:
                    notifier.notify_qmk(window_info, self.verbose)
                except Exception as exc:  # keep polling whatever the keyboard says
                    print(f"Failed to notify QMK: {exc}", file=sys.stderr)
                last = window_info
            stop_event.wait(POLL_INTERVAL)
        if self.verbose:
            print("Linux X11 monitor thread stopped")

    def stop(self) -> None:
        if self.verbose:
            print("Stopping Linux X11 window monitor")
        self._stop_event.set()