"""Running the notifier in the foreground on the current platform."""

from __future__ import annotations

import sys
import threading
from abc import ABC, abstractmethod
from collections.abc import Sequence

from qmkonnect import platforms
from qmkonnect.monitor import WindowMonitor

_WAIT_TICK = 0.2


class PlatformRunner(ABC):
    """Starts the window monitor and keeps the program alive."""

    @abstractmethod
    def run(self, args: Sequence[str]) -> None:
        """Run until the user or the monitor ends the program."""


class LinuxRunner(PlatformRunner):
    """Runs the window monitor on Linux until interrupted."""

    def __init__(self, verbose: bool = False) -> None:
        self.verbose = verbose
        self._shutdown = threading.Event()

    def _make_monitor(self) -> WindowMonitor:
        return platforms.create_monitor(self.verbose)

    def _wait_for_shutdown(self) -> None:
        # A timed wait keeps Ctrl+C responsive.
        while not self._shutdown.wait(_WAIT_TICK):
            pass

    def run(self, args: Sequence[str] = ()) -> None:
        monitor = self._make_monitor()

        print("QMKonnect started")
        if self.verbose:
            print("Verbose logging enabled")
            print(f"Using platform: {monitor.platform_name()}")

        try:
            monitor.start()
        except Exception as exc:
            print(f"Monitor error: {exc}", file=sys.stderr)
            raise

        try:
            self._wait_for_shutdown()
        except KeyboardInterrupt:
            print("\nReceived Ctrl+C, shutting down...")
        finally:
            monitor.stop()

        print("Monitor stopped, exiting.")


def create_runner(verbose: bool = False) -> PlatformRunner:
    """Return the runner for the current platform."""
    if sys.platform.startswith("linux"):
        return LinuxRunner(verbose)
    raise RuntimeError("Unsupported platform")