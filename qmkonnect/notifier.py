"""Debounced delivery of focus-change messages to a QMK keyboard."""

from __future__ import annotations

import sys
import threading
import time
from abc import ABC, abstractmethod

from qmkonnect.window import WindowInfo

SEPARATOR = "\x1d"
DEBOUNCE_INTERVAL = 0.05
QUIET_PERIOD = 0.1
_TIMER_TICK = 0.01


class Notifier(ABC):
    """Something that delivers a message to the keyboard."""

    @abstractmethod
    def notify(self, message: str) -> None:
        """Deliver one message; raise on failure."""


def format_message(window_info: WindowInfo) -> str:
    """Join the application class and title with the group separator."""
    return f"{window_info.app_class}{SEPARATOR}{window_info.title}"


def _printable(message: str) -> str:
    return message.replace(SEPARATOR, "|")


class Debouncer:
    """Sends messages at once when quiet, otherwise only the latest after a pause."""

    def __init__(
        self,
        notifier: Notifier | None = None,
        interval: float = DEBOUNCE_INTERVAL,
        quiet_period: float = QUIET_PERIOD,
    ) -> None:
        self.notifier = notifier
        self.interval = interval
        self.quiet_period = quiet_period
        self._lock = threading.Lock()
        self._send_lock = threading.Lock()
        self._last_message: str | None = None
        self._last_activity = time.monotonic()
        self._timer_running = False
        self._generation = 0

    def reset(self) -> None:
        """Forget all pending state, as if freshly created."""
        with self._lock:
            self._last_message = None
            self._last_activity = time.monotonic()
            self._timer_running = False
            self._generation += 1

    def notify(self, window_info: WindowInfo, verbose: bool = False) -> None:
        """Send or schedule a message for the given window."""
        message = format_message(window_info)
        with self._lock:
            now = time.monotonic()
            elapsed = now - self._last_activity
            is_first = self._last_message is None
            self._last_activity = now
            self._last_message = message
            send_now = elapsed > self.interval or is_first
            if not self._timer_running and not send_now:
                self._timer_running = True
                threading.Thread(
                    target=self._run_timer, args=(self._generation,), daemon=True
                ).start()

        if send_now:
            if verbose:
                print(f"Notified QMK (immediate): {_printable(message)}")
            self._send(message)
        elif verbose:
            print(f"Debouncing notification: {_printable(message)}")

    def _send(self, message: str) -> None:
        with self._send_lock:
            notifier = self.notifier
            if notifier is None:
                raise RuntimeError("no notifier has been set")
            notifier.notify(message)

    def _run_timer(self, generation: int) -> None:
        while True:
            time.sleep(_TIMER_TICK)
            with self._lock:
                if generation != self._generation:
                    return
                if time.monotonic() - self._last_activity < self.quiet_period:
                    continue
                message = self._last_message
                self._last_message = None
                self._timer_running = False
            break

        if message is None:
            return
        try:
            self._send(message)
        except Exception as exc:  # the timer thread has nobody to raise to
            print(f"Error sending debounced notification: {exc}", file=sys.stderr)


_default = Debouncer()


def set_notifier(notifier: Notifier | None) -> None:
    """Replace the notifier used by notify_qmk."""
    with _default._send_lock:
        _default.notifier = notifier


def notify_qmk(window_info: WindowInfo, verbose: bool = False) -> None:
    """Report a focus change through the shared debouncer."""
    _default.notify(window_info, verbose)