"""Common interface of the platform window monitors."""

from __future__ import annotations

from abc import ABC, abstractmethod


class WindowMonitor(ABC):
    """Watches focus changes and reports them to the keyboard."""

    @abstractmethod
    def platform_name(self) -> str:
        """Human-readable name of the platform being watched."""

    @abstractmethod
    def start(self) -> None:
        """Begin watching; raise if the platform cannot be watched."""

    def stop(self) -> None:
        """Stop watching. Monitors without cleanup need not override this."""
        return None