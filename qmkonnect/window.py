"""Description of the window that currently has focus."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class WindowInfo:
    """The application class and title of a window."""

    app_class: str
    title: str