"""Focus-change messages for QMK keyboards: configuration, debouncing and an X11 monitor."""

__version__ = "0.1.0"

__all__ = ["__version__"]