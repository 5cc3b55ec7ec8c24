"""Status line monitor for window-manager bars, with system information components."""

__version__ = "1.1"