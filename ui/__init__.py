"""UI module for the device dashboard."""

from .login import LoginDialog
from .tray import TrayManager

__all__ = ["LoginDialog", "TrayManager"]
