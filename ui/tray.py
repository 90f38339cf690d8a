"""System tray icon for the device dashboard."""

import logging
from typing import Callable

from PySide6.QtWidgets import QSystemTrayIcon, QMenu, QApplication
from PySide6.QtGui import QAction
from PySide6.QtCore import Signal, QObject

from gateway.constants import APP_NAME

logger = logging.getLogger(__name__)


class TraySignals(QObject):
    """Signals for tray events."""

    sign_out_requested = Signal()
    quit_requested = Signal()


class TrayManager:
    """Tray icon that keeps the dashboard reachable after the login dialog hides."""

    def __init__(self, app: QApplication, server_url: str = ""):
        """Initialize tray manager.

        Args:
            app: Qt application instance
            server_url: Device address shown in the tooltip
        """
        self.app = app
        self.signals = TraySignals()

        self._tray_icon = QSystemTrayIcon()
        self._menu = QMenu()

        self._tray_icon.setIcon(self.app.style().standardIcon(
            self.app.style().StandardPixmap.SP_ComputerIcon
        ))
        self._build_menu()

        self._tray_icon.setContextMenu(self._menu)
        self._tray_icon.setToolTip(f"{APP_NAME} - {server_url}" if server_url else APP_NAME)

    def _build_menu(self) -> None:
        """Build the tray menu."""
        self._menu.clear()

        sign_out_action = QAction("Sign out", self._menu)
        sign_out_action.triggered.connect(self.signals.sign_out_requested.emit)
        self._menu.addAction(sign_out_action)

        self._menu.addSeparator()

        quit_action = QAction("Quit", self._menu)
        quit_action.triggered.connect(self.signals.quit_requested.emit)
        self._menu.addAction(quit_action)

    def show(self) -> None:
        """Show the tray icon."""
        self._tray_icon.show()
        logger.info("Tray icon shown")

    def hide(self) -> None:
        """Hide the tray icon."""
        self._tray_icon.hide()
        logger.info("Tray icon hidden")

    @property
    def tray_icon(self) -> QSystemTrayIcon:
        """Get the underlying QSystemTrayIcon."""
        return self._tray_icon

    def on_sign_out_requested(self, callback: Callable[[], None]) -> None:
        """Register a callback for sign-out request."""
        self.signals.sign_out_requested.connect(callback)

    def on_quit_requested(self, callback: Callable[[], None]) -> None:
        """Register a callback for quit request."""
        self.signals.quit_requested.connect(callback)
