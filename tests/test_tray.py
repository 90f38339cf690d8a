"""Tests for ui.tray module."""

import pytest
from unittest.mock import MagicMock, patch

pytest.importorskip("PySide6")

from ui.tray import TrayManager


@pytest.fixture
def mock_qt_app():
    """Mock Qt application."""
    app = MagicMock()
    app.style().standardIcon.return_value = MagicMock()
    return app


class TestTrayManagerMenu:
    """Tests for the tray menu."""

    @patch("ui.tray.QAction")
    @patch("ui.tray.QSystemTrayIcon")
    @patch("ui.tray.QMenu")
    def test_menu_has_sign_out_and_quit(self, mock_menu, mock_tray_icon, mock_action, mock_qt_app):
        TrayManager(mock_qt_app)

        labels = [c.args[0] for c in mock_action.call_args_list]
        assert labels == ["Sign out", "Quit"]

    @patch("ui.tray.QAction")
    @patch("ui.tray.QSystemTrayIcon")
    @patch("ui.tray.QMenu")
    def test_tooltip_names_device(self, mock_menu, mock_tray_icon, mock_action, mock_qt_app):
        tray = TrayManager(mock_qt_app, server_url="http://192.168.0.1")

        tray.tray_icon.setToolTip.assert_called_with("Device Dashboard - http://192.168.0.1")

    @patch("ui.tray.QAction")
    @patch("ui.tray.QSystemTrayIcon")
    @patch("ui.tray.QMenu")
    def test_show_and_hide(self, mock_menu, mock_tray_icon, mock_action, mock_qt_app):
        tray = TrayManager(mock_qt_app)

        tray.show()
        tray.hide()

        tray.tray_icon.show.assert_called_once()
        tray.tray_icon.hide.assert_called_once()


class TestTrayManagerCallbacks:
    """Tests for tray callbacks."""

    @patch("ui.tray.QAction")
    @patch("ui.tray.QSystemTrayIcon")
    @patch("ui.tray.QMenu")
    def test_quit_requested(self, mock_menu, mock_tray_icon, mock_action, mock_qt_app):
        tray = TrayManager(mock_qt_app)
        callback = MagicMock()
        tray.on_quit_requested(callback)

        tray.signals.quit_requested.emit()

        callback.assert_called_once()

    @patch("ui.tray.QAction")
    @patch("ui.tray.QSystemTrayIcon")
    @patch("ui.tray.QMenu")
    def test_sign_out_requested(self, mock_menu, mock_tray_icon, mock_action, mock_qt_app):
        tray = TrayManager(mock_qt_app)
        callback = MagicMock()
        tray.on_sign_out_requested(callback)

        tray.signals.sign_out_requested.emit()

        callback.assert_called_once()
