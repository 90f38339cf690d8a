#!/usr/bin/env python3
"""Main entry point for the device dashboard."""

import asyncio
import logging
import sys
from pathlib import Path

# Add the project root to the path before imports
if not getattr(sys, 'frozen', False):
    PROJECT_ROOT = Path(__file__).parent
    sys.path.insert(0, str(PROJECT_ROOT))

from PySide6 import QtAsyncio
from PySide6.QtWidgets import QApplication

from gateway.application import Application
from gateway.di_container import ContainerBuilder
from gateway.errors import GatewayError
from gateway.event_bus import Topics
from ui.login import LoginDialog
from ui.tray import TrayManager

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


class Dashboard:
    """Wires the container, the login dialog and the coordinator together."""

    def __init__(self):
        self.container = ContainerBuilder.build_container()
        self._background_tasks: set[asyncio.Task] = set()
        self._done = asyncio.Event()

        config_manager = self.container.get("config_manager")
        self.login_dialog = LoginDialog(server_url=config_manager.server_url)

        self.application = Application(
            gateway=self.container.get("gateway"),
            channel=self.container.get("unauthorized_channel"),
            event_bus=self.container.get("event_bus"),
            login_prompt=self.login_dialog,
        )

        self.tray_manager = TrayManager(QApplication.instance(), server_url=config_manager.server_url)
        self.tray_manager.on_sign_out_requested(self._on_sign_out)
        self.tray_manager.on_quit_requested(self._on_quit)

        self.login_dialog.password_submitted.connect(self._on_password_submitted)
        self.login_dialog.rejected.connect(self._on_login_rejected)
        self.container.get("event_bus").subscribe(Topics.AUTH_LOGGED_IN, self._on_logged_in)

    def _create_task(self, coro) -> asyncio.Task:
        """Create a background task with automatic cleanup."""
        task = asyncio.create_task(coro)
        self._background_tasks.add(task)
        task.add_done_callback(self._background_tasks.discard)
        return task

    def _on_password_submitted(self, password: str) -> None:
        self._create_task(self.application.submit_password(password))

    def _on_login_rejected(self) -> None:
        """Login dialog closed without logging in - quit."""
        logger.info("Login cancelled")
        self._done.set()

    def _on_sign_out(self) -> None:
        self._create_task(self.application.sign_out())

    def _on_quit(self) -> None:
        """Quit requested from the tray."""
        logger.info("Quit requested")
        self._done.set()

    def _on_logged_in(self, data: None) -> None:
        self._create_task(self._show_device_info())

    async def _show_device_info(self) -> None:
        try:
            info = await self.container.get("device_api").fetch_system_info()
        except GatewayError as e:
            logger.error(f"Could not fetch system info: {e}")
            return
        logger.info(f"Device info: {info}")

    async def run(self) -> None:
        """Run until the login dialog is dismissed or quit is chosen from the tray."""
        self.tray_manager.show()

        status = await self.application.check_session()
        if status is not None and not self.login_dialog.isVisible():
            self._on_logged_in(None)

        await self._done.wait()
        self.tray_manager.hide()
        await self.application.shutdown()


async def run_dashboard() -> None:
    """Build the dashboard inside the running event loop and run it."""
    dashboard = Dashboard()
    try:
        await dashboard.run()
    except asyncio.CancelledError:
        logger.info("Interrupted")
        await dashboard.application.shutdown()
        raise


def main():
    """Main entry point."""
    # Create Qt application
    app = QApplication(sys.argv)
    app.setQuitOnLastWindowClosed(False)

    # Qt-driven asyncio event loop
    QtAsyncio.run(run_dashboard(), keep_running=False, quit_qapp=True, handle_sigint=True)


if __name__ == "__main__":
    main()
