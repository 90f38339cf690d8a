"""Login dialog for the device dashboard."""

import logging

from PySide6.QtWidgets import (
    QDialog,
    QVBoxLayout,
    QHBoxLayout,
    QFormLayout,
    QLabel,
    QLineEdit,
    QPushButton,
)
from PySide6.QtCore import Qt, Signal

from gateway.constants import APP_NAME

logger = logging.getLogger(__name__)


class LoginDialog(QDialog):
    """Password prompt shown whenever the session is missing or rejected.

    The dialog only collects input. Submission is announced through
    ``password_submitted``; whoever owns the gateway performs the login and
    calls ``show_login``/``hide_login`` with the outcome.
    """

    password_submitted = Signal(str)

    def __init__(self, server_url: str = "", parent=None):
        super().__init__(parent)
        self._server_url = server_url

        self.setWindowTitle(f"{APP_NAME} - Login")
        self.setMinimumWidth(360)
        self.setWindowFlags(
            self.windowFlags() |
            Qt.WindowType.WindowStaysOnTopHint
        )

        self._setup_ui()

    def _setup_ui(self) -> None:
        """Set up the UI components."""
        layout = QVBoxLayout(self)

        if self._server_url:
            server_label = QLabel(f"Device: {self._server_url}")
            server_label.setStyleSheet("color: gray;")
            layout.addWidget(server_label)

        form = QFormLayout()
        self.password_edit = QLineEdit()
        self.password_edit.setEchoMode(QLineEdit.EchoMode.Password)
        self.password_edit.setPlaceholderText("Enter device password")
        self.password_edit.returnPressed.connect(self._on_submit)
        form.addRow("Password:", self.password_edit)
        layout.addLayout(form)

        self.message_label = QLabel("")
        self.message_label.setStyleSheet("color: red;")
        self.message_label.setWordWrap(True)
        self.message_label.hide()
        layout.addWidget(self.message_label)

        button_layout = QHBoxLayout()
        button_layout.addStretch()

        self.login_btn = QPushButton("Log in")
        self.login_btn.setDefault(True)
        self.login_btn.clicked.connect(self._on_submit)
        button_layout.addWidget(self.login_btn)

        layout.addLayout(button_layout)

    def _set_busy(self, busy: bool) -> None:
        self.login_btn.setEnabled(not busy)
        self.password_edit.setEnabled(not busy)

    def _on_submit(self) -> None:
        password = self.password_edit.text()
        if not password:
            self._show_message("Password is required")
            return

        self._set_busy(True)
        self.password_submitted.emit(password)

    def _show_message(self, message: str | None) -> None:
        if message:
            self.message_label.setText(message)
            self.message_label.show()
        else:
            self.message_label.clear()
            self.message_label.hide()

    # ILoginPrompt

    def show_login(self, message: str | None = None) -> None:
        """Show the dialog, optionally with an error message."""
        self._set_busy(False)
        self._show_message(message)
        self.password_edit.clear()
        self.show()
        self.raise_()
        self.activateWindow()
        self.password_edit.setFocus()

    def hide_login(self) -> None:
        """Hide the dialog."""
        self._set_busy(False)
        self._show_message(None)
        self.password_edit.clear()
        self.hide()
