"""Tests for ui.login module."""

import os
import sys

import pytest

from gateway.protocols import ILoginPrompt


@pytest.fixture
def dialog():
    """Create a login dialog on an offscreen Qt platform."""
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    # Import here to avoid Qt initialization issues in tests
    try:
        from PySide6.QtWidgets import QApplication
        from ui.login import LoginDialog

        app = QApplication.instance()
        if app is None:
            app = QApplication(sys.argv)

        window = LoginDialog(server_url="http://192.168.0.1")
        yield window

        window.deleteLater()
    except ImportError:
        pytest.skip("PySide6 not available")


class TestLoginDialog:
    """Test cases for LoginDialog."""

    def test_implements_prompt_protocol(self, dialog):
        assert isinstance(dialog, ILoginPrompt)

    def test_empty_password_not_submitted(self, dialog):
        submitted = []
        dialog.password_submitted.connect(submitted.append)

        dialog._on_submit()

        assert submitted == []
        assert dialog.message_label.text() == "Password is required"

    def test_submit_emits_password_and_disables_input(self, dialog):
        submitted = []
        dialog.password_submitted.connect(submitted.append)
        dialog.password_edit.setText("secret")

        dialog._on_submit()

        assert submitted == ["secret"]
        assert not dialog.login_btn.isEnabled()

    def test_show_login_with_message(self, dialog):
        dialog.password_edit.setText("wrong")
        dialog._set_busy(True)

        dialog.show_login("wrong password")

        assert dialog.isVisible()
        assert dialog.message_label.text() == "wrong password"
        assert dialog.password_edit.text() == ""
        assert dialog.login_btn.isEnabled()

    def test_show_login_without_message_clears_previous(self, dialog):
        dialog.show_login("old error")

        dialog.show_login()

        assert dialog.message_label.text() == ""

    def test_hide_login(self, dialog):
        dialog.show_login()

        dialog.hide_login()

        assert not dialog.isVisible()
