"""Tests for gateway.paths module."""

import sys
from pathlib import Path

import pytest

from gateway import paths
from gateway.paths import get_data_dir


@pytest.fixture
def home(monkeypatch, tmp_path):
    """Point the user's home directory at a temp dir."""
    home_dir = tmp_path / "home"
    monkeypatch.setattr(Path, "home", lambda: home_dir)
    return home_dir


@pytest.fixture
def checkout(monkeypatch, tmp_path):
    """Fake a source checkout as the project root."""
    root = tmp_path / "checkout"
    root.mkdir()
    (root / "pyproject.toml").write_text("[project]\n")
    monkeypatch.setattr(paths, "PROJECT_ROOT", root)
    return root


class TestGetDataDir:
    """Test cases for get_data_dir()."""

    def test_script_mode(self, monkeypatch, checkout, home):
        """Test get_data_dir() in a source checkout returns the project root."""
        monkeypatch.delattr("sys.frozen", raising=False)

        data_dir = get_data_dir()

        assert data_dir == checkout
        assert not home.exists()

    def test_installed_package_uses_user_dir(self, monkeypatch, tmp_path, home):
        """Test an installed package never writes next to site-packages."""
        site_packages = tmp_path / "site-packages"
        site_packages.mkdir()
        monkeypatch.setattr(paths, "PROJECT_ROOT", site_packages)
        monkeypatch.delattr("sys.frozen", raising=False)
        monkeypatch.setattr("sys.platform", "linux")

        data_dir = get_data_dir()

        assert data_dir == home / ".config" / "devicedashboard"
        assert data_dir.exists()
        assert list(site_packages.iterdir()) == []

    def test_bundled_mode_ignores_checkout(self, monkeypatch, checkout, home):
        """Test a frozen build uses the user dir even next to a pyproject.toml."""
        monkeypatch.setattr(sys, "frozen", True, raising=False)
        monkeypatch.setattr("sys.platform", "linux")

        assert get_data_dir() == home / ".config" / "devicedashboard"

    def test_bundled_mode_macos(self, monkeypatch, home):
        """Test get_data_dir() in bundled mode on macOS."""
        monkeypatch.setattr(sys, "frozen", True, raising=False)
        monkeypatch.setattr("sys.platform", "darwin")

        data_dir = get_data_dir()

        assert data_dir == home / "Library" / "Application Support" / "DeviceDashboard"
        assert data_dir.exists()

    def test_bundled_mode_windows(self, monkeypatch, home):
        """Test get_data_dir() in bundled mode on Windows."""
        monkeypatch.setattr(sys, "frozen", True, raising=False)
        monkeypatch.setattr("sys.platform", "win32")

        data_dir = get_data_dir()

        assert data_dir == home / "AppData" / "Local" / "DeviceDashboard"

    def test_bundled_mode_linux(self, monkeypatch, home):
        """Test get_data_dir() in bundled mode on Linux."""
        monkeypatch.setattr(sys, "frozen", True, raising=False)
        monkeypatch.setattr("sys.platform", "linux")

        data_dir = get_data_dir()

        assert data_dir == home / ".config" / "devicedashboard"
