"""Path utilities for bundled and installed application support."""

import sys
from pathlib import Path

from .constants import APP_DATA_DIR_NAME

# Directory holding the gateway package: the checkout root when run from source
PROJECT_ROOT = Path(__file__).parent.parent


def _is_source_checkout() -> bool:
    """True when running from a source tree rather than a bundle or site-packages."""
    if getattr(sys, 'frozen', False):
        return False
    return (PROJECT_ROOT / 'pyproject.toml').exists()


def _user_data_dir() -> Path:
    if sys.platform == 'darwin':
        return Path.home() / 'Library' / 'Application Support' / APP_DATA_DIR_NAME
    elif sys.platform == 'win32':
        return Path.home() / 'AppData' / 'Local' / APP_DATA_DIR_NAME
    return Path.home() / '.config' / APP_DATA_DIR_NAME.lower()


def get_data_dir() -> Path:
    """Get the user data directory for config and session data.

    Returns a writable directory. Bundled apps extract to a read-only temp
    directory and installed packages live in a shared interpreter tree, so
    both keep user data under the platform app-data location. Only a source
    checkout keeps its data next to the code.
    """
    if _is_source_checkout():
        data_dir = PROJECT_ROOT
    else:
        data_dir = _user_data_dir()

    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir
