"""
Core application constants.

Centralizes configuration defaults and application identifiers.
"""

# Application Identifiers
APP_NAME = "Device Dashboard"
APP_DATA_DIR_NAME = "DeviceDashboard"

# Default Configuration Values
DEFAULT_SERVER_URL = "http://192.168.0.1"
DEFAULT_LOG_LEVEL = "INFO"

# Session Persistence
TOKEN_STORAGE_KEY = "auth_token"
DEFAULT_TOKEN_FILENAME = "session.json"
CONFIG_FILENAME = "config.json"

# Unit conversions
BYTES_PER_GB = 1073741824
