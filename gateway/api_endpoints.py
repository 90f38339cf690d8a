"""
API endpoint and HTTP header constants.

Centralizes device API endpoints and HTTP headers used for communication.
"""

# Auth Endpoints
ENDPOINT_AUTH_LOGIN = "/api/auth/login"
ENDPOINT_AUTH_LOGOUT = "/api/auth/logout"
ENDPOINT_AUTH_PASSWORD = "/api/auth/password"
ENDPOINT_AUTH_STATUS = "/api/auth/status"

# System
ENDPOINT_INFO = "/api/info"
ENDPOINT_CLEAR_CACHE = "/api/clear_cache"
ENDPOINT_DEVICE_CONTROL = "/api/device_control"
ENDPOINT_SERIAL = "/api/serial"
ENDPOINT_ACTIVATION_KEY = "/api/key"

# Network
ENDPOINT_AIRPLANE_MODE = "/api/airplane_mode"
ENDPOINT_SET_NETWORK = "/api/set_network"
ENDPOINT_SWITCH_SLOT = "/api/switch"

# Traffic
ENDPOINT_TRAFFIC_TOTAL = "/api/get/Total"
ENDPOINT_TRAFFIC_CONFIG = "/api/get/set"
ENDPOINT_TRAFFIC_SET = "/api/set/total"

# Scheduled reboot (the firmware spells the clear endpoint "claen")
ENDPOINT_REBOOT_CONFIG = "/api/get/first-reboot"
ENDPOINT_REBOOT_SET = "/api/set/reboot"
ENDPOINT_REBOOT_CLEAR = "/api/claen/cron"

# Time
ENDPOINT_TIME_GET = "/api/get/time"
ENDPOINT_TIME_SYNC = "/api/set/time"

# Data connection and roaming
ENDPOINT_DATA = "/api/data"
ENDPOINT_ROAMING = "/api/roaming"

# Advanced network
ENDPOINT_BANDS = "/api/bands"
ENDPOINT_CURRENT_BAND = "/api/current_band"
ENDPOINT_LOCK_BANDS = "/api/lock_bands"
ENDPOINT_UNLOCK_BANDS = "/api/unlock_bands"
ENDPOINT_CELLS = "/api/cells"
ENDPOINT_LOCK_CELL = "/api/lock_cell"
ENDPOINT_UNLOCK_CELL = "/api/unlock_cell"

# Charging
ENDPOINT_CHARGE_CONFIG = "/api/charge/config"
ENDPOINT_CHARGE_ON = "/api/charge/on"
ENDPOINT_CHARGE_OFF = "/api/charge/off"

# Debugging
ENDPOINT_AT = "/api/at"
ENDPOINT_SHELL = "/api/shell"

# USB
ENDPOINT_USB_MODE = "/api/usb/mode"
ENDPOINT_USB_ADVANCE = "/api/usb-advance"

# APN
ENDPOINT_APN = "/api/apn"

# Plugins and scripts
ENDPOINT_PLUGINS = "/api/plugins"
ENDPOINT_PLUGINS_ALL = "/api/plugins/all"
ENDPOINT_PLUGIN_STORAGE = "/api/plugins/storage"
ENDPOINT_SCRIPTS = "/api/scripts"

# HTTP Headers
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_AUTHORIZATION = "Authorization"
CONTENT_TYPE_JSON = "application/json"
BEARER_PREFIX = "Bearer "
