"""Device API wrappers.

Each method is a thin caller of ``RequestGateway.request``: it supplies a
path, a verb and a body, and carries no logic of its own beyond shaping
parameters the way the firmware expects them.
"""

from typing import Any
from urllib.parse import quote, urlencode

from .api_endpoints import (
    ENDPOINT_INFO,
    ENDPOINT_CLEAR_CACHE,
    ENDPOINT_DEVICE_CONTROL,
    ENDPOINT_SERIAL,
    ENDPOINT_ACTIVATION_KEY,
    ENDPOINT_AIRPLANE_MODE,
    ENDPOINT_SET_NETWORK,
    ENDPOINT_SWITCH_SLOT,
    ENDPOINT_TRAFFIC_TOTAL,
    ENDPOINT_TRAFFIC_CONFIG,
    ENDPOINT_TRAFFIC_SET,
    ENDPOINT_REBOOT_CONFIG,
    ENDPOINT_REBOOT_SET,
    ENDPOINT_REBOOT_CLEAR,
    ENDPOINT_TIME_GET,
    ENDPOINT_TIME_SYNC,
    ENDPOINT_DATA,
    ENDPOINT_ROAMING,
    ENDPOINT_BANDS,
    ENDPOINT_CURRENT_BAND,
    ENDPOINT_LOCK_BANDS,
    ENDPOINT_UNLOCK_BANDS,
    ENDPOINT_CELLS,
    ENDPOINT_LOCK_CELL,
    ENDPOINT_UNLOCK_CELL,
    ENDPOINT_CHARGE_CONFIG,
    ENDPOINT_CHARGE_ON,
    ENDPOINT_CHARGE_OFF,
    ENDPOINT_AT,
    ENDPOINT_SHELL,
    ENDPOINT_USB_MODE,
    ENDPOINT_USB_ADVANCE,
    ENDPOINT_APN,
    ENDPOINT_PLUGINS,
    ENDPOINT_PLUGINS_ALL,
    ENDPOINT_PLUGIN_STORAGE,
    ENDPOINT_SCRIPTS,
)
from .constants import BYTES_PER_GB
from .request_gateway import RequestGateway


def _segment(name: str) -> str:
    """Quote a value for use as a single path segment."""
    return quote(name, safe="")


class DeviceApi:
    """Endpoint wrappers for the device management API."""

    def __init__(self, gateway: RequestGateway):
        self._gateway = gateway

    async def _get(self, path: str) -> Any:
        return await self._gateway.request(path)

    async def _post(self, path: str, body: Any = None) -> Any:
        return await self._gateway.request(path, method="POST", body=body)

    # Generic helpers

    async def get(self, path: str) -> Any:
        return await self._get(path)

    async def post(self, path: str, data: Any = None) -> Any:
        return await self._post(path, {} if data is None else data)

    # System

    async def fetch_system_info(self) -> Any:
        return await self._get(ENDPOINT_INFO)

    async def clear_cache(self) -> Any:
        return await self._post(ENDPOINT_CLEAR_CACHE)

    async def device_control(self, action: str) -> Any:
        """Reboot or power off the device ("reboot" / "poweroff")."""
        return await self._post(ENDPOINT_DEVICE_CONTROL, {"action": action})

    async def get_device_serial(self) -> Any:
        return await self._get(ENDPOINT_SERIAL)

    async def submit_activation_key(self, key: str) -> Any:
        return await self._post(ENDPOINT_ACTIVATION_KEY, {"key": key})

    # Network

    async def toggle_airplane_mode(self, enabled: bool) -> Any:
        return await self._post(ENDPOINT_AIRPLANE_MODE, {"enabled": enabled})

    async def set_network_mode(self, mode: str) -> Any:
        return await self._post(ENDPOINT_SET_NETWORK, {"mode": mode})

    async def switch_slot(self, slot: Any) -> Any:
        return await self._post(ENDPOINT_SWITCH_SLOT, {"slot": slot})

    # Traffic

    async def get_traffic_total(self) -> Any:
        return await self._get(ENDPOINT_TRAFFIC_TOTAL)

    async def get_traffic_config(self) -> Any:
        return await self._get(ENDPOINT_TRAFFIC_CONFIG)

    async def set_traffic_limit(self, enabled: bool, limit_gb: float) -> Any:
        """Set the monthly traffic cap. The firmware takes the limit in bytes."""
        query = urlencode({
            "switch": 1 if enabled else 0,
            "much": round(limit_gb * BYTES_PER_GB),
        })
        return await self._get(f"{ENDPOINT_TRAFFIC_SET}?{query}")

    async def clear_traffic_stats(self) -> Any:
        return await self._get(ENDPOINT_TRAFFIC_SET)

    # Scheduled reboot

    async def get_reboot_config(self) -> Any:
        return await self._get(ENDPOINT_REBOOT_CONFIG)

    async def set_reboot(self, days: list[int], hour: int, minute: int) -> Any:
        day = ",".join(str(d) for d in days)
        return await self._get(f"{ENDPOINT_REBOOT_SET}?day={day}&hour={hour}&minute={minute}")

    async def clear_reboot(self) -> Any:
        return await self._get(ENDPOINT_REBOOT_CLEAR)

    # Time

    async def get_system_time(self) -> Any:
        return await self._get(ENDPOINT_TIME_GET)

    async def sync_system_time(self) -> Any:
        """Ask the device to sync its clock over NTP."""
        return await self._post(ENDPOINT_TIME_SYNC)

    # Data connection and roaming

    async def get_data_status(self) -> Any:
        return await self._get(ENDPOINT_DATA)

    async def set_data_status(self, active: bool) -> Any:
        return await self._post(ENDPOINT_DATA, {"active": active})

    async def get_roaming_status(self) -> Any:
        return await self._get(ENDPOINT_ROAMING)

    async def set_roaming_allowed(self, allowed: bool) -> Any:
        return await self._post(ENDPOINT_ROAMING, {"allowed": allowed})

    # Advanced network

    async def get_bands(self) -> Any:
        return await self._get(ENDPOINT_BANDS)

    async def get_current_band(self) -> Any:
        return await self._get(ENDPOINT_CURRENT_BAND)

    async def lock_bands(self, bands: list[Any]) -> Any:
        return await self._post(ENDPOINT_LOCK_BANDS, {"bands": bands})

    async def unlock_bands(self) -> Any:
        return await self._post(ENDPOINT_UNLOCK_BANDS)

    async def get_cells(self) -> Any:
        return await self._get(ENDPOINT_CELLS)

    async def lock_cell(self, technology: str, arfcn: Any, pci: Any) -> Any:
        # The firmware expects arfcn and pci as strings
        return await self._post(ENDPOINT_LOCK_CELL, {
            "technology": technology,
            "arfcn": str(arfcn),
            "pci": str(pci),
        })

    async def unlock_cell(self) -> Any:
        return await self._post(ENDPOINT_UNLOCK_CELL)

    # Charging

    async def get_charge_config(self) -> Any:
        return await self._get(ENDPOINT_CHARGE_CONFIG)

    async def set_charge_config(self, enabled: bool, start_threshold: int, stop_threshold: int) -> Any:
        return await self._post(ENDPOINT_CHARGE_CONFIG, {
            "enabled": enabled,
            "startThreshold": start_threshold,
            "stopThreshold": stop_threshold,
        })

    async def charge_on(self) -> Any:
        return await self._post(ENDPOINT_CHARGE_ON)

    async def charge_off(self) -> Any:
        return await self._post(ENDPOINT_CHARGE_OFF)

    # Debugging

    async def execute_at(self, command: str) -> Any:
        return await self._post(ENDPOINT_AT, {"command": command})

    async def execute_shell(self, command: str) -> Any:
        return await self._post(ENDPOINT_SHELL, {"command": command})

    # USB

    async def get_usb_mode(self) -> Any:
        return await self._get(ENDPOINT_USB_MODE)

    async def set_usb_mode(self, mode: Any, permanent: bool = False) -> Any:
        return await self._post(ENDPOINT_USB_MODE, {"mode": mode, "permanent": permanent})

    async def usb_advance_switch(self, mode: Any) -> Any:
        """Hot-switch the USB mode; takes effect immediately."""
        return await self._post(ENDPOINT_USB_ADVANCE, {"mode": mode})

    # APN

    async def get_apn_list(self) -> Any:
        return await self._get(ENDPOINT_APN)

    async def set_apn_config(self, config: dict[str, Any]) -> Any:
        return await self._post(ENDPOINT_APN, config)

    # Plugins

    async def get_plugin_list(self) -> Any:
        return await self._get(ENDPOINT_PLUGINS)

    async def upload_plugin(self, name: str, content: str) -> Any:
        return await self._post(ENDPOINT_PLUGINS, {"name": name, "content": content})

    async def delete_plugin(self, name: str) -> Any:
        return await self._gateway.request(f"{ENDPOINT_PLUGINS}/{_segment(name)}", method="DELETE")

    async def delete_all_plugins(self) -> Any:
        return await self._gateway.request(ENDPOINT_PLUGINS_ALL, method="DELETE")

    async def get_plugin_storage(self, plugin_name: str) -> Any:
        return await self._get(f"{ENDPOINT_PLUGIN_STORAGE}/{_segment(plugin_name)}")

    async def set_plugin_storage(self, plugin_name: str, data: Any) -> Any:
        return await self._post(f"{ENDPOINT_PLUGIN_STORAGE}/{_segment(plugin_name)}", data)

    async def delete_plugin_storage(self, plugin_name: str) -> Any:
        return await self._gateway.request(
            f"{ENDPOINT_PLUGIN_STORAGE}/{_segment(plugin_name)}", method="DELETE"
        )

    # Scripts

    async def get_script_list(self) -> Any:
        return await self._get(ENDPOINT_SCRIPTS)

    async def upload_script(self, name: str, content: str) -> Any:
        return await self._post(ENDPOINT_SCRIPTS, {"name": name, "content": content})

    async def update_script(self, name: str, content: str) -> Any:
        return await self._gateway.request(
            f"{ENDPOINT_SCRIPTS}/{_segment(name)}", method="PUT", body={"content": content}
        )

    async def delete_script(self, name: str) -> Any:
        return await self._gateway.request(f"{ENDPOINT_SCRIPTS}/{_segment(name)}", method="DELETE")
