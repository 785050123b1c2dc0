"""Device-related helpers for the SoundTouch HTTP client.

Identity, capabilities and renaming.  All networking is provided by the base
client (`api_base.SoundTouchClient`).
"""

from __future__ import annotations

from .const import API_ENDPOINT_CAPABILITIES, API_ENDPOINT_INFO, API_ENDPOINT_NAME
from .models import Capabilities, DeviceInfo
from .xml_codec import build_element


class DeviceAPI:  # mixin – must appear *before* the base client in MRO
    """Device-information helpers."""

    # The mixin relies on the base client providing `_get_model` and `_post`.

    async def get_info(self) -> DeviceInfo:
        """Return identity and network interfaces from ``/info``."""
        return await self._get_model(API_ENDPOINT_INFO, DeviceInfo)  # type: ignore[attr-defined]

    async def get_capabilities(self) -> Capabilities:
        return await self._get_model(API_ENDPOINT_CAPABILITIES, Capabilities)  # type: ignore[attr-defined]

    async def set_name(self, name: str) -> None:
        """Rename the speaker."""
        await self._post(API_ENDPOINT_NAME, build_element("name", name))  # type: ignore[attr-defined]
