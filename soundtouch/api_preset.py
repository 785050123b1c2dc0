"""Preset helpers – list and recall the six stored preset slots."""

from __future__ import annotations

from .api_base import validate_range
from .api_constants import KeyValue
from .const import API_ENDPOINT_PRESETS, PRESET_MAX, PRESET_MIN
from .models import Presets


class PresetAPI:  # mix-in
    """List and play device presets."""

    async def get_presets(self) -> Presets:  # type: ignore[override]
        """Return all six slots; unassigned slots have no ``content_item``."""
        return await self._get_model(API_ENDPOINT_PRESETS, Presets)  # type: ignore[attr-defined]

    async def select_preset(self, preset_id: int) -> None:  # type: ignore[override]
        """Recall preset slot *preset_id* (1-6)."""
        validate_range("Preset ID", preset_id, PRESET_MIN, PRESET_MAX)
        await self.send_key(KeyValue(f"PRESET_{preset_id}"))  # type: ignore[attr-defined]
