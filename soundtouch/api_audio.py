"""Volume, bass and tone helpers for the SoundTouch HTTP client.

Levels are range-checked before anything is sent, so an invalid call never
costs a round trip.
"""

from __future__ import annotations

import logging

from .api_base import validate_range
from .api_constants import VOLUME_DOWN, VOLUME_MUTE, VOLUME_UNMUTE, VOLUME_UP
from .const import (
    API_ENDPOINT_BASS,
    API_ENDPOINT_TONE,
    API_ENDPOINT_VOLUME,
    BASS_MAX,
    BASS_MIN,
    VOLUME_MAX,
    VOLUME_MIN,
)
from .models import Bass, Tone, Volume
from .xml_codec import build_element

_LOGGER = logging.getLogger(__name__)


class AudioAPI:  # mix-in – must be left of base client in MRO
    """Volume / mute, bass and tone."""

    # pylint: disable=no-member

    # ------------------------------------------------------------------
    # Volume / mute
    # ------------------------------------------------------------------

    async def get_volume(self) -> Volume:
        return await self._get_model(API_ENDPOINT_VOLUME, Volume)  # type: ignore[attr-defined]

    async def set_volume(self, level: int) -> None:
        """Set absolute volume (0 – 100)."""
        validate_range("Volume level", level, VOLUME_MIN, VOLUME_MAX)
        _LOGGER.debug("Setting volume of %s to %d", self.host, level)  # type: ignore[attr-defined]
        await self._post(API_ENDPOINT_VOLUME, build_element("volume", level))  # type: ignore[attr-defined]

    async def mute(self) -> None:
        await self._post(API_ENDPOINT_VOLUME, build_element("volume", VOLUME_MUTE))  # type: ignore[attr-defined]

    async def unmute(self) -> None:
        await self._post(API_ENDPOINT_VOLUME, build_element("volume", VOLUME_UNMUTE))  # type: ignore[attr-defined]

    async def volume_up(self) -> None:
        await self._post(API_ENDPOINT_VOLUME, build_element("volume", VOLUME_UP))  # type: ignore[attr-defined]

    async def volume_down(self) -> None:
        await self._post(API_ENDPOINT_VOLUME, build_element("volume", VOLUME_DOWN))  # type: ignore[attr-defined]

    # ------------------------------------------------------------------
    # Bass / tone
    # ------------------------------------------------------------------

    async def get_bass(self) -> Bass:
        """Return bass levels; ``available`` tells whether the speaker supports bass control."""
        return await self._get_model(API_ENDPOINT_BASS, Bass)  # type: ignore[attr-defined]

    async def set_bass(self, level: int) -> None:
        """Set bass level (-10 – 10)."""
        validate_range("Bass level", level, BASS_MIN, BASS_MAX)
        await self._post(API_ENDPOINT_BASS, build_element("bass", level))  # type: ignore[attr-defined]

    async def get_tone(self) -> Tone:
        """Return bass and treble levels from ``/tone``."""
        return await self._get_model(API_ENDPOINT_TONE, Tone)  # type: ignore[attr-defined]
