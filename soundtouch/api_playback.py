"""Playback, key-press and source helpers for the SoundTouch HTTP client.

Almost every transport control is a press of a named remote-control key on
``/key``; the methods here are thin wrappers that pick the key.  All
networking (`_get_model`, `_post`) is supplied by ``api_base.SoundTouchClient``.
This mix-in must therefore be inherited **before** the base client in the
final MRO.
"""

from __future__ import annotations

import logging

from .api_base import SoundTouchValidationError
from .api_constants import KEY_VALUES, REPEAT_MODE_KEYS, KeyValue
from .const import (
    API_ENDPOINT_KEY,
    API_ENDPOINT_NOW_PLAYING,
    API_ENDPOINT_SELECT,
    API_ENDPOINT_SOURCES,
    KEY_SENDER,
    KEY_STATE_PRESS,
)
from .models import NowPlaying, Sources
from .xml_codec import build_element

_LOGGER = logging.getLogger(__name__)


class PlaybackAPI:  # mix-in – must be left of base client in MRO
    """Transport-level playback controls (play, pause, skip, …) and source selection."""

    # pylint: disable=no-member

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    async def get_now_playing(self) -> NowPlaying:
        return await self._get_model(API_ENDPOINT_NOW_PLAYING, NowPlaying)  # type: ignore[attr-defined]

    async def get_sources(self) -> Sources:
        return await self._get_model(API_ENDPOINT_SOURCES, Sources)  # type: ignore[attr-defined]

    # ------------------------------------------------------------------
    # Key press primitive
    # ------------------------------------------------------------------

    async def send_key(self, key: KeyValue | str) -> None:
        """Press *key* on the virtual remote.

        Raw strings outside :class:`KeyValue` are passed through (escaped) for
        keys newer firmware may understand.
        """
        key_name = key.value if isinstance(key, KeyValue) else str(key)
        if key_name not in KEY_VALUES:
            _LOGGER.debug("Sending key %r outside the known key vocabulary", key_name)
        body = build_element("key", key_name, {"state": KEY_STATE_PRESS, "sender": KEY_SENDER})
        await self._post(API_ENDPOINT_KEY, body)  # type: ignore[attr-defined]

    # ------------------------------------------------------------------
    # Core transport helpers
    # ------------------------------------------------------------------

    async def play(self) -> None:
        await self.send_key(KeyValue.PLAY)

    async def pause(self) -> None:
        await self.send_key(KeyValue.PAUSE)

    async def stop(self) -> None:
        """Stop playback.

        The key vocabulary has no STOP key, so this presses PAUSE.
        """
        await self.send_key(KeyValue.PAUSE)

    async def play_pause(self) -> None:
        """Toggle between play and pause based on the current play status.

        Two round trips: the status read, then the key press.  If the read
        fails nothing is sent.
        """
        now_playing = await self.get_now_playing()
        if now_playing.is_playing:
            await self.pause()
        else:
            await self.play()

    async def next_track(self) -> None:
        await self.send_key(KeyValue.NEXT_TRACK)

    async def previous_track(self) -> None:
        await self.send_key(KeyValue.PREV_TRACK)

    async def power(self) -> None:
        """Toggle standby."""
        await self.send_key(KeyValue.POWER)

    # ------------------------------------------------------------------
    # Shuffle / repeat
    # ------------------------------------------------------------------

    async def set_shuffle(self, enabled: bool) -> None:
        await self.send_key(KeyValue.SHUFFLE_ON if enabled else KeyValue.SHUFFLE_OFF)

    async def set_repeat(self, mode: str) -> None:
        """Set repeat mode.

        Values: "off", "one", "all"
        """
        key = REPEAT_MODE_KEYS.get(mode)
        if key is None:
            raise SoundTouchValidationError(
                f"Invalid repeat mode: {mode!r}. Valid values: {', '.join(REPEAT_MODE_KEYS)}"
            )
        await self.send_key(key)

    # ------------------------------------------------------------------
    # Rating / favourites
    # ------------------------------------------------------------------

    async def thumbs_up(self) -> None:
        await self.send_key(KeyValue.THUMBS_UP)

    async def thumbs_down(self) -> None:
        await self.send_key(KeyValue.THUMBS_DOWN)

    async def bookmark(self) -> None:
        await self.send_key(KeyValue.BOOKMARK)

    async def add_favorite(self) -> None:
        await self.send_key(KeyValue.ADD_FAVORITE)

    async def remove_favorite(self) -> None:
        await self.send_key(KeyValue.REMOVE_FAVORITE)

    # ------------------------------------------------------------------
    # Source selection
    # ------------------------------------------------------------------

    async def select_source(self, source: str, source_account: str | None = None) -> None:
        """Switch to *source* (e.g. "AUX", "BLUETOOTH", "SPOTIFY").

        Args:
            source: Source identifier as listed by :meth:`get_sources`
            source_account: Account for sources that need one; omitted from
                the request when empty
        """
        attrs = {"source": source, "sourceAccount": source_account or None, "location": ""}
        await self._post(API_ENDPOINT_SELECT, build_element("ContentItem", "", attrs))  # type: ignore[attr-defined]

    async def select_aux_input(self) -> None:
        await self.send_key(KeyValue.AUX_INPUT)
