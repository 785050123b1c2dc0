"""Typed Pydantic models for SoundTouch API payloads.

- The XML codec hands over plain strings; the models coerce them to ``int`` /
  ``bool``.
- Field aliases match the element and attribute names on the wire.
- Every model is frozen: a response is a snapshot and is never mutated.
- Unknown elements are kept (``extra="allow"``) for forward compatibility.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .api_constants import PlayStatus
from .const import PRESET_MAX, PRESET_MIN
from .xml_codec import TEXT_KEY, as_list

__all__ = [
    "NetworkInfo",
    "DeviceInfo",
    "Capability",
    "Capabilities",
    "ContentItem",
    "Preset",
    "Presets",
    "SourceItem",
    "Sources",
    "Volume",
    "NowPlaying",
    "Bass",
    "Tone",
]


def _flag(value: Any) -> Any:
    """Presence-only elements (``<skipEnabled/>``) decode to ``""``."""
    if value == "" or value == {}:
        return True
    return value


class _SoundTouchBase(BaseModel):
    """Base class with permissive extra handling and frozen instances.

    Accepts population by field name or wire alias.  A node the codec decoded
    as a bare string (text-only element) is treated as an empty record.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True, frozen=True)

    @model_validator(mode="before")
    @classmethod
    def _accept_bare_nodes(cls, data: Any) -> Any:
        if data == "" or data is None:
            return {}
        if isinstance(data, str):
            return {TEXT_KEY: data}
        return data


# -----------------------------------------------------------------------------
# /info, /capabilities
# -----------------------------------------------------------------------------


class NetworkInfo(_SoundTouchBase):
    """One network interface reported in ``/info``."""

    type: str | None = None
    mac_address: str | None = Field(None, alias="macAddress")
    ip_address: str | None = Field(None, alias="ipAddress")


class DeviceInfo(_SoundTouchBase):
    """Identity of the speaker plus its network interfaces."""

    device_id: str | None = Field(None, alias="deviceID")
    name: str | None = None
    type: str | None = None
    network_info: list[NetworkInfo] = Field(default_factory=list, alias="networkInfo")
    module_type: str | None = Field(None, alias="moduleType")
    variant: str | None = None
    country_code: str | None = Field(None, alias="countryCode")
    region_code: str | None = Field(None, alias="regionCode")

    @field_validator("network_info", mode="before")
    @classmethod
    def _listify(cls, v: Any) -> list[Any]:
        return as_list(v)


class Capability(_SoundTouchBase):
    name: str | None = None
    value: str | None = None
    url: str | None = None
    info: str | None = None


class Capabilities(_SoundTouchBase):
    """Capability list from ``/capabilities``."""

    device_id: str | None = Field(None, alias="deviceID")
    capabilities: list[Capability] = Field(default_factory=list, alias="capability")

    @field_validator("capabilities", mode="before")
    @classmethod
    def _listify(cls, v: Any) -> list[Any]:
        return as_list(v)

    def get(self, name: str) -> Capability | None:
        """Return the capability called *name*, if the speaker reports it."""
        return next((cap for cap in self.capabilities if cap.name == name), None)


# -----------------------------------------------------------------------------
# Content, presets, sources
# -----------------------------------------------------------------------------


class ContentItem(_SoundTouchBase):
    """Reference to something playable (stream, source or preset target)."""

    source: str | None = None
    source_account: str | None = Field(None, alias="sourceAccount")
    location: str | None = None
    type: str | None = None
    is_presetable: bool | None = Field(None, alias="isPresetable")
    item_name: str | None = Field(None, alias="itemName")
    container_art: str | None = Field(None, alias="containerArt")


class Preset(_SoundTouchBase):
    """One of the six preset slots; ``content_item`` is ``None`` when unassigned."""

    id: int = Field(ge=PRESET_MIN, le=PRESET_MAX)
    created_on: int | None = Field(None, alias="createdOn")
    updated_on: int | None = Field(None, alias="updatedOn")
    content_item: ContentItem | None = Field(None, alias="ContentItem")

    @field_validator("content_item", mode="before")
    @classmethod
    def _empty_content(cls, v: Any) -> Any:
        # <ContentItem/> decodes to "" and carries nothing to play
        if v == "" or v == {}:
            return None
        if isinstance(v, dict) and all(value in (None, "") for value in v.values()):
            return None
        return v

    @property
    def is_empty(self) -> bool:
        return self.content_item is None


class Presets(_SoundTouchBase):
    """All preset slots, always ``1..6`` in order.

    Slots the speaker leaves out of its reply are filled in as empty presets.
    """

    presets: list[Preset] = Field(default_factory=list, alias="preset")

    @field_validator("presets", mode="before")
    @classmethod
    def _listify(cls, v: Any) -> list[Any]:
        return as_list(v)

    @field_validator("presets")
    @classmethod
    def _fill_slots(cls, v: list[Preset]) -> list[Preset]:
        by_id = {preset.id: preset for preset in v}
        return [by_id.get(slot) or Preset(id=slot) for slot in range(PRESET_MIN, PRESET_MAX + 1)]

    def get(self, preset_id: int) -> Preset | None:
        return next((preset for preset in self.presets if preset.id == preset_id), None)


class SourceItem(_SoundTouchBase):
    """A selectable source; the element text is its display name."""

    source: str | None = None
    source_account: str | None = Field(None, alias="sourceAccount")
    status: str | None = None
    is_local: bool | None = Field(None, alias="isLocal")
    multiroom_allowed: bool | None = Field(None, alias="multiroomallowed")
    display_name: str | None = Field(None, alias=TEXT_KEY)


class Sources(_SoundTouchBase):
    device_id: str | None = Field(None, alias="deviceID")
    sources: list[SourceItem] = Field(default_factory=list, alias="sourceItem")

    @field_validator("sources", mode="before")
    @classmethod
    def _listify(cls, v: Any) -> list[Any]:
        return as_list(v)


# -----------------------------------------------------------------------------
# Volume, now playing, bass, tone
# -----------------------------------------------------------------------------


class Volume(_SoundTouchBase):
    targetvolume: int = Field(ge=0, le=100)
    actualvolume: int = Field(ge=0, le=100)
    muteenabled: bool = False


class NowPlaying(_SoundTouchBase):
    """Current playback state.

    Different sources fill different subsets: streaming services report
    track metadata, AUX and Bluetooth often report only ``source``.
    """

    source: str | None = None
    source_account: str | None = Field(None, alias="sourceAccount")
    content_item: ContentItem | None = Field(None, alias="ContentItem")
    track: str | None = None
    artist: str | None = None
    album: str | None = None
    station_name: str | None = Field(None, alias="stationName")
    art: str | None = None
    art_image_status: str | None = Field(None, alias="artImageStatus")
    play_status: PlayStatus | None = Field(None, alias="playStatus")
    shuffle_setting: str | None = Field(None, alias="shuffleSetting")
    repeat_setting: str | None = Field(None, alias="repeatSetting")
    stream_type: str | None = Field(None, alias="streamType")
    skip_enabled: bool = Field(False, alias="skipEnabled")
    skip_previous_enabled: bool = Field(False, alias="skipPreviousEnabled")
    favorite_enabled: bool = Field(False, alias="favoriteEnabled")
    is_favorite: bool = Field(False, alias="isFavorite")
    station_location: str | None = Field(None, alias="stationLocation")
    time: int | None = None  # seconds into the track
    total_time: int | None = Field(None, alias="totalTime")

    @model_validator(mode="before")
    @classmethod
    def _unpack_mixed_elements(cls, data: Any) -> Any:
        # <time total="240">30</time> and <art artImageStatus="..">url</art>
        if not isinstance(data, dict):
            return data
        data = dict(data)
        time = data.get("time")
        if isinstance(time, dict):
            data.setdefault("totalTime", time.get("total"))
            data["time"] = time.get(TEXT_KEY)
        art = data.get("art")
        if isinstance(art, dict):
            data.setdefault("artImageStatus", art.get("artImageStatus"))
            data["art"] = art.get(TEXT_KEY)
        for key in ("stationName", "track", "artist", "album", "art", "stationLocation"):
            if data.get(key) == "":
                data[key] = None
        return data

    @field_validator("skip_enabled", "skip_previous_enabled", "favorite_enabled", "is_favorite", mode="before")
    @classmethod
    def _presence_flag(cls, v: Any) -> Any:
        return _flag(v)

    @property
    def is_playing(self) -> bool:
        return self.play_status == PlayStatus.PLAY_STATE


class Bass(_SoundTouchBase):
    """Bass level; ``available`` is ``None`` when the speaker does not say."""

    targetbass: int
    actualbass: int
    available: bool | None = None


class Tone(_SoundTouchBase):
    targettreble: int | None = None
    actualtreble: int | None = None
    targetbass: int | None = None
    actualbass: int | None = None
    available: bool | None = None
