"""SoundTouch API vocabularies and decode tables.

Enumerations shared by the façade and the models, plus the table that tells
the XML codec which elements repeat.
"""

from __future__ import annotations

from enum import Enum

from .const import (
    API_ENDPOINT_CAPABILITIES,
    API_ENDPOINT_INFO,
    API_ENDPOINT_PRESETS,
    API_ENDPOINT_SOURCES,
)


class KeyValue(str, Enum):
    """Remote-control keys understood by the ``/key`` endpoint."""

    POWER = "POWER"
    PLAY = "PLAY"
    PAUSE = "PAUSE"
    PREV_TRACK = "PREV_TRACK"
    NEXT_TRACK = "NEXT_TRACK"
    THUMBS_UP = "THUMBS_UP"
    THUMBS_DOWN = "THUMBS_DOWN"
    BOOKMARK = "BOOKMARK"
    PRESET_1 = "PRESET_1"
    PRESET_2 = "PRESET_2"
    PRESET_3 = "PRESET_3"
    PRESET_4 = "PRESET_4"
    PRESET_5 = "PRESET_5"
    PRESET_6 = "PRESET_6"
    AUX_INPUT = "AUX_INPUT"
    SHUFFLE_OFF = "SHUFFLE_OFF"
    SHUFFLE_ON = "SHUFFLE_ON"
    REPEAT_OFF = "REPEAT_OFF"
    REPEAT_ONE = "REPEAT_ONE"
    REPEAT_ALL = "REPEAT_ALL"
    ADD_FAVORITE = "ADD_FAVORITE"
    REMOVE_FAVORITE = "REMOVE_FAVORITE"
    INVALID_KEY = "INVALID_KEY"


class PlayStatus(str, Enum):
    """Values reported in ``<playStatus>`` of ``/now_playing``."""

    PLAY_STATE = "PLAY_STATE"
    PAUSE_STATE = "PAUSE_STATE"
    STOP_STATE = "STOP_STATE"
    BUFFERING_STATE = "BUFFERING_STATE"
    INVALID_PLAY_STATUS = "INVALID_PLAY_STATUS"


KEY_VALUES: frozenset[str] = frozenset(k.value for k in KeyValue)

# Words accepted in a ``<volume>`` body besides a numeric level
VOLUME_MUTE = "mute"
VOLUME_UNMUTE = "unmute"
VOLUME_UP = "volumeUp"
VOLUME_DOWN = "volumeDown"

REPEAT_MODE_KEYS: dict[str, KeyValue] = {
    "off": KeyValue.REPEAT_OFF,
    "one": KeyValue.REPEAT_ONE,
    "all": KeyValue.REPEAT_ALL,
}

# Elements that may occur 0..N times in a response. XML alone cannot say
# whether a single occurrence is a record or a one-element list, so every
# field listed here is forced into a list after decoding.
REPEATABLE_FIELDS: dict[str, tuple[str, ...]] = {
    API_ENDPOINT_INFO: ("networkInfo",),
    API_ENDPOINT_CAPABILITIES: ("capability",),
    API_ENDPOINT_SOURCES: ("sourceItem",),
    API_ENDPOINT_PRESETS: ("preset",),
}
