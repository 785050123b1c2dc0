"""Async client for the Bose SoundTouch local HTTP/XML API."""

from __future__ import annotations

from .api import SoundTouchClient
from .api_constants import KeyValue, PlayStatus
from .const import VERSION
from .exceptions import (
    SoundTouchApiError,
    SoundTouchConnectionError,
    SoundTouchError,
    SoundTouchInvalidDataError,
    SoundTouchRequestError,
    SoundTouchTimeoutError,
    SoundTouchValidationError,
)
from .models import (
    Bass,
    Capabilities,
    Capability,
    ContentItem,
    DeviceInfo,
    NetworkInfo,
    NowPlaying,
    Preset,
    Presets,
    SourceItem,
    Sources,
    Tone,
    Volume,
)

__version__ = VERSION

__all__ = [
    "SoundTouchClient",
    "KeyValue",
    "PlayStatus",
    "SoundTouchError",
    "SoundTouchRequestError",
    "SoundTouchConnectionError",
    "SoundTouchTimeoutError",
    "SoundTouchApiError",
    "SoundTouchInvalidDataError",
    "SoundTouchValidationError",
    "Bass",
    "Capabilities",
    "Capability",
    "ContentItem",
    "DeviceInfo",
    "NetworkInfo",
    "NowPlaying",
    "Preset",
    "Presets",
    "SourceItem",
    "Sources",
    "Tone",
    "Volume",
]
