"""SoundTouch API modular façade.

Composes the ``api_*`` mixins with the transport client from ``api_base.py``
into the public :class:`SoundTouchClient`.
"""

from __future__ import annotations

from .api_audio import AudioAPI
from .api_base import (
    SoundTouchApiError,
    SoundTouchConnectionError,
    SoundTouchError,
    SoundTouchInvalidDataError,
    SoundTouchRequestError,
    SoundTouchTimeoutError,
    SoundTouchValidationError,
)
from .api_base import (
    SoundTouchClient as _BaseClient,
)
from .api_device import DeviceAPI
from .api_playback import PlaybackAPI
from .api_preset import PresetAPI


# Order is important: mixins first, base client last so its `__init__` is
# the one Python's MRO picks.
class SoundTouchClient(
    DeviceAPI,
    PlaybackAPI,
    AudioAPI,
    PresetAPI,
    _BaseClient,
):
    """Aggregated SoundTouch HTTP API client.

    Every method is one independent round trip (``play_pause`` makes two);
    nothing is cached between calls.

    - DeviceAPI: identity, capabilities, renaming
    - PlaybackAPI: key presses, now playing, sources
    - AudioAPI: volume, bass, tone
    - PresetAPI: preset slots
    """


__all__ = [
    "SoundTouchClient",
    "SoundTouchError",
    "SoundTouchRequestError",
    "SoundTouchConnectionError",
    "SoundTouchTimeoutError",
    "SoundTouchApiError",
    "SoundTouchInvalidDataError",
    "SoundTouchValidationError",
]
