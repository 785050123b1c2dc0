"""Constants for the SoundTouch client.

Connection defaults, endpoint paths and the value ranges the device accepts.

Configuration:
    - Default port and per-request timeout

API Endpoints:
    - Read endpoints (GET) returning XML documents
    - Command endpoints (POST) taking XML fragments

Validation:
    - Volume, bass and preset ranges checked before any request is sent
"""

from __future__ import annotations

VERSION = "0.2.0"

# Defaults
DEFAULT_PORT = 8090  # embedded web server of the speaker
DEFAULT_TIMEOUT = 10.0  # seconds

# Key presses are attributed to a fixed sender identity
KEY_SENDER = "Gabbo"
KEY_STATE_PRESS = "press"

# Validation ranges (inclusive)
VOLUME_MIN = 0
VOLUME_MAX = 100
BASS_MIN = -10
BASS_MAX = 10
PRESET_MIN = 1
PRESET_MAX = 6

# API Endpoints
API_ENDPOINT_INFO = "/info"
API_ENDPOINT_CAPABILITIES = "/capabilities"
API_ENDPOINT_NAME = "/name"
API_ENDPOINT_NOW_PLAYING = "/now_playing"
API_ENDPOINT_SOURCES = "/sources"
API_ENDPOINT_SELECT = "/select"
API_ENDPOINT_VOLUME = "/volume"
API_ENDPOINT_PRESETS = "/presets"
API_ENDPOINT_BASS = "/bass"
API_ENDPOINT_TONE = "/tone"
API_ENDPOINT_KEY = "/key"

# Request headers
CONTENT_TYPE_XML = "application/xml"
