"""Global fixtures for SoundTouch client tests."""

import sys
from pathlib import Path

import pytest

# Add repository root to path for package imports
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from soundtouch import SoundTouchClient  # noqa: E402

from .const import MOCK_HOST  # noqa: E402


@pytest.fixture
def client() -> SoundTouchClient:
    """Client with default port and timeout."""
    return SoundTouchClient(MOCK_HOST)
