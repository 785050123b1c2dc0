"""Stand-ins for aiohttp objects used across the unit tests."""

from unittest.mock import AsyncMock, MagicMock


def make_response(status: int = 200, text: str = "", reason: str = "OK") -> MagicMock:
    """Build a stand-in for an aiohttp response usable with ``async with``."""
    resp = MagicMock()
    resp.status = status
    resp.reason = reason
    resp.text = AsyncMock(return_value=text)
    return resp


def make_session(response: MagicMock | None = None, side_effect: BaseException | None = None) -> MagicMock:
    """Build a stand-in for an aiohttp session whose ``request`` is awaitable."""
    session = MagicMock()
    session.request = AsyncMock(return_value=response, side_effect=side_effect)
    return session
