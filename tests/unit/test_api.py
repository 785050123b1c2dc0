"""Unit tests for the SoundTouch command façade."""

from unittest.mock import AsyncMock, call, patch

import pytest

from soundtouch import KeyValue, SoundTouchClient
from soundtouch.exceptions import SoundTouchConnectionError, SoundTouchValidationError
from tests.const import (
    MOCK_BASS_XML,
    MOCK_CAPABILITIES_SINGLE_XML,
    MOCK_CAPABILITIES_XML,
    MOCK_INFO_NO_NETWORK_XML,
    MOCK_INFO_SINGLE_NETWORK_XML,
    MOCK_INFO_XML,
    MOCK_PRESETS_SINGLE_XML,
    MOCK_PRESETS_XML,
    MOCK_SOURCES_XML,
    MOCK_TONE_XML,
    MOCK_VOLUME_XML,
    now_playing_xml,
)


def _key_body(name: str) -> str:
    return f'<key state="press" sender="Gabbo">{name}</key>'


def _key_call(name: str):
    return call("/key", method="POST", data=_key_body(name))


class TestDeviceAPI:
    """Test identity, capabilities and renaming."""

    @pytest.mark.asyncio
    async def test_get_info(self, client: SoundTouchClient):
        """Test /info decodes with both network interfaces."""
        with patch.object(client, "_request", new_callable=AsyncMock) as mock_request:
            mock_request.return_value = MOCK_INFO_XML

            info = await client.get_info()

        mock_request.assert_called_once_with("/info")
        assert info.device_id == "689E19B8BB8A"
        assert info.name == "Living Room"
        assert info.type == "SoundTouch 10"
        assert info.module_type == "sm2"
        assert [net.type for net in info.network_info] == ["SCM", "SMSC"]
        assert info.network_info[0].mac_address == "689E19B8BB8A"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("body", "expected"),
        [(MOCK_INFO_SINGLE_NETWORK_XML, 1), (MOCK_INFO_NO_NETWORK_XML, 0)],
    )
    async def test_get_info_network_list_shape(self, client: SoundTouchClient, body, expected):
        """Test one or zero interfaces still decode to a list."""
        with patch.object(client, "_request", new_callable=AsyncMock, return_value=body):
            info = await client.get_info()

        assert isinstance(info.network_info, list)
        assert len(info.network_info) == expected

    @pytest.mark.asyncio
    async def test_get_capabilities(self, client: SoundTouchClient):
        """Test capability list and lookup by name."""
        with patch.object(client, "_request", new_callable=AsyncMock, return_value=MOCK_CAPABILITIES_XML):
            capabilities = await client.get_capabilities()

        assert len(capabilities.capabilities) == 2
        assert capabilities.get("systemtimeout").url == "/systemtimeout"
        assert capabilities.get("missing") is None

    @pytest.mark.asyncio
    async def test_get_capabilities_single(self, client: SoundTouchClient):
        """Test a single capability is still a list."""
        with patch.object(client, "_request", new_callable=AsyncMock, return_value=MOCK_CAPABILITIES_SINGLE_XML):
            capabilities = await client.get_capabilities()

        assert [cap.name for cap in capabilities.capabilities] == ["clockDisplay"]
        assert capabilities.capabilities[0].value == "true"

    @pytest.mark.asyncio
    async def test_set_name_escapes(self, client: SoundTouchClient):
        """Test the new name is escaped inside the request body."""
        with patch.object(client, "_request", new_callable=AsyncMock) as mock_request:
            await client.set_name('Tom & Jerry\'s <"Den">')

        mock_request.assert_called_once_with(
            "/name", method="POST", data="<name>Tom &amp; Jerry&apos;s &lt;&quot;Den&quot;&gt;</name>"
        )


class TestAudioAPI:
    """Test volume, bass and tone commands."""

    @pytest.mark.asyncio
    async def test_get_volume(self, client: SoundTouchClient):
        """Test the volume document decodes to typed values."""
        with patch.object(client, "_request", new_callable=AsyncMock) as mock_request:
            mock_request.return_value = MOCK_VOLUME_XML

            volume = await client.get_volume()

        mock_request.assert_called_once_with("/volume")
        assert volume.targetvolume == 30
        assert volume.actualvolume == 28
        assert volume.muteenabled is False

    @pytest.mark.asyncio
    @pytest.mark.parametrize("level", [0, 55, 100])
    async def test_set_volume(self, client: SoundTouchClient, level):
        """Test valid volume levels are posted."""
        with patch.object(client, "_request", new_callable=AsyncMock) as mock_request:
            await client.set_volume(level)

        mock_request.assert_called_once_with("/volume", method="POST", data=f"<volume>{level}</volume>")

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("method", "argument"),
        [
            ("set_volume", -1),
            ("set_volume", 101),
            ("set_volume", 50.5),
            ("set_volume", "50"),
            ("set_volume", True),
            ("set_bass", -11),
            ("set_bass", 11),
            ("set_bass", None),
            ("select_preset", 0),
            ("select_preset", 7),
            ("select_preset", "1"),
        ],
    )
    async def test_invalid_arguments_send_nothing(self, client: SoundTouchClient, method, argument):
        """Test validation errors are raised before any request."""
        with patch.object(client, "_request", new_callable=AsyncMock) as mock_request:
            with pytest.raises(SoundTouchValidationError):
                await getattr(client, method)(argument)

        mock_request.assert_not_called()

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("method", "word"),
        [("mute", "mute"), ("unmute", "unmute"), ("volume_up", "volumeUp"), ("volume_down", "volumeDown")],
    )
    async def test_volume_words(self, client: SoundTouchClient, method, word):
        """Test mute and step commands post their keyword."""
        with patch.object(client, "_request", new_callable=AsyncMock) as mock_request:
            await getattr(client, method)()

        mock_request.assert_called_once_with("/volume", method="POST", data=f"<volume>{word}</volume>")

    @pytest.mark.asyncio
    async def test_bass(self, client: SoundTouchClient):
        """Test bass read and write."""
        with patch.object(client, "_request", new_callable=AsyncMock) as mock_request:
            mock_request.return_value = MOCK_BASS_XML

            bass = await client.get_bass()
            await client.set_bass(-10)

        assert bass.targetbass == -2
        assert bass.available is None
        assert mock_request.call_args_list == [
            call("/bass"),
            call("/bass", method="POST", data="<bass>-10</bass>"),
        ]

    @pytest.mark.asyncio
    async def test_get_tone(self, client: SoundTouchClient):
        with patch.object(client, "_request", new_callable=AsyncMock, return_value=MOCK_TONE_XML):
            tone = await client.get_tone()

        assert tone.targettreble == 1
        assert tone.actualbass == -3
        assert tone.available is True


class TestPlaybackAPI:
    """Test key presses and source selection."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("method", "key"),
        [
            ("play", "PLAY"),
            ("pause", "PAUSE"),
            ("next_track", "NEXT_TRACK"),
            ("previous_track", "PREV_TRACK"),
            ("power", "POWER"),
            ("thumbs_up", "THUMBS_UP"),
            ("thumbs_down", "THUMBS_DOWN"),
            ("bookmark", "BOOKMARK"),
            ("add_favorite", "ADD_FAVORITE"),
            ("remove_favorite", "REMOVE_FAVORITE"),
            ("select_aux_input", "AUX_INPUT"),
        ],
    )
    async def test_key_wrappers(self, client: SoundTouchClient, method, key):
        """Test each wrapper presses exactly its key."""
        with patch.object(client, "_request", new_callable=AsyncMock) as mock_request:
            await getattr(client, method)()

        assert mock_request.call_args_list == [_key_call(key)]

    @pytest.mark.asyncio
    async def test_stop_presses_pause(self, client: SoundTouchClient):
        """Test stop sends PAUSE since no STOP key exists."""
        with patch.object(client, "_request", new_callable=AsyncMock) as mock_request:
            await client.stop()

        mock_request.assert_called_once_with("/key", method="POST", data=_key_body("PAUSE"))

    @pytest.mark.asyncio
    async def test_send_key_enum_and_raw_string(self, client: SoundTouchClient):
        """Test enum keys use their name and raw strings are escaped."""
        with patch.object(client, "_request", new_callable=AsyncMock) as mock_request:
            await client.send_key(KeyValue.PRESET_3)
            await client.send_key("VOLUME_UP")
            await client.send_key("A&B")

        assert mock_request.call_args_list == [
            _key_call("PRESET_3"),
            _key_call("VOLUME_UP"),
            _key_call("A&amp;B"),
        ]

    @pytest.mark.asyncio
    @pytest.mark.parametrize(("enabled", "key"), [(True, "SHUFFLE_ON"), (False, "SHUFFLE_OFF")])
    async def test_set_shuffle(self, client: SoundTouchClient, enabled, key):
        with patch.object(client, "_request", new_callable=AsyncMock) as mock_request:
            await client.set_shuffle(enabled)

        assert mock_request.call_args_list == [_key_call(key)]

    @pytest.mark.asyncio
    @pytest.mark.parametrize(("mode", "key"), [("off", "REPEAT_OFF"), ("one", "REPEAT_ONE"), ("all", "REPEAT_ALL")])
    async def test_set_repeat(self, client: SoundTouchClient, mode, key):
        with patch.object(client, "_request", new_callable=AsyncMock) as mock_request:
            await client.set_repeat(mode)

        assert mock_request.call_args_list == [_key_call(key)]

    @pytest.mark.asyncio
    async def test_set_repeat_invalid(self, client: SoundTouchClient):
        """Test unknown repeat modes are rejected locally."""
        with patch.object(client, "_request", new_callable=AsyncMock) as mock_request:
            with pytest.raises(SoundTouchValidationError, match="Invalid repeat mode"):
                await client.set_repeat("shuffle")

        mock_request.assert_not_called()

    @pytest.mark.asyncio
    async def test_play_pause_while_playing(self, client: SoundTouchClient):
        """Test toggle pauses when the speaker reports PLAY_STATE."""
        with patch.object(client, "_request", new_callable=AsyncMock) as mock_request:
            mock_request.side_effect = [now_playing_xml("PLAY_STATE"), ""]

            await client.play_pause()

        assert mock_request.call_args_list == [call("/now_playing"), _key_call("PAUSE")]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", ["PAUSE_STATE", "STOP_STATE", "BUFFERING_STATE", "INVALID_PLAY_STATUS"])
    async def test_play_pause_while_not_playing(self, client: SoundTouchClient, status):
        """Test toggle plays for every other status."""
        with patch.object(client, "_request", new_callable=AsyncMock) as mock_request:
            mock_request.side_effect = [now_playing_xml(status), ""]

            await client.play_pause()

        assert mock_request.call_args_list == [call("/now_playing"), _key_call("PLAY")]

    @pytest.mark.asyncio
    async def test_play_pause_without_status(self, client: SoundTouchClient):
        """Test toggle plays when no play status is reported (standby)."""
        with patch.object(client, "_request", new_callable=AsyncMock) as mock_request:
            mock_request.side_effect = ['<nowPlaying source="STANDBY" />', ""]

            await client.play_pause()

        assert mock_request.call_args_list[-1] == _key_call("PLAY")

    @pytest.mark.asyncio
    async def test_play_pause_status_failure_sends_nothing(self, client: SoundTouchClient):
        """Test a failed status read propagates and no key is pressed."""
        with patch.object(client, "_request", new_callable=AsyncMock) as mock_request:
            mock_request.side_effect = SoundTouchConnectionError("Could not connect")

            with pytest.raises(SoundTouchConnectionError):
                await client.play_pause()

        assert mock_request.call_count == 1

    @pytest.mark.asyncio
    async def test_select_source(self, client: SoundTouchClient):
        """Test source selection without an account."""
        with patch.object(client, "_request", new_callable=AsyncMock) as mock_request:
            await client.select_source("AUX")

        mock_request.assert_called_once_with(
            "/select", method="POST", data='<ContentItem source="AUX" location=""></ContentItem>'
        )

    @pytest.mark.asyncio
    async def test_select_source_with_account(self, client: SoundTouchClient):
        """Test source selection with an account that needs escaping."""
        with patch.object(client, "_request", new_callable=AsyncMock) as mock_request:
            await client.select_source("SPOTIFY", "a&b")

        mock_request.assert_called_once_with(
            "/select",
            method="POST",
            data='<ContentItem source="SPOTIFY" sourceAccount="a&amp;b" location=""></ContentItem>',
        )

    @pytest.mark.asyncio
    async def test_select_source_empty_account_is_omitted(self, client: SoundTouchClient):
        with patch.object(client, "_request", new_callable=AsyncMock) as mock_request:
            await client.select_source("BLUETOOTH", "")

        assert "sourceAccount" not in mock_request.call_args.kwargs["data"]

    @pytest.mark.asyncio
    async def test_get_sources(self, client: SoundTouchClient):
        """Test sources decode with display names."""
        with patch.object(client, "_request", new_callable=AsyncMock, return_value=MOCK_SOURCES_XML):
            sources = await client.get_sources()

        assert [item.source for item in sources.sources] == ["AUX", "BLUETOOTH", "SPOTIFY"]
        assert sources.sources[0].display_name == "AUX IN"
        assert sources.sources[1].display_name is None
        assert sources.sources[1].status == "UNAVAILABLE"
        assert sources.sources[2].is_local is False


class TestPresetAPI:
    """Test preset listing and recall."""

    @pytest.mark.asyncio
    async def test_get_presets_fills_all_slots(self, client: SoundTouchClient):
        """Test six slots are always returned in order."""
        with patch.object(client, "_request", new_callable=AsyncMock, return_value=MOCK_PRESETS_XML):
            presets = await client.get_presets()

        assert [preset.id for preset in presets.presets] == [1, 2, 3, 4, 5, 6]
        assert presets.get(1).content_item.item_name == "Radio Paradise"
        assert presets.get(3).content_item.item_name == "Morning Mix"
        assert [preset.id for preset in presets.presets if preset.is_empty] == [2, 4, 5, 6]

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("body", "assigned"),
        [(MOCK_PRESETS_SINGLE_XML, [2]), ("<presets />", [])],
    )
    async def test_get_presets_sparse(self, client: SoundTouchClient, body, assigned):
        """Test one or zero stored presets."""
        with patch.object(client, "_request", new_callable=AsyncMock, return_value=body):
            presets = await client.get_presets()

        assert len(presets.presets) == 6
        assert [preset.id for preset in presets.presets if not preset.is_empty] == assigned

    @pytest.mark.asyncio
    @pytest.mark.parametrize("preset_id", [1, 6])
    async def test_select_preset(self, client: SoundTouchClient, preset_id):
        """Test recalling a preset presses its key."""
        with patch.object(client, "_request", new_callable=AsyncMock) as mock_request:
            await client.select_preset(preset_id)

        assert mock_request.call_args_list == [_key_call(f"PRESET_{preset_id}")]
