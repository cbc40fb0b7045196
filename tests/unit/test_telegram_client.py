"""
Unit tests for the Telegram channel client wrapper.

The Telethon client is replaced with mocks, so no network access is needed.
"""

from datetime import datetime, timezone
from types import SimpleNamespace
from unittest.mock import AsyncMock, Mock, patch

import pytest

from services.channel_source.errors import TelegramAuthorizationError
from services.channel_source.telegram_client import ChannelMessage, TelegramChannelClient


def _telethon_client(authorized=True, messages=()):
    client = Mock()
    client.connect = AsyncMock()
    client.disconnect = AsyncMock()
    client.is_user_authorized = AsyncMock(return_value=authorized)
    client.is_connected = Mock(return_value=True)
    client.get_entity = AsyncMock(return_value=SimpleNamespace(username="comeindesign"))
    client.get_messages = AsyncMock(return_value=list(messages))
    return client


@pytest.fixture
def channel_client():
    client = TelegramChannelClient(api_id=12345, api_hash="hash", session_string="session")
    yield client
    client.close()


class TestTelegramChannelClientInit:
    """Test client construction."""

    def test_requires_api_id(self):
        """Test that the API ID is required."""
        with pytest.raises(ValueError, match="API ID"):
            TelegramChannelClient(api_id=0, api_hash="hash")

    def test_requires_api_hash(self):
        """Test that the API hash is required."""
        with pytest.raises(ValueError, match="API hash"):
            TelegramChannelClient(api_id=12345, api_hash="")

    def test_not_connected_before_start(self, channel_client):
        """Test that the client does not connect on construction."""
        assert channel_client.is_connected is False


class TestTelegramChannelClient:
    """Test connecting and reading messages."""

    def test_start_connects_authorized_session(self, channel_client):
        """Test that start() connects and keeps the Telethon client."""
        telethon = _telethon_client()

        with patch.object(channel_client, "_build_client", return_value=telethon):
            channel_client.start()

        telethon.connect.assert_awaited_once()
        assert channel_client.is_connected is True

    def test_start_unauthorized_session(self, channel_client):
        """Test that an unauthorized session is rejected and disconnected."""
        telethon = _telethon_client(authorized=False)

        with patch.object(channel_client, "_build_client", return_value=telethon):
            with pytest.raises(TelegramAuthorizationError):
                channel_client.start()

        telethon.disconnect.assert_awaited_once()
        assert channel_client.is_connected is False

    def test_start_connect_failure_disconnects(self, channel_client):
        """Test that a failed connect is cleaned up and can be retried."""
        telethon = _telethon_client()
        telethon.connect.side_effect = ConnectionError("Network unreachable")

        with patch.object(channel_client, "_build_client", return_value=telethon):
            with pytest.raises(ConnectionError, match="Network unreachable"):
                channel_client.start()

        telethon.disconnect.assert_awaited_once()
        assert channel_client.is_connected is False

        retry = _telethon_client()
        with patch.object(channel_client, "_build_client", return_value=retry):
            channel_client.start()

        assert channel_client.is_connected is True

    def test_start_authorization_check_failure_disconnects(self, channel_client):
        """Test that an error while checking the session also disconnects."""
        telethon = _telethon_client()
        telethon.is_user_authorized.side_effect = RuntimeError("Server closed the connection")

        with patch.object(channel_client, "_build_client", return_value=telethon):
            with pytest.raises(RuntimeError):
                channel_client.start()

        telethon.disconnect.assert_awaited_once()
        assert channel_client.is_connected is False

    def test_get_channel_messages(self, channel_client):
        """Test that Telethon messages are mapped to ChannelMessage."""
        date = datetime(2025, 3, 12, 10, 0, tzinfo=timezone.utc)
        telethon = _telethon_client(
            messages=[
                SimpleNamespace(id=2, text="**Designer** #дизайн", date=date),
                SimpleNamespace(id=1, text=None, date=date),
            ]
        )

        with patch.object(channel_client, "_build_client", return_value=telethon):
            messages = channel_client.get_channel_messages("@comeindesign", limit=2)

        telethon.get_entity.assert_awaited_once_with("@comeindesign")
        telethon.get_messages.assert_awaited_once()
        assert telethon.get_messages.await_args.kwargs == {"limit": 2}
        assert messages == [
            ChannelMessage(id=2, text="**Designer** #дизайн", date=date),
            ChannelMessage(id=1, text="", date=date),
        ]

    def test_connection_is_reused(self, channel_client):
        """Test that repeated reads share one connection."""
        telethon = _telethon_client()

        with patch.object(channel_client, "_build_client", return_value=telethon) as build:
            channel_client.get_channel_messages("@comeinlena")
            channel_client.get_channel_messages("@work_editor")

        build.assert_called_once()
        telethon.connect.assert_awaited_once()

    @pytest.mark.parametrize("channel,limit", [("", 10), ("@comeinlena", 0)])
    def test_get_channel_messages_invalid_arguments(self, channel_client, channel, limit):
        """Test argument validation."""
        with pytest.raises(ValueError):
            channel_client.get_channel_messages(channel, limit=limit)

    def test_disconnect(self, channel_client):
        """Test that disconnect() drops the Telethon client."""
        telethon = _telethon_client()

        with patch.object(channel_client, "_build_client", return_value=telethon):
            channel_client.start()
            channel_client.disconnect()

        telethon.disconnect.assert_awaited_once()
        assert channel_client.is_connected is False
