"""
Telegram Channel Client

Thin synchronous wrapper around a Telethon session, used to read the latest
messages of public channels.
"""

from __future__ import annotations

import asyncio
import logging
import threading
from collections.abc import Coroutine
from dataclasses import dataclass
from datetime import datetime
from typing import Any, TypeVar

from telethon import TelegramClient
from telethon.sessions import StringSession

from .errors import TelegramAuthorizationError

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class ChannelMessage:
    """A single channel message. text is markdown, bold spans use **...**."""

    id: int
    text: str
    date: datetime | None = None


class TelegramChannelClient:
    """
    Client for reading Telegram channels.

    The Telethon client lives on a private event loop. Calls are serialized
    with a lock so one instance can be shared by request handler threads.
    The connection is opened on first use (or by an explicit start()) and kept
    until disconnect().
    """

    def __init__(
        self,
        api_id: int,
        api_hash: str,
        session_string: str = "",
        connection_retries: int = 5,
    ):
        """
        Initialize the Telegram channel client.

        Args:
            api_id: Telegram API ID
            api_hash: Telegram API hash
            session_string: Saved StringSession (see scripts/telegram_login.py)
            connection_retries: Connection attempts made by Telethon

        Raises:
            ValueError: If api_id or api_hash is missing
        """
        if not api_id:
            raise ValueError("Telegram API ID is required")
        if not api_hash:
            raise ValueError("Telegram API hash is required")

        self.api_id = int(api_id)
        self.api_hash = api_hash
        self.session_string = session_string or ""
        self.connection_retries = connection_retries

        self._client: TelegramClient | None = None
        self._loop = asyncio.new_event_loop()
        self._lock = threading.Lock()

    @property
    def is_connected(self) -> bool:
        return self._client is not None and self._client.is_connected()

    def _run(self, coro: Coroutine[Any, Any, T]) -> T:
        with self._lock:
            return self._loop.run_until_complete(coro)

    def _build_client(self) -> TelegramClient:
        return TelegramClient(
            StringSession(self.session_string),
            self.api_id,
            self.api_hash,
            connection_retries=self.connection_retries,
        )

    async def _start(self) -> None:
        if self._client is not None and self._client.is_connected():
            return

        # The client must be created inside the loop that will drive it
        client = self._build_client()
        try:
            await client.connect()
            authorized = await client.is_user_authorized()
        except Exception:
            # Stop the half-open client so no task is left pending on the loop
            await client.disconnect()
            raise

        if not authorized:
            await client.disconnect()
            raise TelegramAuthorizationError(
                "Telegram session is not authorized. "
                "Run scripts/telegram_login.py and set TELEGRAM_SESSION."
            )
        self._client = client
        logger.info("Telegram client initialized successfully")

    def start(self) -> None:
        """
        Connect to Telegram and verify the session.

        Raises:
            TelegramAuthorizationError: If the session is not logged in
        """
        self._run(self._start())

    async def _get_channel_messages(self, channel: str, limit: int) -> list[ChannelMessage]:
        await self._start()
        entity = await self._client.get_entity(channel)
        messages = await self._client.get_messages(entity, limit=limit)
        return [
            ChannelMessage(id=message.id, text=message.text or "", date=message.date)
            for message in messages
        ]

    def get_channel_messages(self, channel: str, limit: int = 50) -> list[ChannelMessage]:
        """
        Get the latest messages of a channel, newest first.

        Args:
            channel: Channel username (e.g. "@comeindesign")
            limit: Maximum number of messages to fetch

        Returns:
            List of ChannelMessage

        Raises:
            TelegramAuthorizationError: If the session is not logged in
            ValueError: If the channel cannot be resolved
        """
        if not channel:
            raise ValueError("Channel is required")
        if limit <= 0:
            raise ValueError(f"limit must be a positive integer, got: {limit}")

        logger.debug(f"Fetching last {limit} message(s) from {channel}")
        return self._run(self._get_channel_messages(channel, limit))

    async def _disconnect(self) -> None:
        if self._client is not None:
            await self._client.disconnect()
            self._client = None

    def disconnect(self) -> None:
        """Close the Telegram connection. The client can be started again later."""
        if self._client is None:
            return
        self._run(self._disconnect())
        logger.info("Telegram client disconnected")

    def close(self) -> None:
        """Disconnect and release the event loop."""
        self.disconnect()
        self._loop.close()
