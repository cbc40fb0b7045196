"""
Channel Source Services Package

This package contains services for reading vacancies from Telegram channels:
- Telegram channel client (Telethon session wrapper)
- Channel parser that extracts and stores new vacancies
"""

from .channel_parser import (
    DEFAULT_MESSAGES_LIMIT,
    DEFAULT_SOURCE_CHANNELS,
    ChannelParser,
    ParseResult,
    build_message_url,
    looks_like_vacancy,
    parse_channel_list,
)
from .errors import (
    ChannelSourceError,
    TelegramAuthorizationError,
    TelegramClientNotInitializedError,
)
from .telegram_client import ChannelMessage, TelegramChannelClient

__all__ = [
    "DEFAULT_MESSAGES_LIMIT",
    "DEFAULT_SOURCE_CHANNELS",
    "ChannelMessage",
    "ChannelParser",
    "ChannelSourceError",
    "ParseResult",
    "TelegramAuthorizationError",
    "TelegramChannelClient",
    "TelegramClientNotInitializedError",
    "build_message_url",
    "looks_like_vacancy",
    "parse_channel_list",
]
