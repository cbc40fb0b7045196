"""Channel Parser Service.

Reads the latest messages of the source Telegram channels, extracts vacancy
fields from each message and stores the vacancies that are not known yet.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Any

from enricher import parse_vacancy_text
from shared import Database, get_structured_logger
from vacancies import VacancyService

from .errors import TelegramClientNotInitializedError
from .telegram_client import ChannelMessage, TelegramChannelClient

logger = logging.getLogger(__name__)

DEFAULT_SOURCE_CHANNELS = ("@comeinlena", "@comeindesign", "@work_editor")
DEFAULT_MESSAGES_LIMIT = 50
MIN_VACANCY_TEXT_LENGTH = 50

_HASHTAG_PATTERN = re.compile(r"#\w+")


def looks_like_vacancy(text: str | None) -> bool:
    """A message is treated as a vacancy if it is long enough and has a hashtag."""
    if not text or len(text) <= MIN_VACANCY_TEXT_LENGTH:
        return False
    return bool(_HASHTAG_PATTERN.search(text))


def parse_channel_list(raw: str | None) -> list[str]:
    """Split a comma-separated channel list. Blank input gives the default channels."""
    channels = [channel.strip() for channel in (raw or "").split(",") if channel.strip()]
    return channels or list(DEFAULT_SOURCE_CHANNELS)


def build_message_url(channel: str, message_id: int) -> str:
    """Build the public t.me link of a channel message."""
    return f"https://t.me/{channel.lstrip('@')}/{message_id}"


@dataclass
class ParseResult:
    """Outcome of a multi-channel parsing run."""

    vacancies: list[dict[str, Any]] = field(default_factory=list)
    failed_channels: list[str] = field(default_factory=list)

    @property
    def parsed(self) -> int:
        return len(self.vacancies)


class ChannelParser:
    """
    Service for turning channel messages into stored vacancies.

    For every message that looks like a vacancy, builds its URL, skips it if
    the URL is already stored, parses the text and inserts the vacancy.
    """

    def __init__(
        self,
        database: Database,
        telegram_client: TelegramChannelClient | None,
        messages_limit: int = DEFAULT_MESSAGES_LIMIT,
    ):
        """Initialize the channel parser.

        Args:
            database: Database connection interface (implements Database protocol)
            telegram_client: Shared Telegram client, None if not configured
            messages_limit: Number of latest messages to read per channel
        """
        if not database:
            raise ValueError("Database is required")
        if not isinstance(messages_limit, int) or messages_limit <= 0:
            raise ValueError(f"messages_limit must be a positive integer, got: {messages_limit}")

        self.vacancy_service = VacancyService(database=database)
        self.client = telegram_client
        self.messages_limit = messages_limit

    def _build_vacancy(self, channel: str, message: ChannelMessage) -> dict[str, Any]:
        parsed = parse_vacancy_text(message.text)
        return {
            "channel": channel,
            "text": message.text,
            "url": build_message_url(channel, message.id),
            **parsed.to_dict(),
        }

    def parse_channel(self, channel: str) -> list[dict[str, Any]]:
        """
        Parse the latest messages of one channel.

        Messages are processed in the order the channel returns them (newest
        first).

        Args:
            channel: Channel username (e.g. "@comeindesign")

        Returns:
            List of newly stored vacancies

        Raises:
            TelegramClientNotInitializedError: If no Telegram client is configured
            Exception: Any client or database error, after logging it
        """
        if self.client is None:
            raise TelegramClientNotInitializedError("Telegram client not initialized")

        channel_logger = get_structured_logger(__name__, channel=channel)
        try:
            messages = self.client.get_channel_messages(channel, limit=self.messages_limit)
            channel_logger.info(f"Fetched {len(messages)} message(s)")

            stored = []
            for message in messages:
                if not looks_like_vacancy(message.text):
                    continue

                url = build_message_url(channel, message.id)
                if not self.vacancy_service.is_new_vacancy(url):
                    continue

                vacancy = self.vacancy_service.create_vacancy_if_new(
                    self._build_vacancy(channel, message)
                )
                if vacancy:
                    stored.append(vacancy)

            channel_logger.info(f"Stored {len(stored)} new vacancies")
            return stored
        except Exception as e:
            channel_logger.error(f"Error parsing channel: {e}", exc_info=True)
            raise

    def parse_channels(self, channels: list[str] | tuple[str, ...]) -> ParseResult:
        """
        Parse several channels one after another.

        A failing channel is logged and skipped; the remaining channels are
        still parsed.

        Args:
            channels: Channel usernames

        Returns:
            ParseResult with all newly stored vacancies and the failed channels
        """
        result = ParseResult()
        for channel in channels:
            try:
                result.vacancies.extend(self.parse_channel(channel))
            except Exception as e:
                logger.error(f"Failed to parse {channel}: {e}")
                result.failed_channels.append(channel)

        logger.info(
            f"Parsing complete. {result.parsed} new vacancies from {len(channels)} channel(s), "
            f"{len(result.failed_channels)} failed"
        )
        return result
