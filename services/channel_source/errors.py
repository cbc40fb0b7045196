"""Exceptions raised by channel source services."""


class ChannelSourceError(Exception):
    """Base error for channel source failures."""


class TelegramClientNotInitializedError(ChannelSourceError):
    """Raised when channels are parsed without a Telegram client."""


class TelegramAuthorizationError(ChannelSourceError):
    """Raised when the configured Telegram session is not authorized."""
