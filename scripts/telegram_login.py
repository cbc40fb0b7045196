#!/usr/bin/env python3
"""
Log in to Telegram interactively and print a reusable session string.

Asks for the phone number, the login code and (if enabled) the two-step
verification password. Put the printed value into TELEGRAM_SESSION so the
backend and the Airflow task can connect without prompting.

Usage:
    python scripts/telegram_login.py
"""

import logging
import os
import sys

from dotenv import load_dotenv
from telethon.sessions import StringSession
from telethon.sync import TelegramClient

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

load_dotenv()


def main():
    """Main entry point."""
    api_id = os.getenv("TELEGRAM_API_ID", "").strip()
    api_hash = os.getenv("TELEGRAM_API_HASH", "").strip()
    if not api_id or not api_hash:
        logger.error("TELEGRAM_API_ID and TELEGRAM_API_HASH environment variables are required")
        sys.exit(1)

    session = StringSession(os.getenv("TELEGRAM_SESSION", ""))
    with TelegramClient(session, int(api_id), api_hash, connection_retries=5) as client:
        # The context manager runs client.start(), which prompts for phone, code and password
        me = client.get_me()
        logger.info(f"Logged in as {me.username or me.id}")
        print("Session string:", client.session.save())


if __name__ == "__main__":
    main()
