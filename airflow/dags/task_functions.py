"""
Airflow Task Functions

Python functions to be called by Airflow PythonOperator tasks.
These functions wrap the service classes and handle environment setup.
"""

from __future__ import annotations

import logging
import os
import sys
import time
from typing import Any

logger = logging.getLogger(__name__)

# Add services directory to path so we can import channel services
sys.path.insert(0, "/opt/airflow/services")

# Import after path modification
from channel_source import (
    DEFAULT_MESSAGES_LIMIT,
    ChannelParser,
    TelegramChannelClient,
    parse_channel_list,
)
from shared import PostgreSQLDatabase, log_with_context


def build_db_connection_string() -> str:
    """
    Build PostgreSQL connection string from environment variables.

    Reads from POSTGRES_HOST, POSTGRES_PORT, POSTGRES_USER,
    POSTGRES_PASSWORD, POSTGRES_DB environment variables.

    Returns:
        PostgreSQL connection string
    """
    host = os.getenv("POSTGRES_HOST", "postgres")
    port = os.getenv("POSTGRES_PORT", "5432")
    user = os.getenv("POSTGRES_USER", "postgres")
    password = os.getenv("POSTGRES_PASSWORD", "postgres")
    db = os.getenv("POSTGRES_DB", "vacancies_db")

    return f"postgresql://{user}:{password}@{host}:{port}/{db}"


def get_source_channels() -> list[str]:
    """Return channels from TELEGRAM_CHANNELS (comma-separated) or the defaults."""
    return parse_channel_list(os.getenv("TELEGRAM_CHANNELS"))


def build_telegram_client() -> TelegramChannelClient:
    """
    Build a Telegram client from TELEGRAM_* environment variables.

    Raises:
        ValueError: If TELEGRAM_API_ID or TELEGRAM_API_HASH is missing
    """
    api_id = os.getenv("TELEGRAM_API_ID", "").strip()
    api_hash = os.getenv("TELEGRAM_API_HASH", "").strip()
    if not api_id or not api_hash:
        raise ValueError("TELEGRAM_API_ID and TELEGRAM_API_HASH environment variables are required")

    return TelegramChannelClient(
        api_id=int(api_id),
        api_hash=api_hash,
        session_string=os.getenv("TELEGRAM_SESSION", ""),
    )


def parse_channels_task(**context) -> dict[str, Any]:
    """
    Airflow task function to parse source channels into vacancies.

    Failures are logged and reported in the returned summary; the task never
    raises, so a failed run does not block the next hourly run.

    Args:
        **context: Airflow context (contains dag_run, task_instance, etc.)

    Returns:
        Dictionary with parsing results
    """
    logger.info("[CRON] Running hourly parsing job...")
    start_time = time.time()
    dag_run_id = context.get("dag_run").run_id if context.get("dag_run") else "unknown"

    telegram_client = None
    try:
        channels = get_source_channels()
        messages_limit = int(os.getenv("TELEGRAM_MESSAGES_LIMIT", DEFAULT_MESSAGES_LIMIT))

        database = PostgreSQLDatabase(connection_string=build_db_connection_string())
        telegram_client = build_telegram_client()
        telegram_client.start()

        parser = ChannelParser(
            database=database,
            telegram_client=telegram_client,
            messages_limit=messages_limit,
        )
        result = parser.parse_channels(channels)

        duration = time.time() - start_time
        log_with_context(
            logger,
            logging.INFO,
            f"[CRON] Parsed {result.parsed} vacancies",
            dag_run_id=dag_run_id,
            duration_seconds=round(duration, 2),
        )
        return {
            "status": "success",
            "parsed": result.parsed,
            "failed_channels": result.failed_channels,
        }
    except Exception as e:
        logger.error(f"[CRON] Parsing job failed: {e}", exc_info=True)
        return {"status": "failed", "parsed": 0, "error": str(e)}
    finally:
        if telegram_client is not None:
            try:
                telegram_client.close()
            except Exception as e:
                logger.warning(f"Failed to close Telegram client: {e}")
