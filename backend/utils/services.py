import os
import sys
from pathlib import Path

# Add services to path
if Path("/app").exists():
    sys.path.insert(0, "/app/services")
else:
    services_path = Path(__file__).resolve().parents[2] / "services"
    sys.path.insert(0, str(services_path))

from channel_source import ChannelParser, TelegramChannelClient, parse_channel_list  # noqa: F401
from shared import PostgreSQLDatabase
from vacancies import VacancyService


def build_db_connection_string() -> str:
    """
    Build PostgreSQL connection string from environment variables.

    Checks DATABASE_URL first, then falls back to individual POSTGRES_* variables.

    Returns:
        PostgreSQL connection string
    """
    # Check for DATABASE_URL first (useful for tests and deployments)
    database_url = os.getenv("DATABASE_URL")
    if database_url:
        return database_url

    # Fall back to individual environment variables
    host = os.getenv("POSTGRES_HOST", "localhost")
    port = os.getenv("POSTGRES_PORT", "5432")
    user = os.getenv("POSTGRES_USER", "postgres")
    password = os.getenv("POSTGRES_PASSWORD", "postgres")
    db = os.getenv("POSTGRES_DB", "vacancies_db")
    ssl_mode = os.getenv("POSTGRES_SSL_MODE", "")

    conn_str = f"postgresql://{user}:{password}@{host}:{port}/{db}"
    if ssl_mode:
        conn_str += f"?sslmode={ssl_mode}"
    return conn_str


def get_database() -> PostgreSQLDatabase:
    """
    Get PostgreSQLDatabase for the configured connection string.

    Returns:
        PostgreSQLDatabase instance
    """
    return PostgreSQLDatabase(connection_string=build_db_connection_string())


def get_vacancy_service() -> VacancyService:
    """
    Get VacancyService instance with database connection.

    Returns:
        VacancyService instance
    """
    return VacancyService(database=get_database())


def get_channel_parser(
    telegram_client: TelegramChannelClient | None, messages_limit: int = 50
) -> ChannelParser:
    """
    Get ChannelParser instance using the shared Telegram client.

    Args:
        telegram_client: Telegram client created at application startup
        messages_limit: Number of latest messages to read per channel

    Returns:
        ChannelParser instance
    """
    return ChannelParser(
        database=get_database(),
        telegram_client=telegram_client,
        messages_limit=messages_limit,
    )


def build_telegram_client(api_id: str, api_hash: str, session: str) -> TelegramChannelClient:
    """
    Build a TelegramChannelClient from configuration values.

    Returns:
        TelegramChannelClient instance (not connected yet)
    """
    return TelegramChannelClient(api_id=int(api_id), api_hash=api_hash, session_string=session)
