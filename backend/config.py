import os
from pathlib import Path

from dotenv import load_dotenv
from utils.services import parse_channel_list

# Load environment variables
repo_root = Path(__file__).resolve().parents[1]
environment = os.getenv("ENVIRONMENT", "development")
env_file = repo_root / f".env.{environment}"
if env_file.exists():
    load_dotenv(env_file, override=True)
else:
    env_path = repo_root / ".env"
    if env_path.exists():
        load_dotenv(env_path, override=True)
load_dotenv()


def _parse_list(env_name: str, default: list[str]) -> list[str]:
    raw = os.getenv(env_name, "").strip()
    if not raw:
        return default
    return [item.strip() for item in raw.split(",") if item.strip()]


class Config:
    # CORS configuration: allow frontend origin(s) via env (comma-separated)
    CORS_ORIGINS = _parse_list("CORS_ORIGINS", ["http://localhost:5173", "http://localhost:3000"])

    PORT = int(os.getenv("PORT", "5000"))

    # Telegram source channels
    TELEGRAM_API_ID = os.getenv("TELEGRAM_API_ID", "").strip()
    TELEGRAM_API_HASH = os.getenv("TELEGRAM_API_HASH", "").strip()
    TELEGRAM_SESSION = os.getenv("TELEGRAM_SESSION", "").strip()
    SOURCE_CHANNELS = parse_channel_list(os.getenv("TELEGRAM_CHANNELS"))
    MESSAGES_LIMIT = int(os.getenv("TELEGRAM_MESSAGES_LIMIT", "50"))

    # Pagination
    DEFAULT_PAGE = 1
    DEFAULT_PAGE_LIMIT = 20
    MAX_PAGE_LIMIT = 100

    # Allowed values for multi-select filters
    ALLOWED_EMPLOYMENT_TYPES = {"Remote", "Office", "Hybrid"}
    ALLOWED_FRESHNESS = {"today", "3days", "week"}

    # Request keys accepted by the edit endpoint, mapped to vacancy columns
    EDITABLE_FIELDS = {
        "channel": "channel",
        "text": "text",
        "url": "url",
        "position": "position",
        "employmentType": "employment_type",
        "employment_type": "employment_type",
        "salary": "salary",
        "sphere": "sphere",
    }


def telegram_configured() -> bool:
    """Return True if Telegram API credentials are set."""
    return bool(Config.TELEGRAM_API_ID and Config.TELEGRAM_API_HASH)
