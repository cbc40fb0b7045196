import logging

from blueprints.vacancies import serialize_vacancy
from config import Config
from flask import Blueprint, current_app, jsonify
from utils.services import get_channel_parser

logger = logging.getLogger(__name__)
parsing_bp = Blueprint("parsing", __name__)


@parsing_bp.route("/parse", methods=["POST"])
def api_parse_channels():
    """Parse the source channels and store new vacancies."""
    telegram_client = current_app.extensions.get("telegram_client")
    if telegram_client is None:
        return jsonify(
            {
                "error": "Telegram client is not configured. "
                "Set TELEGRAM_API_ID, TELEGRAM_API_HASH and TELEGRAM_SESSION."
            }
        ), 503

    try:
        parser = get_channel_parser(telegram_client, messages_limit=Config.MESSAGES_LIMIT)
        result = parser.parse_channels(Config.SOURCE_CHANNELS)

        return jsonify(
            {
                "success": True,
                "parsed": result.parsed,
                "vacancies": [serialize_vacancy(v) for v in result.vacancies],
            }
        ), 200
    except Exception as e:
        logger.error(f"Error during parsing: {e}", exc_info=True)
        return jsonify({"error": "Failed to parse channels"}), 500
