import logging
import os

from flask import Blueprint, current_app, jsonify
from utils.services import get_vacancy_service

logger = logging.getLogger(__name__)
system_bp = Blueprint("system", __name__)


@system_bp.route("/api/health")
def api_health():
    """Health check endpoint."""
    vacancies_count = None
    try:
        vacancies_count = get_vacancy_service().count_vacancies()
        db_status = "healthy"
    except Exception as e:
        logger.warning(f"Health check database ping failed: {e}")
        db_status = "unhealthy"

    telegram_client = current_app.extensions.get("telegram_client")
    if telegram_client is None:
        telegram_status = "not_configured"
    elif telegram_client.is_connected:
        telegram_status = "connected"
    else:
        telegram_status = "disconnected"

    response = {
        "status": "healthy" if db_status == "healthy" else "degraded",
        "database": db_status,
        "vacancies": vacancies_count,
        "telegram": telegram_status,
        "environment": os.getenv("ENVIRONMENT", "development"),
    }
    return jsonify(response)
