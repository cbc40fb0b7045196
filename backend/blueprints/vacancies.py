import logging
from datetime import datetime
from typing import Any

from config import Config
from flask import Blueprint, jsonify, request
from psycopg2 import errors as pg_errors
from utils.errors import _sanitize_error_message
from utils.services import get_vacancy_service
from vacancies import FilterCriteria

logger = logging.getLogger(__name__)
vacancies_bp = Blueprint("vacancies", __name__)

_RESPONSE_KEYS = {
    "id": "id",
    "channel": "channel",
    "text": "text",
    "url": "url",
    "position": "position",
    "employment_type": "employmentType",
    "salary": "salary",
    "sphere": "sphere",
    "created_at": "createdAt",
    "updated_at": "updatedAt",
}


def serialize_vacancy(vacancy: dict[str, Any]) -> dict[str, Any]:
    """Convert a vacancy row to its camelCase JSON representation."""
    payload = {}
    for column, key in _RESPONSE_KEYS.items():
        value = vacancy.get(column)
        if isinstance(value, datetime):
            value = value.isoformat()
        payload[key] = value
    return payload


def _positive_int_arg(name: str, default: int) -> int:
    value = request.args.get(name, type=int)
    if value is None or value < 1:
        return default
    return value


@vacancies_bp.route("/", methods=["GET"])
def api_list_vacancies():
    """Vacancies list API endpoint with filters and pagination."""
    try:
        page = _positive_int_arg("page", Config.DEFAULT_PAGE)
        limit = min(_positive_int_arg("limit", Config.DEFAULT_PAGE_LIMIT), Config.MAX_PAGE_LIMIT)

        criteria = FilterCriteria.from_params(
            search=request.args.get("search"),
            types=request.args.getlist("type"),
            spheres=request.args.getlist("sphere"),
            salary_ranges=request.args.getlist("salary"),
            freshness=[
                f for f in request.args.getlist("freshness") if f in Config.ALLOWED_FRESHNESS
            ],
            experience=request.args.getlist("experience"),
        )

        vacancy_service = get_vacancy_service()
        result = vacancy_service.list_vacancies(criteria, page=page, limit=limit)

        return jsonify(
            {
                "vacancies": [serialize_vacancy(v) for v in result.vacancies],
                "pagination": result.pagination.to_dict(),
            }
        ), 200
    except Exception as e:
        logger.error(f"Error fetching vacancies: {e}", exc_info=True)
        return jsonify({"error": "Failed to fetch vacancies"}), 500


@vacancies_bp.route("/edit/<int:vacancy_id>", methods=["PUT"])
def api_edit_vacancy(vacancy_id: int):
    """Partially update a vacancy."""
    try:
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            return jsonify({"error": "Missing JSON in request"}), 400

        updates = {
            column: data[key] for key, column in Config.EDITABLE_FIELDS.items() if key in data
        }
        if not updates:
            return jsonify({"error": "No editable fields provided"}), 400

        employment_type = updates.get("employment_type")
        if employment_type and employment_type not in Config.ALLOWED_EMPLOYMENT_TYPES:
            return jsonify({"error": f"Invalid employment type: {employment_type}"}), 400

        vacancy_service = get_vacancy_service()
        vacancy = vacancy_service.update_vacancy(vacancy_id, updates)
        if not vacancy:
            return jsonify({"error": "Vacancy not found"}), 404

        return jsonify({"success": True, "vacancy": serialize_vacancy(vacancy)}), 200
    except pg_errors.UniqueViolation:
        return jsonify({"error": "Another vacancy already uses this URL"}), 409
    except ValueError as e:
        logger.error(f"Validation error editing vacancy {vacancy_id}: {e}")
        return jsonify({"error": str(e)}), 400
    except Exception as e:
        logger.error(f"Error editing vacancy {vacancy_id}: {e}", exc_info=True)
        return jsonify({"error": _sanitize_error_message(e)}), 500


@vacancies_bp.route("/delete/<int:vacancy_id>", methods=["DELETE"])
def api_delete_vacancy(vacancy_id: int):
    """Delete a vacancy."""
    try:
        vacancy_service = get_vacancy_service()
        if not vacancy_service.delete_vacancy(vacancy_id):
            return jsonify({"error": "Vacancy not found"}), 404

        return jsonify({"success": True}), 200
    except Exception as e:
        logger.error(f"Error deleting vacancy {vacancy_id}: {e}", exc_info=True)
        return jsonify({"error": _sanitize_error_message(e)}), 500
