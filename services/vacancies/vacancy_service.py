"""Service for storing and querying scraped vacancies."""

import logging
from typing import Any

from shared.database import Database

from .queries import (
    CHECK_VACANCY_URL_EXISTS,
    COUNT_VACANCIES,
    DELETE_VACANCY,
    GET_ALL_VACANCIES,
    GET_VACANCY_BY_ID,
    INSERT_VACANCY_IF_NEW,
    UPDATE_VACANCY,
)
from .vacancy_filter import FilterCriteria, FilterResult, filter_vacancies

logger = logging.getLogger(__name__)

VACANCY_FIELDS = (
    "channel",
    "text",
    "url",
    "position",
    "employment_type",
    "salary",
    "sphere",
)
REQUIRED_FIELDS = ("channel", "text", "url")


class VacancyService:
    """Service for vacancy persistence, deduplication and listing."""

    def __init__(self, database: Database):
        """Initialize the vacancy service.

        Args:
            database: Database connection interface
        """
        if not database:
            raise ValueError("Database is required")
        self.db = database

    @staticmethod
    def _rows_to_dicts(cur) -> list[dict[str, Any]]:
        columns = [desc[0] for desc in cur.description]
        return [dict(zip(columns, row, strict=False)) for row in cur.fetchall()]

    @staticmethod
    def _validate_required(vacancy: dict[str, Any]) -> None:
        missing = [f for f in REQUIRED_FIELDS if not vacancy.get(f)]
        if missing:
            raise ValueError(f"Missing required vacancy field(s): {', '.join(missing)}")

    def get_all_vacancies(self) -> list[dict[str, Any]]:
        """Get every stored vacancy, newest first."""
        with self.db.get_cursor() as cur:
            cur.execute(GET_ALL_VACANCIES)
            vacancies = self._rows_to_dicts(cur)

        logger.debug(f"Retrieved {len(vacancies)} vacancies")
        return vacancies

    def count_vacancies(self) -> int:
        """Return the number of stored vacancies."""
        with self.db.get_cursor() as cur:
            cur.execute(COUNT_VACANCIES)
            row = cur.fetchone()
        return row[0] if row else 0

    def get_vacancy_by_id(self, vacancy_id: int) -> dict[str, Any] | None:
        """Get a vacancy by ID.

        Args:
            vacancy_id: Vacancy ID

        Returns:
            Vacancy dictionary or None if not found
        """
        with self.db.get_cursor() as cur:
            cur.execute(GET_VACANCY_BY_ID, (vacancy_id,))
            rows = self._rows_to_dicts(cur)
        return rows[0] if rows else None

    def is_new_vacancy(self, url: str) -> bool:
        """Return True if no vacancy with this URL is stored yet."""
        with self.db.get_cursor() as cur:
            cur.execute(CHECK_VACANCY_URL_EXISTS, (url,))
            row = cur.fetchone()
        return not (row and row[0])

    def create_vacancy_if_new(self, vacancy: dict[str, Any]) -> dict[str, Any] | None:
        """Store a vacancy unless one with the same URL already exists.

        The existence check and the insert are a single statement, so two
        ingestion runs racing on the same URL store it only once.

        Args:
            vacancy: Vacancy fields (channel, text and url are required)

        Returns:
            The stored vacancy, or None if the URL was already stored

        Raises:
            ValueError: If a required field is missing
        """
        self._validate_required(vacancy)

        with self.db.get_cursor() as cur:
            cur.execute(INSERT_VACANCY_IF_NEW, tuple(vacancy.get(f) for f in VACANCY_FIELDS))
            rows = self._rows_to_dicts(cur)

        if not rows:
            logger.debug(f"Vacancy {vacancy['url']} already exists, skipping")
            return None

        logger.info(f"Stored vacancy {rows[0]['id']} from {vacancy['url']}")
        return rows[0]

    def update_vacancy(self, vacancy_id: int, updates: dict[str, Any]) -> dict[str, Any] | None:
        """Apply a partial update to a vacancy.

        Unknown keys in updates are ignored. created_at is never changed.

        Args:
            vacancy_id: Vacancy ID to update
            updates: Field values to change

        Returns:
            The updated vacancy, or None if it does not exist

        Raises:
            ValueError: If no editable field is given or a required field is blanked
            psycopg2.errors.UniqueViolation: If the new URL belongs to another vacancy
        """
        changes = {k: v for k, v in updates.items() if k in VACANCY_FIELDS}
        if not changes:
            raise ValueError("No editable fields provided")

        existing = self.get_vacancy_by_id(vacancy_id)
        if not existing:
            return None

        merged = {f: existing.get(f) for f in VACANCY_FIELDS}
        merged.update(changes)
        self._validate_required(merged)

        with self.db.get_cursor() as cur:
            cur.execute(
                UPDATE_VACANCY,
                (*(merged[f] for f in VACANCY_FIELDS), vacancy_id),
            )
            rows = self._rows_to_dicts(cur)

        if not rows:
            return None

        logger.info(f"Updated vacancy {vacancy_id}: {', '.join(sorted(changes))}")
        return rows[0]

    def delete_vacancy(self, vacancy_id: int) -> bool:
        """Delete a vacancy.

        Args:
            vacancy_id: Vacancy ID to delete

        Returns:
            True if the vacancy was deleted, False if it did not exist
        """
        with self.db.get_cursor() as cur:
            cur.execute(DELETE_VACANCY, (vacancy_id,))
            deleted = cur.fetchone() is not None

        if deleted:
            logger.info(f"Deleted vacancy {vacancy_id}")
        return deleted

    def list_vacancies(
        self, criteria: FilterCriteria, page: int = 1, limit: int = 20
    ) -> FilterResult:
        """Get one page of vacancies matching the criteria.

        Args:
            criteria: Filters to apply
            page: 1-based page number
            limit: Page size

        Returns:
            FilterResult with the vacancies and pagination metadata

        Raises:
            ValueError: If page or limit is less than 1
        """
        return filter_vacancies(self.get_all_vacancies(), criteria, page=page, limit=limit)
