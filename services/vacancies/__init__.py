"""Vacancy storage, deduplication and listing services."""

from .vacancy_filter import (
    FilterCriteria,
    FilterResult,
    Pagination,
    extract_salary_number,
    filter_vacancies,
    parse_salary_range,
)
from .vacancy_service import VacancyService

__all__ = [
    "FilterCriteria",
    "FilterResult",
    "Pagination",
    "VacancyService",
    "extract_salary_number",
    "filter_vacancies",
    "parse_salary_range",
]
