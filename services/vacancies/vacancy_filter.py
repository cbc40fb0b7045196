"""In-memory filtering and pagination of stored vacancies."""

from __future__ import annotations

import math
import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Any

# Salary ranges in filters are expressed in thousands ("100-200" means 100 000 to 200 000)
SALARY_RANGE_UNIT = 1000

FRESHNESS_TODAY = "today"
FRESHNESS_3_DAYS = "3days"
FRESHNESS_WEEK = "week"

FRESHNESS_DAYS = {
    FRESHNESS_3_DAYS: 3,
    FRESHNESS_WEEK: 7,
}

# First integer-like token; groups of three digits separated by a single space
# belong to the same number ("150 000")
_SALARY_NUMBER_PATTERN = re.compile(r"\d+(?:[ \u00a0]\d{3})*")
_SALARY_RANGE_PATTERN = re.compile(r"^\s*(\d+)\s*(?:-\s*(\d+)|(\+))?\s*$")


@dataclass(frozen=True)
class FilterCriteria:
    """Query-time vacancy filters.

    Values inside one field are OR-ed, fields are AND-ed together. Empty
    fields do not filter anything.
    """

    search: str | None = None
    types: frozenset[str] = field(default_factory=frozenset)
    spheres: frozenset[str] = field(default_factory=frozenset)
    salary_ranges: frozenset[str] = field(default_factory=frozenset)
    freshness: frozenset[str] = field(default_factory=frozenset)
    experience: frozenset[str] = field(default_factory=frozenset)

    @classmethod
    def from_params(
        cls,
        search: str | None = None,
        types: Iterable[str] = (),
        spheres: Iterable[str] = (),
        salary_ranges: Iterable[str] = (),
        freshness: Iterable[str] = (),
        experience: Iterable[str] = (),
    ) -> FilterCriteria:
        """Build criteria from raw request values, dropping blank entries."""

        def _clean(values: Iterable[str]) -> frozenset[str]:
            return frozenset(v.strip() for v in values if v and v.strip())

        search = search.strip() if search else None
        return cls(
            search=search or None,
            types=_clean(types),
            spheres=_clean(spheres),
            salary_ranges=_clean(salary_ranges),
            freshness=_clean(freshness),
            experience=_clean(experience),
        )


@dataclass(frozen=True)
class Pagination:
    current_page: int
    total_pages: int
    total_vacancies: int
    has_more: bool

    def to_dict(self) -> dict[str, Any]:
        return {
            "currentPage": self.current_page,
            "totalPages": self.total_pages,
            "totalVacancies": self.total_vacancies,
            "hasMore": self.has_more,
        }


@dataclass(frozen=True)
class FilterResult:
    vacancies: list[dict[str, Any]]
    pagination: Pagination


def extract_salary_number(salary: str | None) -> int | None:
    """
    Extract a representative number from a salary text.

    Args:
        salary: Salary text as stored, e.g. "от 150 000 руб"

    Returns:
        The first integer-like value found, or None if there is none
    """
    if not salary:
        return None
    match = _SALARY_NUMBER_PATTERN.search(salary)
    if not match:
        return None
    return int(re.sub(r"\D", "", match.group(0)))


def parse_salary_range(value: str) -> tuple[int, int | None] | None:
    """
    Parse a salary range filter value.

    Accepts "min-max" and "min+" (plain "min" is treated as "min+"). Bounds
    are in thousands and are returned in full units.

    Returns:
        (minimum, maximum) where maximum is None for open ranges, or None if
        the value cannot be parsed
    """
    match = _SALARY_RANGE_PATTERN.match(value or "")
    if not match:
        return None
    minimum = int(match.group(1)) * SALARY_RANGE_UNIT
    maximum = int(match.group(2)) * SALARY_RANGE_UNIT if match.group(2) else None
    return minimum, maximum


def _matches_search(vacancy: dict[str, Any], search: str) -> bool:
    needle = search.lower()
    for key in ("text", "position", "sphere"):
        value = vacancy.get(key)
        if value and needle in value.lower():
            return True
    return False


def _as_local(value: datetime) -> datetime:
    # Naive timestamps are taken as local time
    return value.astimezone()


def _freshness_windows(freshness: Iterable[str], now: datetime) -> list[datetime]:
    """Return the start of each requested recency window."""
    starts = []
    for bucket in freshness:
        if bucket == FRESHNESS_TODAY:
            starts.append(now.replace(hour=0, minute=0, second=0, microsecond=0))
        elif bucket in FRESHNESS_DAYS:
            starts.append(now - timedelta(days=FRESHNESS_DAYS[bucket]))
    return starts


def _matches_salary(salary_number: int, ranges: Sequence[tuple[int, int | None]]) -> bool:
    for minimum, maximum in ranges:
        if maximum is None:
            if salary_number >= minimum:
                return True
        elif minimum <= salary_number <= maximum:
            return True
    return False


def filter_vacancies(
    vacancies: Iterable[dict[str, Any]],
    criteria: FilterCriteria,
    page: int = 1,
    limit: int = 20,
    now: datetime | None = None,
) -> FilterResult:
    """
    Filter, sort and paginate vacancies.

    Stages run in order: search, employment type and sphere, freshness,
    salary. The surviving vacancies are sorted by created_at (newest first)
    and only then sliced to the requested page.

    Args:
        vacancies: Vacancy dictionaries as returned by VacancyService
        criteria: Filters to apply
        page: 1-based page number
        limit: Page size
        now: Reference time for freshness windows (defaults to local now)

    Returns:
        FilterResult with the page of vacancies and pagination metadata

    Raises:
        ValueError: If page or limit is less than 1
    """
    if page < 1:
        raise ValueError("Page must be a positive integer")
    if limit < 1:
        raise ValueError("Limit must be a positive integer")

    now = _as_local(now) if now else datetime.now().astimezone()
    matches = list(vacancies)

    if criteria.search:
        matches = [v for v in matches if _matches_search(v, criteria.search)]

    if criteria.types:
        matches = [v for v in matches if v.get("employment_type") in criteria.types]

    if criteria.spheres:
        matches = [v for v in matches if v.get("sphere") in criteria.spheres]

    window_starts = _freshness_windows(criteria.freshness, now)
    if window_starts:
        matches = [
            v
            for v in matches
            if v.get("created_at")
            and any(_as_local(v["created_at"]) >= start for start in window_starts)
        ]

    if criteria.salary_ranges:
        ranges = [r for r in map(parse_salary_range, criteria.salary_ranges) if r]
        salary_matches = []
        for vacancy in matches:
            salary_number = extract_salary_number(vacancy.get("salary"))
            if salary_number is not None and _matches_salary(salary_number, ranges):
                salary_matches.append(vacancy)
        matches = salary_matches

    # sorted() is stable, so vacancies created at the same time keep their order
    matches = sorted(
        matches,
        key=lambda v: _as_local(v["created_at"]).timestamp() if v.get("created_at") else 0.0,
        reverse=True,
    )

    total = len(matches)
    offset = (page - 1) * limit
    pagination = Pagination(
        current_page=page,
        total_pages=math.ceil(total / limit),
        total_vacancies=total,
        has_more=page * limit < total,
    )
    return FilterResult(vacancies=matches[offset : offset + limit], pagination=pagination)
