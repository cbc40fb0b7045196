"""Vacancy text parser.

Extracts structured fields (position, employment type, salary and sphere) from
the free-form text of a channel message using ordered pattern tables.
"""

from __future__ import annotations

import re
from dataclasses import asdict, dataclass
from typing import Any

from .employment_patterns import EMPLOYMENT_TYPE_PATTERNS
from .salary_patterns import SALARY_PATTERNS
from .sphere_keywords import HASHTAG_SPHERES, POSITION_SPHERES

POSITION_PATTERN = re.compile(r"\*\*(.*?)\*\*")
HASHTAG_PATTERN = re.compile(r"#([a-zA-Zа-яА-Я]+)")


@dataclass(frozen=True)
class ParsedVacancy:
    """Fields extracted from a vacancy message. Any of them may be missing."""

    position: str | None = None
    employment_type: str | None = None
    salary: str | None = None
    sphere: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def extract_position(text: str) -> str | None:
    """Return the trimmed content of the first **bold** span, if any."""
    match = POSITION_PATTERN.search(text)
    if not match:
        return None
    return match.group(1).strip()


def extract_employment_type(text: str) -> str | None:
    """
    Detect the employment type of a vacancy.

    Patterns are checked in EMPLOYMENT_TYPE_PATTERNS order and the first one
    that matches anywhere in the text decides the result.

    Returns:
        "Remote", "Office" or "Hybrid", or None if nothing matches
    """
    for pattern, employment_type in EMPLOYMENT_TYPE_PATTERNS:
        if pattern.search(text):
            return employment_type
    return None


def extract_salary(text: str) -> str | None:
    """
    Extract the salary mention from a vacancy text.

    The full matched substring is returned (e.g. "Зарплата: от 100 000 руб"),
    not only the amount.
    """
    for pattern in SALARY_PATTERNS:
        match = pattern.search(text)
        if match:
            return match.group(0).strip()
    return None


def extract_sphere(text: str, position: str | None = None) -> str | None:
    """
    Infer the sphere of a vacancy.

    Hashtags are looked up first, in the order they appear in the text. If none
    of them is known, the position is scanned for a known keyword.
    """
    for tag in HASHTAG_PATTERN.findall(text):
        sphere = HASHTAG_SPHERES.get(tag.lower())
        if sphere:
            return sphere

    if position:
        position_lower = position.lower()
        for keyword, sphere in POSITION_SPHERES.items():
            if keyword in position_lower:
                return sphere

    return None


def parse_vacancy_text(text: str) -> ParsedVacancy:
    """
    Parse a raw vacancy message into structured fields.

    Args:
        text: Message text (markdown, as rendered by the channel client)

    Returns:
        ParsedVacancy with every field that could be extracted
    """
    if not text:
        return ParsedVacancy()

    position = extract_position(text)
    return ParsedVacancy(
        position=position,
        employment_type=extract_employment_type(text),
        salary=extract_salary(text),
        sphere=extract_sphere(text, position),
    )
