"""Enricher service package.

This package contains the rule-based parser that extracts position,
employment type, salary and sphere from vacancy message texts.
"""

from .employment_patterns import EMPLOYMENT_TYPES
from .text_parser import ParsedVacancy, parse_vacancy_text

__all__ = ["EMPLOYMENT_TYPES", "ParsedVacancy", "parse_vacancy_text"]
