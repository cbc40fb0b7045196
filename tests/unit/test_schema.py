"""
Unit tests for the vacancies schema scripts.

Checks the SQL in docker/init without a database.
"""

import re
from pathlib import Path

INIT_DIR = Path(__file__).parent.parent.parent / "docker" / "init"


def _column_types(sql):
    """Map column name to declared type for a CREATE TABLE vacancies body."""
    body = re.search(r"CREATE TABLE IF NOT EXISTS public\.vacancies \((.*?)\n\);", sql, re.DOTALL)
    columns = {}
    for line in body.group(1).splitlines():
        match = re.match(r"\s+([a-z_]+) ([A-Z]+(?:\(\d+\))?)", line)
        if match and match.group(1) != "constraint":
            columns[match.group(1)] = match.group(2)
    return columns


class TestVacanciesSchema:
    """Test column types of public.vacancies."""

    def test_extracted_text_columns_are_unbounded(self):
        """Test that parsed fields are TEXT, since extraction has no length limit."""
        sql = (INIT_DIR / "01_create_vacancies.sql").read_text(encoding="utf-8")
        columns = _column_types(sql)

        for column in ("channel", "text", "url", "position", "salary", "sphere"):
            assert columns[column] == "TEXT", column

    def test_existing_tables_are_widened(self):
        """Test that a follow-up script converts older VARCHAR columns to TEXT."""
        sql = (INIT_DIR / "02_widen_vacancy_text_columns.sql").read_text(encoding="utf-8")

        for column in ("channel", "url", "position", "salary", "sphere"):
            assert f"ALTER COLUMN {column} TYPE TEXT" in sql
