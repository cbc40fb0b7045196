"""
Pytest configuration and fixtures for unit tests.

Unit tests are fast, isolated tests that don't require external dependencies.
"""

from datetime import datetime, timedelta
from unittest.mock import MagicMock, Mock

import pytest


@pytest.fixture
def mock_cursor():
    """Mock database cursor."""
    return MagicMock()


@pytest.fixture
def mock_database(mock_cursor):
    """Mock Database whose get_cursor() context yields mock_cursor."""
    db = Mock()
    db.get_cursor.return_value.__enter__ = Mock(return_value=mock_cursor)
    db.get_cursor.return_value.__exit__ = Mock(return_value=False)
    return db


@pytest.fixture
def now():
    """Fixed local reference time (a Wednesday afternoon)."""
    return datetime(2025, 3, 12, 15, 30).astimezone()


@pytest.fixture
def sample_vacancies(now):
    """Stored vacancies as returned by VacancyService, newest first."""
    return [
        {
            "id": 4,
            "channel": "@comeindesign",
            "text": "**Product Designer** удаленно, от 120 000 руб #дизайн",
            "url": "https://t.me/comeindesign/104",
            "position": "Product Designer",
            "employment_type": "Remote",
            "salary": "от 120 000 руб",
            "sphere": "Дизайн",
            "created_at": now - timedelta(hours=2),
            "updated_at": now - timedelta(hours=2),
        },
        {
            "id": 3,
            "channel": "@work_editor",
            "text": "**Редактор** в офис, зарплата 60000 руб #редактор",
            "url": "https://t.me/work_editor/77",
            "position": "Редактор",
            "employment_type": "Office",
            "salary": "зарплата 60000 руб",
            "sphere": "Копирайтинг",
            "created_at": now - timedelta(days=2),
            "updated_at": now - timedelta(days=2),
        },
        {
            "id": 2,
            "channel": "@comeinlena",
            "text": "**Graphic designer** hybrid, 150000-200000 rub #design",
            "url": "https://t.me/comeinlena/12",
            "position": "Graphic designer",
            "employment_type": "Hybrid",
            "salary": "150000-200000 rub",
            "sphere": "Дизайн",
            "created_at": now - timedelta(days=5),
            "updated_at": now - timedelta(days=5),
        },
        {
            "id": 1,
            "channel": "@comeinlena",
            "text": "**SMM-менеджер** remote #smm",
            "url": "https://t.me/comeinlena/3",
            "position": "SMM-менеджер",
            "employment_type": "Remote",
            "salary": None,
            "sphere": "SMM",
            "created_at": now - timedelta(days=10),
            "updated_at": now - timedelta(days=10),
        },
    ]
