"""
Vacancy Parser Services

This package contains the core Python services:
- enricher: Rule-based extraction of vacancy fields from message text
- vacancies: Vacancy storage, deduplication, filtering and pagination
- channel_source: Telegram channel client and ingestion of new vacancies
- shared: Database abstraction and logging helpers
"""
