#!/usr/bin/env python3
"""
Run database migrations manually.

This script runs the SQL files in docker/init in name order, handling
already-applied migrations gracefully.

Usage:
    python scripts/run_migrations.py [--database DATABASE] [--verbose]
"""

import argparse
import logging
import os
import sys
from pathlib import Path

import psycopg2
from dotenv import load_dotenv

# Configure logging
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

load_dotenv()


def get_db_connection(database: str | None = None) -> psycopg2.extensions.connection:
    """Get database connection from DATABASE_URL or POSTGRES_* environment variables."""
    try:
        database_url = os.getenv("DATABASE_URL")
        if database_url and not database:
            conn = psycopg2.connect(database_url)
        else:
            conn = psycopg2.connect(
                host=os.getenv("POSTGRES_HOST", "localhost"),
                port=os.getenv("POSTGRES_PORT", "5432"),
                database=database or os.getenv("POSTGRES_DB", "vacancies_db"),
                user=os.getenv("POSTGRES_USER", "postgres"),
                password=os.getenv("POSTGRES_PASSWORD", "postgres"),
            )
        conn.autocommit = True  # Each statement executes immediately
        return conn
    except psycopg2.Error as e:
        logger.error(f"Failed to connect to database: {e}")
        sys.exit(1)


def run_migration(conn: psycopg2.extensions.connection, migration_file: Path, verbose: bool = False) -> bool:
    """Run a single migration file.

    Args:
        conn: Database connection
        migration_file: Path to migration SQL file
        verbose: If True, show detailed information

    Returns:
        True if migration succeeded, False otherwise
    """
    try:
        migration_sql = migration_file.read_text(encoding="utf-8")

        if verbose:
            logger.info(f"Running migration: {migration_file.name}")

        with conn.cursor() as cur:
            cur.execute(migration_sql)

        if verbose:
            logger.info(f"✓ Migration completed: {migration_file.name}")
        return True

    except (
        psycopg2.errors.DuplicateTable,
        psycopg2.errors.DuplicateObject,
        psycopg2.errors.DuplicateColumn,
    ) as e:
        if verbose:
            logger.info(f"✓ Migration already applied (skipped): {migration_file.name} - {e}")
        return True
    except psycopg2.Error as e:
        logger.error(f"✗ Migration failed: {migration_file.name} - {e}")
        return False


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Run database migrations")
    parser.add_argument("--database", "-d", help="Database name (default: from POSTGRES_DB env var)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Show detailed information")

    args = parser.parse_args()

    project_root = Path(__file__).parent.parent
    migrations_dir = project_root / "docker" / "init"
    migration_files = sorted(migrations_dir.glob("*.sql"))

    if not migration_files:
        logger.warning(f"No migration files found in {migrations_dir}")
        sys.exit(0)

    conn = get_db_connection(args.database)
    try:
        results = {}
        for migration_file in migration_files:
            results[migration_file.name] = run_migration(conn, migration_file, args.verbose)
    finally:
        conn.close()

    # Summary
    total = len(results)
    passed = sum(1 for v in results.values() if v)
    failed = total - passed

    logger.info(f"\nSummary: {passed}/{total} migrations succeeded")

    if failed > 0:
        logger.warning("Failed migrations:")
        for name, status in results.items():
            if not status:
                logger.warning(f"  - {name}: FAILED")
        sys.exit(1)

    logger.info("All migrations completed successfully!")


if __name__ == "__main__":
    main()
