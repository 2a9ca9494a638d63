"""
PostgreSQL repository adapter - Implements RegistrationRepository protocol.

This module provides the PostgreSQL implementation of the domain's
repository port using psycopg3 with raw SQL.

Uniqueness Design:
------------------
The registrations table carries UNIQUE constraints on email and
contact_number. insert() uses INSERT ... ON CONFLICT DO NOTHING without a
conflict target, so a violation of either constraint yields rowcount 0 and
is reported as InsertResult.DUPLICATE instead of an exception. Two concurrent
requests that both pass find_duplicate() are therefore serialized by the
database: exactly one row is written.

Driver and pool failures are translated into StorageUnavailable so the
domain never sees psycopg types.
"""

import logging
from pathlib import Path

import psycopg
from psycopg_pool import ConnectionPool, PoolTimeout

from src.domain.exceptions import StorageUnavailable
from src.domain.models import Registration
from src.domain.ports import InsertResult

logger = logging.getLogger(__name__)


class PostgresRegistrationRepository:
    """
    Implements RegistrationRepository protocol via psycopg3.

    Uses structural subtyping - no explicit inheritance from Protocol.
    All SQL uses parameterized queries for security.
    """

    def __init__(self, pool: ConnectionPool) -> None:
        """
        Initialize repository with connection pool.

        Args:
            pool: psycopg3 ConnectionPool for database connections
        """
        self._pool = pool

    def find_duplicate(self, email: str, contact_number: str) -> Registration | None:
        """
        Find a registration with the same email OR contact number.

        Args:
            email: Normalized email address
            contact_number: Contact number as submitted

        Returns:
            The matching registration, or None
        """
        sql = """
            SELECT full_name, email, contact_number, current_year, branch, purpose, registered_at
            FROM registrations
            WHERE email = %s OR contact_number = %s
            LIMIT 1
        """

        try:
            with self._pool.connection() as conn, conn.cursor() as cursor:
                cursor.execute(sql, (email, contact_number))
                row = cursor.fetchone()
        except (psycopg.Error, PoolTimeout) as e:
            logger.error("Duplicate lookup failed: %s", e)
            raise StorageUnavailable("registration lookup failed") from e

        if row is None:
            return None
        return Registration(
            full_name=row[0],
            email=row[1],
            contact_number=row[2],
            current_year=row[3],
            branch=row[4],
            purpose=row[5],
            registered_at=row[6],
        )

    def insert(self, registration: Registration) -> InsertResult:
        """
        Insert a registration, reporting unique-constraint conflicts as DUPLICATE.

        Args:
            registration: Validated registration record

        Returns:
            CREATED if the row was written, DUPLICATE if email or
            contact number already exists
        """
        sql = """
            INSERT INTO registrations
                (full_name, email, contact_number, current_year, branch, purpose, registered_at)
            VALUES (%s, %s, %s, %s, %s, %s, %s)
            ON CONFLICT DO NOTHING
        """

        try:
            with self._pool.connection() as conn, conn.cursor() as cursor:
                cursor.execute(
                    sql,
                    (
                        registration.full_name,
                        registration.email,
                        registration.contact_number,
                        registration.current_year,
                        registration.branch,
                        registration.purpose,
                        registration.registered_at,
                    ),
                )
                conn.commit()
                # 1 if written, 0 if either unique constraint fired
                created = cursor.rowcount == 1
        except (psycopg.Error, PoolTimeout) as e:
            logger.error("Registration insert failed: %s", e)
            raise StorageUnavailable("registration insert failed") from e

        return InsertResult.CREATED if created else InsertResult.DUPLICATE


def run_migrations(pool: ConnectionPool) -> None:
    """
    Execute all SQL migration files from the migrations directory.

    Migrations are executed in sorted order (alphabetically by filename).
    Each migration should be idempotent (use IF NOT EXISTS, etc.).

    Args:
        pool: psycopg3 ConnectionPool instance
    """
    # Structure: src/adapters/repository/postgres.py -> migrations/
    migrations_dir = Path(__file__).parent.parent.parent.parent / "migrations"

    if not migrations_dir.exists():
        logger.warning(f"Migrations directory not found: {migrations_dir}")
        return

    sql_files = sorted(migrations_dir.glob("*.sql"))

    if not sql_files:
        logger.info("No migration files found")
        return

    logger.info(f"Running {len(sql_files)} migration(s)")

    for sql_file in sql_files:
        logger.info(f"Executing migration: {sql_file.name}")
        try:
            sql_content = sql_file.read_text()

            with pool.connection() as conn:
                conn.execute(sql_content)

            logger.info(f"Migration complete: {sql_file.name}")
        except Exception as e:
            logger.error(f"Migration failed: {sql_file.name} - {e}")
            raise RuntimeError(f"Database migration failed: {sql_file.name}") from e
