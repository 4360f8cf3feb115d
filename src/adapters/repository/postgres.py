"""
PostgreSQL repository adapter - Implements UserRepository protocol.

This module provides the PostgreSQL implementation of the domain's
repository port using psycopg3 with raw SQL.

Uniqueness Design:
-----------------
Email uniqueness is enforced by the UNIQUE constraint on users.email
(see migrations/001_create_users.sql). The service's find_by_email()
pre-check is only a fast path; when two requests race past it, the
losing INSERT raises UniqueViolation, which create() reports as
DUPLICATE_EMAIL. No lock is held between the two calls.
"""

import logging
from pathlib import Path

import psycopg
from psycopg.errors import CheckViolation, UniqueViolation
from psycopg_pool import ConnectionPool, PoolTimeout

from src.adapters.repository.schema import CONSTRAINT_MESSAGES, validate_new_user
from src.domain.models import NewUser, User
from src.domain.ports import CreateResult

logger = logging.getLogger(__name__)

_USER_COLUMNS = "id, name, email, phone, birth_date, created_at"


def _row_to_user(row: tuple) -> User:
    return User(
        id=str(row[0]),
        name=row[1],
        email=row[2],
        phone=row[3],
        birth_date=row[4],
        created_at=row[5],
    )


class PostgresUserRepository:
    """
    Implements UserRepository protocol via psycopg3.

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

    def find_by_email(self, email: str) -> User | None:
        """
        Fetch a user by normalized email.

        Args:
            email: Normalized email address (lowercase, stripped)

        Returns:
            User if found, None otherwise
        """
        sql = f"SELECT {_USER_COLUMNS} FROM users WHERE email = %s"

        with self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute(sql, (email,))
            row = cursor.fetchone()

        return _row_to_user(row) if row is not None else None

    def create(self, new_user: NewUser) -> CreateResult:
        """
        Insert a new user row.

        Field rules are checked first so every failing field is reported
        together. The database then assigns id and created_at.

        Args:
            new_user: Normalized user data from the domain layer

        Returns:
            CREATED with the stored user,
            DUPLICATE_EMAIL on unique violation,
            INVALID with field messages on schema or CHECK failure
        """
        errors = validate_new_user(new_user)
        if errors:
            return CreateResult.invalid(errors)

        sql = f"""
            INSERT INTO users (name, email, phone, birth_date)
            VALUES (%s, %s, %s, %s)
            RETURNING {_USER_COLUMNS}
        """

        try:
            with self._pool.connection() as conn, conn.cursor() as cursor:
                cursor.execute(
                    sql,
                    (new_user.name, new_user.email, new_user.phone, new_user.birth_date),
                )
                row = cursor.fetchone()
                conn.commit()
        except UniqueViolation:
            logger.info("Duplicate email rejected by unique constraint")
            return CreateResult.duplicate_email()
        except CheckViolation as e:
            constraint = e.diag.constraint_name or ""
            message = CONSTRAINT_MESSAGES.get(constraint, f"constraint {constraint} violated")
            return CreateResult.invalid([message])

        return CreateResult.created(_row_to_user(row))

    def ping(self) -> bool:
        """Return True if the database answers a trivial query."""
        try:
            with self._pool.connection(timeout=2.0) as conn:
                conn.execute("SELECT 1")
        except (psycopg.Error, PoolTimeout) as e:
            logger.warning(f"Database ping failed: {e}")
            return False
        return True


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
