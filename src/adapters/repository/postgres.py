"""
PostgreSQL repository adapters - Implement the domain persistence ports.

This module provides the PostgreSQL implementations of the domain's
WaitlistRepository and UserRepository ports using psycopg3 with raw SQL.

Error translation:
- psycopg.errors.UniqueViolation on insert becomes the matching domain
  ConstraintViolation (EmailAlreadyRegistered / UsernameTaken). This is
  what keeps concurrent duplicate signups to a single row.
- Any other psycopg.Error, pool timeouts included, becomes StoreUnavailable.
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

import psycopg
from psycopg.errors import UniqueViolation
from psycopg_pool import ConnectionPool

from src.domain.exceptions import EmailAlreadyRegistered, StoreUnavailable, UsernameTaken
from src.domain.ports import User, WaitlistRegistration

logger = logging.getLogger(__name__)

_REGISTRATION_COLUMNS = "id, first_name, last_name, email, created_at"
_USER_COLUMNS = "id, username, password"


@contextmanager
def _store_errors(operation: str) -> Iterator[None]:
    """Convert driver-level failures into StoreUnavailable."""
    try:
        yield
    except psycopg.Error as e:
        logger.error("Database error during %s: %s", operation, e.__class__.__name__)
        raise StoreUnavailable(operation) from e


def _to_registration(row: tuple) -> WaitlistRegistration:
    return WaitlistRegistration(
        id=str(row[0]),
        first_name=row[1],
        last_name=row[2],
        email=row[3],
        created_at=row[4],
    )


def _to_user(row: tuple) -> User:
    return User(id=str(row[0]), username=row[1], password=row[2])


class PostgresWaitlistRepository:
    """
    Implements WaitlistRepository protocol via psycopg3.

    Uses structural subtyping - no explicit inheritance from Protocol.
    Stateless apart from the pool; safe to share across requests.
    """

    def __init__(self, pool: ConnectionPool) -> None:
        """
        Initialize repository with connection pool.

        Args:
            pool: psycopg3 ConnectionPool for database connections
        """
        self._pool = pool

    def find_by_email(self, email: str) -> WaitlistRegistration | None:
        sql = f"SELECT {_REGISTRATION_COLUMNS} FROM waitlist_registrations WHERE email = %s"

        with _store_errors("find_by_email"):
            with self._pool.connection() as conn, conn.cursor() as cursor:
                cursor.execute(sql, (email,))
                row = cursor.fetchone()

        return _to_registration(row) if row is not None else None

    def insert(self, first_name: str, last_name: str, email: str) -> WaitlistRegistration:
        """
        Insert a registration, letting the database generate id and created_at.

        Raises:
            EmailAlreadyRegistered: If the UNIQUE(email) constraint fires
            StoreUnavailable: On any other database failure
        """
        sql = f"""
            INSERT INTO waitlist_registrations (first_name, last_name, email)
            VALUES (%s, %s, %s)
            RETURNING {_REGISTRATION_COLUMNS}
        """

        with _store_errors("insert registration"):
            try:
                with self._pool.connection() as conn, conn.cursor() as cursor:
                    cursor.execute(sql, (first_name, last_name, email))
                    row = cursor.fetchone()
                    conn.commit()
            except UniqueViolation:
                raise EmailAlreadyRegistered(email) from None

        return _to_registration(row)

    def count(self) -> int:
        with _store_errors("count"):
            with self._pool.connection() as conn, conn.cursor() as cursor:
                cursor.execute("SELECT COUNT(*) FROM waitlist_registrations")
                row = cursor.fetchone()

        return int(row[0]) if row is not None else 0


class PostgresUserRepository:
    """Implements UserRepository protocol via psycopg3."""

    def __init__(self, pool: ConnectionPool) -> None:
        self._pool = pool

    def find_by_id(self, user_id: str) -> User | None:
        sql = f"SELECT {_USER_COLUMNS} FROM users WHERE id::text = %s"

        with _store_errors("find_user_by_id"):
            with self._pool.connection() as conn, conn.cursor() as cursor:
                cursor.execute(sql, (user_id,))
                row = cursor.fetchone()

        return _to_user(row) if row is not None else None

    def find_by_username(self, username: str) -> User | None:
        sql = f"SELECT {_USER_COLUMNS} FROM users WHERE username = %s"

        with _store_errors("find_user_by_username"):
            with self._pool.connection() as conn, conn.cursor() as cursor:
                cursor.execute(sql, (username,))
                row = cursor.fetchone()

        return _to_user(row) if row is not None else None

    def insert(self, username: str, password: str) -> User:
        sql = f"""
            INSERT INTO users (username, password)
            VALUES (%s, %s)
            RETURNING {_USER_COLUMNS}
        """

        with _store_errors("insert user"):
            try:
                with self._pool.connection() as conn, conn.cursor() as cursor:
                    cursor.execute(sql, (username, password))
                    row = cursor.fetchone()
                    conn.commit()
            except UniqueViolation:
                raise UsernameTaken(username) from None

        return _to_user(row)


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
        logger.warning("Migrations directory not found: %s", migrations_dir)
        return

    sql_files = sorted(migrations_dir.glob("*.sql"))

    if not sql_files:
        logger.info("No migration files found")
        return

    logger.info("Running %d migration(s)", len(sql_files))

    for sql_file in sql_files:
        logger.info("Executing migration: %s", sql_file.name)
        try:
            sql_content = sql_file.read_text()

            with pool.connection() as conn:
                conn.execute(sql_content)

            logger.info("Migration complete: %s", sql_file.name)
        except Exception as e:
            logger.error("Migration failed: %s - %s", sql_file.name, e)
            raise RuntimeError(f"Database migration failed: {sql_file.name}") from e
