"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- In-memory repositories and services
- A PostgreSQL pool (tests needing it are skipped when no database is reachable)
"""

from collections.abc import Generator

import pytest
from psycopg_pool import ConnectionPool, PoolTimeout

from src.adapters.repository.memory import InMemoryUserRepository, InMemoryWaitlistRepository
from src.adapters.repository.postgres import run_migrations
from src.config.settings import get_settings
from src.domain.waitlist import WaitlistService


@pytest.fixture
def waitlist_repository() -> InMemoryWaitlistRepository:
    """Fresh in-memory waitlist store for each test."""
    return InMemoryWaitlistRepository()


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    """Fresh in-memory user store for each test."""
    return InMemoryUserRepository()


@pytest.fixture
def waitlist_service(waitlist_repository: InMemoryWaitlistRepository) -> WaitlistService:
    """Waitlist service wired to the in-memory store."""
    return WaitlistService(repository=waitlist_repository)


@pytest.fixture(scope="session")
def postgres_pool() -> Generator[ConnectionPool, None, None]:
    """
    Connection pool against DATABASE_URL with migrations applied.

    Skips the requesting test when PostgreSQL is not reachable.
    """
    settings = get_settings()
    pool = ConnectionPool(
        conninfo=settings.database_url,
        min_size=1,
        max_size=10,
        open=False,
    )
    try:
        pool.open(wait=True, timeout=3.0)
    except PoolTimeout:
        pool.close()
        pytest.skip("PostgreSQL is not reachable")

    run_migrations(pool)
    yield pool
    pool.close()


@pytest.fixture
def clean_postgres(postgres_pool: ConnectionPool) -> Generator[ConnectionPool, None, None]:
    """Empty both tables before each test that uses the database."""
    with postgres_pool.connection() as conn:
        conn.execute("DELETE FROM waitlist_registrations")
        conn.execute("DELETE FROM users")
        conn.commit()
    yield postgres_pool
