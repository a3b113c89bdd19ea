"""Repository adapters - Database and in-memory implementations."""

from .memory import InMemoryUserRepository, InMemoryWaitlistRepository
from .postgres import PostgresUserRepository, PostgresWaitlistRepository, run_migrations

__all__ = [
    "InMemoryUserRepository",
    "InMemoryWaitlistRepository",
    "PostgresUserRepository",
    "PostgresWaitlistRepository",
    "run_migrations",
]
