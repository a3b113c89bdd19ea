"""
Port interfaces - Entities and protocol definitions for persistence.

This module defines the records the domain works with and the
interfaces (ports) it requires from infrastructure. Adapters
implement these protocols.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol


@dataclass(frozen=True)
class WaitlistRegistration:
    """A single waitlist signup, keyed uniquely by email."""

    id: str
    first_name: str
    last_name: str
    email: str
    created_at: datetime


@dataclass(frozen=True)
class User:
    """
    Application user.

    Not reachable from any route; kept for CRUD parity with the schema.
    ``password`` holds a bcrypt hash when created through UserService.
    """

    id: str
    username: str
    password: str


class WaitlistRepository(Protocol):
    """Port interface for waitlist persistence."""

    def find_by_email(self, email: str) -> WaitlistRegistration | None:
        """
        Look up a registration by exact email match.

        Returns:
            The registration, or None when no row matches
        """
        ...

    def insert(self, first_name: str, last_name: str, email: str) -> WaitlistRegistration:
        """
        Persist a new registration with a generated id and current timestamp.

        Raises:
            EmailAlreadyRegistered: If the unique constraint on email rejects the row
            StoreUnavailable: If the store cannot be reached
        """
        ...

    def count(self) -> int:
        """Return the total number of registrations (0 when empty)."""
        ...


class UserRepository(Protocol):
    """Port interface for user persistence."""

    def find_by_id(self, user_id: str) -> User | None: ...

    def find_by_username(self, username: str) -> User | None: ...

    def insert(self, username: str, password: str) -> User:
        """
        Persist a new user with a generated id.

        Raises:
            UsernameTaken: If the unique constraint on username rejects the row
            StoreUnavailable: If the store cannot be reached
        """
        ...
