"""
In-memory repository adapters - Implement the domain persistence ports.

Dict-backed stores for local development (STORAGE_BACKEND=memory) and
tests. A lock serializes check-and-write so uniqueness holds under
concurrent requests, mirroring the database UNIQUE constraints.
Nothing survives a process restart.
"""

import threading
import uuid
from datetime import datetime, timezone

from src.domain.exceptions import EmailAlreadyRegistered, UsernameTaken
from src.domain.ports import User, WaitlistRegistration


class InMemoryWaitlistRepository:
    """Implements WaitlistRepository protocol with a process-local dict."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._by_email: dict[str, WaitlistRegistration] = {}

    def find_by_email(self, email: str) -> WaitlistRegistration | None:
        with self._lock:
            return self._by_email.get(email)

    def insert(self, first_name: str, last_name: str, email: str) -> WaitlistRegistration:
        with self._lock:
            if email in self._by_email:
                raise EmailAlreadyRegistered(email)
            registration = WaitlistRegistration(
                id=str(uuid.uuid4()),
                first_name=first_name,
                last_name=last_name,
                email=email,
                created_at=datetime.now(timezone.utc),
            )
            self._by_email[email] = registration
            return registration

    def count(self) -> int:
        with self._lock:
            return len(self._by_email)


class InMemoryUserRepository:
    """Implements UserRepository protocol with a process-local dict."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._by_id: dict[str, User] = {}

    def find_by_id(self, user_id: str) -> User | None:
        with self._lock:
            return self._by_id.get(user_id)

    def find_by_username(self, username: str) -> User | None:
        with self._lock:
            return next((u for u in self._by_id.values() if u.username == username), None)

    def insert(self, username: str, password: str) -> User:
        with self._lock:
            if any(u.username == username for u in self._by_id.values()):
                raise UsernameTaken(username)
            user = User(id=str(uuid.uuid4()), username=username, password=password)
            self._by_id[user.id] = user
            return user
