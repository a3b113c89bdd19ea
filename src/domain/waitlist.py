"""
Waitlist domain service - Signup business rules.

One registration per email. The service pre-checks for an existing
row so the common duplicate case yields a clean conflict, but the
store's unique constraint is the source of truth: a concurrent insert
that wins the race between the check and the write surfaces from the
repository as the same EmailAlreadyRegistered.
"""

from dataclasses import dataclass

from .exceptions import EmailAlreadyRegistered
from .ports import WaitlistRegistration, WaitlistRepository


@dataclass
class WaitlistService:
    """Domain service for waitlist signups and the signup counter."""

    repository: WaitlistRepository

    def register(self, first_name: str, last_name: str, email: str) -> WaitlistRegistration:
        """
        Add a person to the waitlist.

        Args:
            first_name: Non-empty first name
            last_name: Non-empty last name
            email: Email address (will be normalized)

        Returns:
            The persisted registration

        Raises:
            EmailAlreadyRegistered: If the email is already on the waitlist
        """
        normalized_email = self._normalize_email(email)

        if self.repository.find_by_email(normalized_email) is not None:
            raise EmailAlreadyRegistered(normalized_email)

        return self.repository.insert(first_name.strip(), last_name.strip(), normalized_email)

    def count(self) -> int:
        """Return how many people have joined the waitlist."""
        return self.repository.count()

    def _normalize_email(self, email: str) -> str:
        """
        Normalize email address for consistent storage and lookup.

        Applies: strip whitespace + lowercase
        """
        return email.strip().lower()
