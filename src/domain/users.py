"""
User domain service.

Basic create/lookup operations for the users table. No route exposes
these; passwords are only ever stored as bcrypt hashes.
"""

from dataclasses import dataclass

import bcrypt

from .ports import User, UserRepository


@dataclass
class UserService:
    """Domain service for user records."""

    repository: UserRepository
    bcrypt_cost: int = 10

    def create_user(self, username: str, password: str) -> User:
        """
        Create a user with a hashed password.

        Raises:
            UsernameTaken: If the username is already in use
        """
        return self.repository.insert(username.strip(), self._hash_password(password))

    def get_user(self, user_id: str) -> User | None:
        return self.repository.find_by_id(user_id)

    def get_user_by_username(self, username: str) -> User | None:
        return self.repository.find_by_username(username.strip())

    def verify_password(self, user: User, password: str) -> bool:
        """Check a plaintext password against the stored hash (constant-time)."""
        return bcrypt.checkpw(password.encode(), user.password.encode())

    def _hash_password(self, password: str) -> str:
        return bcrypt.hashpw(password.encode(), bcrypt.gensalt(rounds=self.bcrypt_cost)).decode()
