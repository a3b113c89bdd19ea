"""
Unit tests for UserService.

Users have no route; these cover the CRUD parity and password hashing.
"""

import re

import bcrypt
import pytest

from src.adapters.repository.memory import InMemoryUserRepository
from src.domain.exceptions import ConstraintViolation, UsernameTaken
from src.domain.users import UserService


@pytest.fixture
def service(user_repository: InMemoryUserRepository) -> UserService:
    # Lowest cost bcrypt accepts, keeps the suite fast
    return UserService(repository=user_repository, bcrypt_cost=4)


class TestCreateUser:
    def test_password_is_stored_as_bcrypt_hash(self, service: UserService) -> None:
        user = service.create_user("ada", "analytical-engine")

        assert user.password != "analytical-engine"
        assert re.match(r"^\$2[aby]\$04\$", user.password)
        assert bcrypt.checkpw(b"analytical-engine", user.password.encode())

    def test_generated_id(self, service: UserService) -> None:
        first = service.create_user("ada", "pw-one")
        second = service.create_user("grace", "pw-two")

        assert first.id and second.id
        assert first.id != second.id

    def test_duplicate_username_raises(self, service: UserService) -> None:
        service.create_user("ada", "pw-one")

        with pytest.raises(UsernameTaken):
            service.create_user("ada", "pw-two")

    def test_username_taken_is_constraint_violation(self) -> None:
        assert issubclass(UsernameTaken, ConstraintViolation)


class TestLookup:
    def test_get_user_by_id(self, service: UserService) -> None:
        created = service.create_user("ada", "pw")
        assert service.get_user(created.id) == created

    def test_get_user_by_username(self, service: UserService) -> None:
        created = service.create_user("ada", "pw")
        assert service.get_user_by_username("ada") == created

    def test_missing_user_is_none(self, service: UserService) -> None:
        assert service.get_user("does-not-exist") is None
        assert service.get_user_by_username("nobody") is None


class TestVerifyPassword:
    def test_correct_password(self, service: UserService) -> None:
        user = service.create_user("ada", "analytical-engine")
        assert service.verify_password(user, "analytical-engine") is True

    def test_wrong_password(self, service: UserService) -> None:
        user = service.create_user("ada", "analytical-engine")
        assert service.verify_password(user, "difference-engine") is False
