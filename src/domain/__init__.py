"""
Domain layer - Pure business logic with zero framework imports.

This package contains the waitlist signup rules and the user record
operations. It defines its own port interfaces for persistence, so
adapters can be swapped without touching the business logic.
"""

from .exceptions import (
    ConstraintViolation,
    EmailAlreadyRegistered,
    StoreUnavailable,
    UsernameTaken,
    WaitlistError,
)
from .ports import User, UserRepository, WaitlistRegistration, WaitlistRepository
from .users import UserService
from .waitlist import WaitlistService

__all__ = [
    "ConstraintViolation",
    "EmailAlreadyRegistered",
    "StoreUnavailable",
    "User",
    "UserRepository",
    "UserService",
    "UsernameTaken",
    "WaitlistError",
    "WaitlistRegistration",
    "WaitlistRepository",
    "WaitlistService",
]
