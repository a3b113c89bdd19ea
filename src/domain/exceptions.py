"""
Domain exceptions - Semantic error types for the waitlist.

This module defines domain-specific exceptions that communicate
business rule violations without leaking infrastructure details.
"""


class WaitlistError(Exception):
    """Base class for waitlist domain errors."""

    pass


class ConstraintViolation(WaitlistError):
    """A uniqueness rule rejected the write."""

    pass


class EmailAlreadyRegistered(ConstraintViolation):
    """Email already has a waitlist registration."""

    pass


class UsernameTaken(ConstraintViolation):
    """Username belongs to an existing user."""

    pass


class StoreUnavailable(WaitlistError):
    """The backing store could not complete the operation."""

    pass
