"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting domain services
into routes. Repositories are built once during app lifespan and kept
on app.state; tests swap them with app.dependency_overrides.
"""

from fastapi import Request

from src.domain.ports import WaitlistRepository
from src.domain.waitlist import WaitlistService


def get_waitlist_repository(request: Request) -> WaitlistRepository:
    """Get the waitlist repository from app state."""
    return request.app.state.waitlist_repository


def get_waitlist_service(request: Request) -> WaitlistService:
    """Create waitlist service with the injected repository."""
    return WaitlistService(repository=get_waitlist_repository(request))
