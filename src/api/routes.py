"""
API routes - Waitlist signup and counter endpoints.

This module defines the HTTP endpoints:
- POST /api/waitlist - Join the waitlist
- GET /api/waitlist/count - Number of people on the waitlist

Handlers are plain functions so FastAPI runs the blocking store calls
in its threadpool.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from src.api.dependencies import get_waitlist_service
from src.api.models import (
    ErrorResponse,
    RegistrationOut,
    ValidationErrorResponse,
    WaitlistCountResponse,
    WaitlistSignupRequest,
    WaitlistSignupResponse,
)
from src.domain.exceptions import EmailAlreadyRegistered
from src.domain.waitlist import WaitlistService

logger = logging.getLogger(__name__)

SIGNUP_SUCCESS_MESSAGE = "Successfully added to waitlist"
ALREADY_REGISTERED_MESSAGE = "This email is already registered for the waitlist"
INTERNAL_ERROR_MESSAGE = "Internal server error"

router = APIRouter(prefix="/api/waitlist", tags=["waitlist"])


@router.post(
    "",
    response_model=WaitlistSignupResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ValidationErrorResponse, "description": "Validation error"},
        409: {"model": ErrorResponse, "description": "Email already registered"},
        500: {"model": ErrorResponse, "description": "Unexpected failure"},
    },
    summary="Join the waitlist",
    description="Register a first name, last name and email. Each email can join once.",
)
def join_waitlist(
    request_data: WaitlistSignupRequest,
    service: WaitlistService = Depends(get_waitlist_service),
) -> WaitlistSignupResponse:
    """
    Add a person to the waitlist.

    - **firstName**: Non-empty first name
    - **lastName**: Non-empty last name
    - **email**: Valid email address, unique across the waitlist
    """
    try:
        registration = service.register(
            request_data.first_name, request_data.last_name, request_data.email
        )
    except EmailAlreadyRegistered:
        logger.info("Duplicate waitlist signup rejected")
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=ALREADY_REGISTERED_MESSAGE,
        ) from None
    except Exception:
        logger.exception("Error creating waitlist registration")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=INTERNAL_ERROR_MESSAGE,
        ) from None

    logger.info("Waitlist registration created: id=%s", registration.id)
    return WaitlistSignupResponse(
        message=SIGNUP_SUCCESS_MESSAGE,
        registration=RegistrationOut.from_domain(registration),
    )


@router.get(
    "/count",
    response_model=WaitlistCountResponse,
    responses={500: {"model": ErrorResponse, "description": "Unexpected failure"}},
    summary="Get waitlist count",
)
def waitlist_count(
    service: WaitlistService = Depends(get_waitlist_service),
) -> WaitlistCountResponse:
    """Return the number of registrations on the waitlist."""
    try:
        count = service.count()
    except Exception:
        logger.exception("Error getting waitlist count")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=INTERNAL_ERROR_MESSAGE,
        ) from None
    return WaitlistCountResponse(count=count)
