"""
API request and response models.

Pydantic models for FastAPI endpoint validation and OpenAPI schema generation.
Field names are snake_case in Python and camelCase on the wire.
"""

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from src.domain.ports import WaitlistRegistration


class WaitlistSignupRequest(BaseModel):
    """Request model for joining the waitlist."""

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    first_name: str = Field(..., alias="firstName", min_length=1, description="First name")
    last_name: str = Field(..., alias="lastName", min_length=1, description="Last name")
    email: EmailStr


class RegistrationOut(BaseModel):
    """Public view of a registration: caller-supplied fields plus the generated id."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    first_name: str = Field(..., alias="firstName")
    last_name: str = Field(..., alias="lastName")
    email: str

    @classmethod
    def from_domain(cls, registration: WaitlistRegistration) -> "RegistrationOut":
        return cls(
            id=registration.id,
            first_name=registration.first_name,
            last_name=registration.last_name,
            email=registration.email,
        )


class WaitlistSignupResponse(BaseModel):
    """Response model for a successful signup."""

    message: str
    registration: RegistrationOut


class WaitlistCountResponse(BaseModel):
    """Response model for the signup counter."""

    count: int


class FieldError(BaseModel):
    """A single field-level validation failure."""

    field: str
    message: str
    type: str


class ValidationErrorResponse(BaseModel):
    """Response model for rejected payloads (400)."""

    message: str
    errors: list[FieldError]


class ErrorResponse(BaseModel):
    """Standard error response model."""

    message: str
