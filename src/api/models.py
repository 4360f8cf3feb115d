"""
API request and response models.

Pydantic models for FastAPI endpoint validation and OpenAPI schema generation.
Wire field names are camelCase (birthDate, createdAt); Python attributes
use snake_case via aliases.
"""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field

from src.domain.models import User


class RegisterRequest(BaseModel):
    """
    Request model for user registration.

    name and email are optional here so that missing values reach the
    domain service and produce a 400 rather than a schema error.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str | None = Field(None, description="Display name (required)")
    email: str | None = Field(None, description="Email address (required)")
    phone: str | None = Field(None, description="Phone number")
    birth_date: date | None = Field(None, alias="birthDate", description="Birth date (YYYY-MM-DD)")


class UserResponse(BaseModel):
    """Public view of a registered user."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    email: str
    phone: str
    birth_date: date | None = Field(None, alias="birthDate")
    created_at: datetime = Field(alias="createdAt")

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            phone=user.phone,
            birth_date=user.birth_date,
            created_at=user.created_at,
        )


class RegisterResponse(BaseModel):
    """Response model for successful registration."""

    success: bool = True
    message: str
    token: str
    user: UserResponse


class ErrorResponse(BaseModel):
    """Standard error response model."""

    success: bool = False
    message: str
    errors: list[str] | None = None


class HealthResponse(BaseModel):
    """Liveness probe payload."""

    status: str
    timestamp: datetime
    database: str
