"""
Users API routes.

Defines the registration endpoint and maps domain errors to HTTP responses.
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from src.api.dependencies import get_registration_service
from src.api.models import ErrorResponse, RegisterRequest, RegisterResponse, UserResponse
from src.domain.exceptions import EmailAlreadyRegistered, InvalidRegistration
from src.domain.registration import RegistrationService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["users"])


def error_response(status_code: int, message: str, errors: list[str] | None = None) -> JSONResponse:
    """Build the JSON error body shared by all failure responses."""
    body = ErrorResponse(message=message, errors=errors or None)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse, "description": "Missing or invalid fields"},
        409: {"model": ErrorResponse, "description": "Email already registered"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
    summary="Register a new user",
    description="Create a user from name, email and optional phone/birthDate. "
    "Returns the stored user and a signed token valid for 24 hours.",
)
async def register(
    request_data: RegisterRequest,
    service: RegistrationService = Depends(get_registration_service),
) -> RegisterResponse | JSONResponse:
    """
    Register a new user and issue a token.

    - **name**: Display name (required)
    - **email**: Email address, unique per user (required)
    - **phone**: Phone number (optional)
    - **birthDate**: Birth date, YYYY-MM-DD (optional)
    """
    try:
        result = service.register(
            request_data.name,
            request_data.email,
            phone=request_data.phone,
            birth_date=request_data.birth_date,
        )
    except InvalidRegistration as e:
        return error_response(status.HTTP_400_BAD_REQUEST, e.message, e.errors)
    except EmailAlreadyRegistered:
        return error_response(status.HTTP_409_CONFLICT, "Email is already registered")
    except Exception:
        logger.exception("Unexpected error during registration")
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error while registering user"
        )

    logger.info("Registered user %s", result.user.id)
    return RegisterResponse(
        message="User registered successfully",
        token=result.token,
        user=UserResponse.from_user(result.user),
    )
