"""
Domain exceptions - Semantic error types for registration.

This module defines domain-specific exceptions that communicate
business rule violations without leaking infrastructure details.
"""


class RegistrationError(Exception):
    """Base class for registration domain errors."""

    pass


class InvalidRegistration(RegistrationError):
    """Missing or malformed fields, or store-reported validation errors."""

    def __init__(self, message: str, errors: list[str] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.errors = list(errors or [])


class EmailAlreadyRegistered(RegistrationError):
    """Another user already holds this email."""

    pass
