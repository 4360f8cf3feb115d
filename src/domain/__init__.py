"""
Domain layer - Pure business logic with zero framework imports.

This package contains the core business logic for user registration and
credential issuance. It defines its own port interfaces for infrastructure
abstraction, ensuring true hexagonal architecture decoupling.
"""

from .exceptions import EmailAlreadyRegistered, InvalidRegistration, RegistrationError
from .models import NewUser, User
from .ports import CreateOutcome, CreateResult, TokenIssuer, UserRepository
from .registration import RegistrationResult, RegistrationService

__all__ = [
    "CreateOutcome",
    "CreateResult",
    "EmailAlreadyRegistered",
    "InvalidRegistration",
    "NewUser",
    "RegistrationError",
    "RegistrationResult",
    "RegistrationService",
    "TokenIssuer",
    "User",
    "UserRepository",
]
