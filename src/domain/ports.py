"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interfaces (ports) that the domain requires
from infrastructure. Adapters implement these protocols.
"""

from dataclasses import dataclass, field
from datetime import timedelta
from enum import Enum
from typing import Any, Protocol

from .models import NewUser, User


class CreateOutcome(Enum):
    """
    Result kind of a store write.

    Used by create() to report success or a specific failure without
    raising, so the service never inspects driver exceptions.
    """

    CREATED = "created"
    DUPLICATE_EMAIL = "duplicate_email"
    INVALID = "invalid"


@dataclass(frozen=True)
class CreateResult:
    """Outcome of UserRepository.create()."""

    outcome: CreateOutcome
    user: User | None = None
    errors: list[str] = field(default_factory=list)

    @classmethod
    def created(cls, user: User) -> "CreateResult":
        return cls(CreateOutcome.CREATED, user=user)

    @classmethod
    def duplicate_email(cls) -> "CreateResult":
        return cls(CreateOutcome.DUPLICATE_EMAIL)

    @classmethod
    def invalid(cls, errors: list[str]) -> "CreateResult":
        return cls(CreateOutcome.INVALID, errors=list(errors))


class UserRepository(Protocol):
    """Port interface for user persistence."""

    def find_by_email(self, email: str) -> User | None:
        """
        Look up a user by normalized email.

        Args:
            email: Normalized email address (stripped, lowercase)

        Returns:
            The stored User, or None if no user has this email
        """
        ...

    def create(self, new_user: NewUser) -> CreateResult:
        """
        Persist a new user.

        The store owns email uniqueness: it must be enforced atomically at
        write time (unique index or equivalent), so concurrent writers for
        the same email produce exactly one CREATED result.

        Return values by scenario:
        - CREATED: user stored, result.user has id and created_at assigned
        - DUPLICATE_EMAIL: another user already holds this email
        - INVALID: a field failed store-side validation, result.errors
          holds one message per failing field

        Args:
            new_user: Normalized user data

        Returns:
            CreateResult describing the outcome
        """
        ...


class TokenIssuer(Protocol):
    """Port interface for credential signing."""

    def sign(self, claims: dict[str, Any], expires_in: timedelta) -> str:
        """
        Sign a claims payload into a time-limited token.

        Args:
            claims: Claims to bind into the token
            expires_in: Validity window from now

        Returns:
            Encoded token string
        """
        ...
