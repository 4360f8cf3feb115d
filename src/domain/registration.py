"""
Registration domain service - signup and credential issuance.

This module contains the core business logic for user registration:
field validation, normalization, duplicate detection and token issuance.

Registration Flow
=================

1. Required fields: name and email must be present and non-blank
2. Email shape: local@domain.tld, no whitespace, exactly one '@'
3. Normalization: email stripped + lowercased, name stripped
4. Fast-path duplicate check against the store
5. Store write (the store's uniqueness constraint is authoritative)
6. Sign a 24-hour token carrying the new user's id

The duplicate check in step 4 is only an optimization. Two concurrent
requests for the same email can both pass it; the store then accepts
exactly one write and reports DUPLICATE_EMAIL for the other.
"""

import re
from dataclasses import dataclass
from datetime import date, timedelta

from .exceptions import EmailAlreadyRegistered, InvalidRegistration
from .models import NewUser, User
from .ports import CreateOutcome, TokenIssuer, UserRepository

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")

TOKEN_TTL = timedelta(hours=24)


@dataclass(frozen=True)
class RegistrationResult:
    """Stored user plus the credential issued for it."""

    user: User
    token: str


@dataclass
class RegistrationService:
    """
    Domain service for user registration.

    Orchestrates the registration flow: validation, normalization,
    persistence and token issuance.
    """

    repository: UserRepository
    token_issuer: TokenIssuer

    def register(
        self,
        name: str | None,
        email: str | None,
        phone: str | None = None,
        birth_date: date | None = None,
    ) -> RegistrationResult:
        """
        Register a new user and issue a credential for it.

        Args:
            name: Display name (will be stripped)
            email: Email address (will be normalized)
            phone: Optional phone number, stored as "" when absent
            birth_date: Optional birth date

        Returns:
            RegistrationResult with the stored user and signed token

        Raises:
            InvalidRegistration: Missing/malformed fields or store validation failure
            EmailAlreadyRegistered: Email is already held by another user
        """
        if not name or not name.strip() or not email:
            raise InvalidRegistration("Name and email are required")

        if not EMAIL_PATTERN.fullmatch(email):
            raise InvalidRegistration("Email format is invalid")

        normalized_email = self._normalize_email(email)

        if self.repository.find_by_email(normalized_email) is not None:
            raise EmailAlreadyRegistered(normalized_email)

        new_user = NewUser(
            name=name.strip(),
            email=normalized_email,
            phone=phone or "",
            birth_date=birth_date or None,
        )
        result = self.repository.create(new_user)

        if result.outcome is CreateOutcome.DUPLICATE_EMAIL:
            raise EmailAlreadyRegistered(normalized_email)
        if result.outcome is CreateOutcome.INVALID:
            raise InvalidRegistration("Validation error", result.errors)

        user = result.user
        token = self.token_issuer.sign({"userId": user.id}, TOKEN_TTL)
        return RegistrationResult(user=user, token=token)

    def _normalize_email(self, email: str) -> str:
        """
        Normalize email address for consistent storage and lookup.

        Applies: strip whitespace + lowercase
        """
        return email.strip().lower()
