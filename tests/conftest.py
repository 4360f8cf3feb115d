"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- In-memory repository and JWT issuer
- A registration service wired to both
"""

import pytest

from src.adapters.repository.memory import InMemoryUserRepository
from src.adapters.token.jwt_issuer import JwtTokenIssuer
from src.domain.registration import RegistrationService

TEST_JWT_SECRET = "test-secret-for-signing-tokens-0123456789"


@pytest.fixture
def memory_repository() -> InMemoryUserRepository:
    """Fresh in-memory user store per test."""
    return InMemoryUserRepository()


@pytest.fixture
def jwt_secret() -> str:
    """Signing secret shared by the test issuer."""
    return TEST_JWT_SECRET


@pytest.fixture
def token_issuer(jwt_secret: str) -> JwtTokenIssuer:
    """JWT issuer with a fixed test secret."""
    return JwtTokenIssuer(jwt_secret)


@pytest.fixture
def service(
    memory_repository: InMemoryUserRepository, token_issuer: JwtTokenIssuer
) -> RegistrationService:
    """Registration service backed by the in-memory store."""
    return RegistrationService(repository=memory_repository, token_issuer=token_issuer)
