"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting
domain services and infrastructure adapters into routes.
"""

from fastapi import Request
from psycopg_pool import ConnectionPool

from src.adapters.repository.postgres import PostgresUserRepository
from src.adapters.token.jwt_issuer import JwtTokenIssuer
from src.domain.registration import RegistrationService


def get_pool(request: Request) -> ConnectionPool:
    """
    Get connection pool from app state.

    The pool is created during app lifespan startup and stored in app.state.
    """
    return request.app.state.pool


def get_repository(request: Request) -> PostgresUserRepository:
    """Create repository with connection pool from app state."""
    pool = get_pool(request)
    return PostgresUserRepository(pool)


def get_token_issuer(request: Request) -> JwtTokenIssuer:
    """
    Get token issuer from app state.

    The issuer is built once at startup, after the JWT secret is validated.
    """
    return request.app.state.token_issuer


def get_registration_service(request: Request) -> RegistrationService:
    """
    Create registration service with injected dependencies.

    Wires together the repository and token issuer for the domain service.
    """
    repository = get_repository(request)
    token_issuer = get_token_issuer(request)
    return RegistrationService(repository=repository, token_issuer=token_issuer)
