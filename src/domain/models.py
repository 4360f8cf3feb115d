"""
Domain entities - User records as seen by the registration workflow.

Plain dataclasses only; persistence adapters map rows to these types.
"""

from dataclasses import dataclass
from datetime import date, datetime


@dataclass(frozen=True)
class NewUser:
    """Normalized user data submitted to the store for creation."""

    name: str
    email: str
    phone: str = ""
    birth_date: date | None = None


@dataclass(frozen=True)
class User:
    """
    A registered user.

    ``id`` and ``created_at`` are assigned by the store and never change.
    """

    id: str
    name: str
    email: str
    phone: str
    birth_date: date | None
    created_at: datetime
