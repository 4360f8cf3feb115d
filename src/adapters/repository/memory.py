"""
In-memory repository adapter - Implements UserRepository protocol.

Keeps users in a dict keyed by email. A lock around create() makes the
uniqueness check and the insert one step, matching the guarantee the
Postgres UNIQUE constraint gives. Used by tests and local demos.
"""

import threading
import uuid
from datetime import datetime, timezone

from src.adapters.repository.schema import validate_new_user
from src.domain.models import NewUser, User
from src.domain.ports import CreateResult


class InMemoryUserRepository:
    """
    Implements UserRepository protocol with process-local storage.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(self) -> None:
        self._users: dict[str, User] = {}
        self._lock = threading.Lock()

    def find_by_email(self, email: str) -> User | None:
        return self._users.get(email)

    def create(self, new_user: NewUser) -> CreateResult:
        errors = validate_new_user(new_user)
        if errors:
            return CreateResult.invalid(errors)

        with self._lock:
            if new_user.email in self._users:
                return CreateResult.duplicate_email()

            user = User(
                id=uuid.uuid4().hex,
                name=new_user.name,
                email=new_user.email,
                phone=new_user.phone,
                birth_date=new_user.birth_date,
                created_at=datetime.now(timezone.utc),
            )
            self._users[user.email] = user

        return CreateResult.created(user)

    def __len__(self) -> int:
        return len(self._users)
