"""
JWT token issuer adapter - Implements TokenIssuer protocol.

Signs claims with PyJWT using a shared secret from configuration.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Any

import jwt

logger = logging.getLogger(__name__)


class JwtTokenIssuer:
    """
    Implements TokenIssuer protocol via PyJWT.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(self, secret: str, algorithm: str = "HS256") -> None:
        """
        Initialize issuer with signing material.

        Args:
            secret: Shared signing secret (must be non-empty)
            algorithm: JWS algorithm name

        Raises:
            ValueError: If secret is empty
        """
        if not secret:
            raise ValueError("JWT secret must not be empty")
        self._secret = secret
        self._algorithm = algorithm

    def sign(self, claims: dict[str, Any], expires_in: timedelta) -> str:
        """
        Encode claims into a signed token valid for expires_in.

        Adds the standard iat and exp claims on top of the given ones.
        """
        now = datetime.now(timezone.utc)
        payload = {**claims, "iat": now, "exp": now + expires_in}
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)
