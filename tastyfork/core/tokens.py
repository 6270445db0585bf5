"""
core/tokens.py – TokenService class.
Signs and verifies HS256 JWTs carrying the user email. Stateless, no revocation list.
"""
import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

import jwt

logger = logging.getLogger(__name__)

TOKEN_LIFETIME = timedelta(hours=10)
ALGORITHM = "HS256"


class InvalidToken(Exception):
    """Token missing, malformed, badly signed or expired."""


class TokenService:
    def __init__(self, secret: str, lifetime: timedelta = TOKEN_LIFETIME) -> None:
        if not secret:
            logger.warning("ACCESS_TOKEN_SECRET is empty – tokens are trivially forgeable")
        self._secret   = secret
        self._lifetime = lifetime

    def issue(self, claims: dict[str, Any], now: Optional[datetime] = None) -> str:
        """Sign `claims` (the user object posted to /jwt) with iat/exp added."""
        issued_at = now or datetime.now(timezone.utc)
        payload = dict(claims)
        payload["iat"] = issued_at
        payload["exp"] = issued_at + self._lifetime
        return jwt.encode(payload, self._secret, algorithm=ALGORITHM)

    def verify(self, token: Optional[str]) -> dict[str, Any]:
        if not token:
            raise InvalidToken("token missing")
        try:
            return jwt.decode(token, self._secret, algorithms=[ALGORITHM])
        except jwt.PyJWTError as e:
            raise InvalidToken(str(e)) from e
