"""
core/auth.py – Authorization dependency for user-scoped routes.

UNCHECKED → AUTHORIZED (claims returned, also put on request.state.user)
          → REJECTED   (401 if the cookie is missing or fails verification)

The owner check (token email vs. `email` query param → 403) is separate and
called by the route after authentication succeeds.
"""
import logging
from typing import Any, Optional

from fastapi import Cookie, HTTPException, Request, status

from ..deps import get_tokens
from .tokens import InvalidToken

logger = logging.getLogger(__name__)


def require_user(request: Request, token: Optional[str] = Cookie(default=None)) -> dict[str, Any]:
    try:
        claims = get_tokens().verify(token)
    except InvalidToken as e:
        logger.debug(f"Rejected {request.url.path}: {e}")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="unauthorized access")
    request.state.user = claims
    return claims


def ensure_owner(claims: dict[str, Any], email: Optional[str]) -> None:
    """Authenticated email must equal the requested owner, else 403."""
    if not email or claims.get("email") != email:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="forbidden access")
