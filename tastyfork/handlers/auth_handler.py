"""
handlers/auth_handler.py – AuthHandler class.
Responsibility: issue the token cookie on login, clear it on logout.
"""
import logging
from fastapi import Response

from ..core.settings import Settings
from ..core.tokens import TokenService
from ..models import UserClaims, SuccessResponse

logger = logging.getLogger(__name__)

COOKIE_NAME = "token"


class AuthHandler:
    """Handles /jwt and /logout."""

    def __init__(self, tokens: TokenService, settings: Settings) -> None:
        self._tokens   = tokens
        self._settings = settings

    def login(self, user: UserClaims, response: Response) -> SuccessResponse:
        token = self._tokens.issue(user.model_dump())
        response.set_cookie(COOKIE_NAME, token, **self._cookie_options())
        logger.info(f"Issued token for {user.email}")
        return SuccessResponse()

    def logout(self, response: Response) -> SuccessResponse:
        """Only drops the cookie; the token stays valid until it expires."""
        response.delete_cookie(COOKIE_NAME, **self._cookie_options())
        return SuccessResponse()

    def _cookie_options(self) -> dict:
        prod = self._settings.is_production
        return {
            "httponly": True,
            "secure":   prod,
            "samesite": "none" if prod else "strict",
        }
