"""
tests/test_tokens.py – Unit tests for TokenService.
Scenarios: issue/verify round trip, expiry, bad signature, missing token.
"""
import pytest
from datetime import datetime, timedelta, timezone

import jwt

from tastyfork.core.tokens import TokenService, InvalidToken, TOKEN_LIFETIME


class TestIssue:
    def test_claims_survive(self, tokens):
        claims = tokens.verify(tokens.issue({"email": "a@test.com", "name": "A"}))
        assert claims["email"] == "a@test.com"
        assert claims["name"] == "A"

    def test_expiry_is_ten_hours(self, tokens):
        claims = tokens.verify(tokens.issue({"email": "a@test.com"}))
        assert claims["exp"] - claims["iat"] == int(TOKEN_LIFETIME.total_seconds())
        assert TOKEN_LIFETIME == timedelta(hours=10)

    def test_input_not_mutated(self, tokens):
        user = {"email": "a@test.com"}
        tokens.issue(user)
        assert user == {"email": "a@test.com"}


class TestVerify:
    @pytest.mark.parametrize("token", [None, "", "not-a-jwt", "a.b.c"])
    def test_missing_or_malformed(self, tokens, token):
        with pytest.raises(InvalidToken):
            tokens.verify(token)

    def test_expired(self, tokens):
        past = datetime.now(timezone.utc) - timedelta(hours=11)
        with pytest.raises(InvalidToken):
            tokens.verify(tokens.issue({"email": "a@test.com"}, now=past))

    def test_still_valid_before_expiry(self, tokens):
        past = datetime.now(timezone.utc) - timedelta(hours=9)
        assert tokens.verify(tokens.issue({"email": "a@test.com"}, now=past))["email"] == "a@test.com"

    def test_wrong_secret(self, tokens):
        forged = TokenService("other-secret").issue({"email": "a@test.com"})
        with pytest.raises(InvalidToken):
            tokens.verify(forged)

    def test_algorithm_none_rejected(self, tokens):
        unsigned = jwt.encode({"email": "a@test.com"}, key=None, algorithm="none")
        with pytest.raises(InvalidToken):
            tokens.verify(unsigned)
