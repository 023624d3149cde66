"""Unit tests for the session token codec."""

from datetime import datetime, timedelta, timezone

import jwt as pyjwt
import pytest

from hive.config import AuthSettings
from hive.util.jwt import (
    BadSignatureError,
    ExpiredTokenError,
    JWTError,
    MalformedTokenError,
    create_token,
    verify_token,
)

SETTINGS = AuthSettings(jwt_secret="test-secret")


class TestCreateToken:
    """Tests for create_token."""

    def test_token_carries_email_and_seven_day_expiry(self):
        issued_at = datetime.now(timezone.utc)

        token = create_token("alice@example.com", SETTINGS, issued_at=issued_at)
        payload = verify_token(token, SETTINGS)

        assert payload.email == "alice@example.com"
        expected = issued_at + timedelta(days=7)
        assert abs((payload.exp - expected).total_seconds()) < 1

    def test_token_is_hs256(self):
        token = create_token("alice@example.com", SETTINGS)

        header = pyjwt.get_unverified_header(token)

        assert header["alg"] == "HS256"


class TestVerifyToken:
    """Tests for verify_token failure modes."""

    def test_token_older_than_seven_days_reports_expiry(self):
        """An expired credential fails with an expiry error, not a signature error."""
        issued_at = datetime.now(timezone.utc) - timedelta(days=8)
        token = create_token("alice@example.com", SETTINGS, issued_at=issued_at)

        with pytest.raises(ExpiredTokenError):
            verify_token(token, SETTINGS)

    def test_token_signed_with_another_secret_reports_bad_signature(self):
        token = create_token("alice@example.com", AuthSettings(jwt_secret="other"))

        with pytest.raises(BadSignatureError):
            verify_token(token, SETTINGS)

    def test_garbage_is_malformed(self):
        with pytest.raises(MalformedTokenError):
            verify_token("not-a-token", SETTINGS)

    def test_token_without_email_is_malformed(self):
        exp = datetime.now(timezone.utc) + timedelta(days=1)
        token = pyjwt.encode({"exp": exp}, "test-secret", algorithm="HS256")

        with pytest.raises(MalformedTokenError):
            verify_token(token, SETTINGS)

    @pytest.mark.parametrize(
        "error_type", [ExpiredTokenError, BadSignatureError, MalformedTokenError]
    )
    def test_failures_share_a_base_class(self, error_type):
        assert issubclass(error_type, JWTError)
