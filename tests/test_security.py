"""
Tests for password hashing and access-token helpers.
"""

import jwt
import pytest

from auth import security


class TestPasswords:
    def test_hash_then_verify(self):
        hashed = security.hash_password("birdbook123")
        assert hashed != "birdbook123"
        assert security.verify_password("birdbook123", hashed)

    def test_wrong_password_rejected(self):
        hashed = security.hash_password("birdbook123")
        assert not security.verify_password("birdbook124", hashed)

    def test_garbage_hash_rejected(self):
        assert not security.verify_password("birdbook123", "hashed_pw")

    def test_empty_password_cannot_be_hashed(self):
        with pytest.raises(security.AuthSecurityError):
            security.hash_password("")


class TestEmailFormat:
    @pytest.mark.parametrize("email", ["robin@example.com", "a.b@c.io"])
    def test_valid(self, email):
        assert security.is_valid_email(email)

    @pytest.mark.parametrize("email", ["robin", "robin@example", "ro bin@example.com", "@example.com", ""])
    def test_invalid(self, email):
        assert not security.is_valid_email(email)


class TestAccessTokens:
    def test_claims_round_trip(self):
        token = security.build_access_token(user_id=7, username="owl", email="owl@example.com")
        payload = security.decode_access_token(token)
        assert payload["sub"] == "7"
        assert payload["username"] == "owl"
        assert payload["email"] == "owl@example.com"
        assert payload["exp"] - payload["iat"] == security.access_token_expire_minutes() * 60
        assert security.user_id_from_claims(payload) == 7

    def test_expiry_from_env(self, monkeypatch):
        monkeypatch.setenv("ACCESS_TOKEN_EXPIRE_MIN", "5")
        token = security.build_access_token(user_id=1, username="robin", email="robin@example.com")
        payload = security.decode_access_token(token)
        assert payload["exp"] - payload["iat"] == 300

    def test_expired_token_rejected(self, monkeypatch):
        monkeypatch.setattr(security, "now_epoch_s", lambda: 1_000)
        token = security.build_access_token(user_id=1, username="robin", email="robin@example.com")
        with pytest.raises(security.AuthSecurityError, match="expired"):
            security.decode_access_token(token)

    def test_foreign_secret_rejected(self):
        token = jwt.encode({"sub": "1", "type": "access"}, "someone-else", algorithm="HS256")
        with pytest.raises(security.AuthSecurityError, match="Invalid"):
            security.decode_access_token(token)

    def test_non_access_token_rejected(self):
        token = jwt.encode({"sub": "1", "type": "refresh"}, security.jwt_secret(), algorithm="HS256")
        with pytest.raises(security.AuthSecurityError, match="not an access token"):
            security.decode_access_token(token)

    def test_non_numeric_subject_rejected(self):
        token = jwt.encode({"sub": "robin", "type": "access"}, security.jwt_secret(), algorithm="HS256")
        with pytest.raises(security.AuthSecurityError, match="subject"):
            security.decode_access_token(token)

    def test_empty_token_rejected(self):
        with pytest.raises(security.AuthSecurityError):
            security.decode_access_token("   ")
