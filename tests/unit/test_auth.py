"""Unit tests for authentication functions."""
from datetime import datetime, timedelta, timezone

import pytest
from fastapi import HTTPException
from jose import jwt

from hotel_common.auth import (
    authenticate_user,
    create_access_token,
    decode_token,
    get_password_hash,
    token_for,
    verify_password,
)
from hotel_common.config import get_settings
from hotel_common.models import RoleEnum
from hotel_common.repositories import InMemoryUserRepository


@pytest.fixture()
def users():
    repo = InMemoryUserRepository()
    repo.add(
        {
            "full_name": "Test Guest",
            "email": "guest@example.com",
            "phone": "",
            "role": RoleEnum.CUSTOMER,
            "hashed_password": get_password_hash("TestPass123"),
        }
    )
    return repo


class TestPasswordHashing:
    """Test password hashing and verification."""

    def test_password_hash_and_verify(self):
        password = "MySecurePassword123!"
        hashed = get_password_hash(password)

        assert hashed != password
        assert verify_password(password, hashed) is True
        assert verify_password("WrongPassword", hashed) is False

    def test_same_password_different_hashes(self):
        """The salt makes every hash unique."""
        hash1 = get_password_hash("TestPassword123")
        hash2 = get_password_hash("TestPassword123")

        assert hash1 != hash2
        assert verify_password("TestPassword123", hash1) is True
        assert verify_password("TestPassword123", hash2) is True


class TestJWTTokens:
    """Test JWT token creation and decoding."""

    def test_create_access_token(self):
        settings = get_settings()
        token = create_access_token({"sub": "7", "role": "staff"})

        decoded = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
        assert decoded["sub"] == "7"
        assert decoded["role"] == "staff"
        assert decoded["exp"] > datetime.now(timezone.utc).timestamp()

    def test_token_for_user_carries_id_and_role(self, users):
        user = users.get_by_email("guest@example.com")
        decoded = decode_token(token_for(user))

        assert decoded["sub"] == str(user.id)
        assert decoded["email"] == "guest@example.com"
        assert decoded["role"] == "customer"

    def test_decode_token_invalid(self):
        with pytest.raises(HTTPException) as exc_info:
            decode_token("invalid.token.here")

        assert exc_info.value.status_code == 401
        assert "Invalid token" in str(exc_info.value.detail)

    def test_decode_token_expired(self):
        token = create_access_token({"sub": "1"}, timedelta(hours=-1))

        with pytest.raises(HTTPException) as exc_info:
            decode_token(token)

        assert exc_info.value.status_code == 401


class TestUserAuthentication:
    """Test login credential checks against a user repository."""

    def test_authenticate_user_success(self, users):
        result = authenticate_user(users, "guest@example.com", "TestPass123")

        assert result is not None
        assert result.email == "guest@example.com"
        assert result.id == 1

    def test_authenticate_user_wrong_password(self, users):
        assert authenticate_user(users, "guest@example.com", "WrongPassword") is None

    def test_authenticate_user_not_found(self, users):
        assert authenticate_user(users, "nobody@example.com", "anypassword") is None

    def test_email_lookup_is_case_sensitive(self, users):
        assert authenticate_user(users, "Guest@example.com", "TestPass123") is None
