"""
Auth business logic.
"""

from __future__ import annotations

import logging
from typing import Any

import asyncpg
from fastapi import HTTPException, status

from . import repository, schemas, security

MIN_USERNAME_LENGTH = 3
MIN_PASSWORD_LENGTH = 6
# bcrypt only hashes the first 72 bytes and rejects longer input.
MAX_PASSWORD_BYTES = 72

logger = logging.getLogger(__name__)


def _bad_request(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


def _invalid_credentials() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Invalid email or password",
    )


def _user_exists() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_409_CONFLICT,
        detail="User with this email or username already exists",
    )


async def register(payload: schemas.RegisterRequest) -> dict:
    username = (payload.username or "").strip()
    email = (payload.email or "").strip()
    password = payload.password or ""

    if not username or not email or not password:
        raise _bad_request("Username, email, and password are required")
    if not security.is_valid_email(email):
        raise _bad_request("Invalid email format")
    if len(password) < MIN_PASSWORD_LENGTH:
        raise _bad_request(f"Password must be at least {MIN_PASSWORD_LENGTH} characters long")
    if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise _bad_request(f"Password must be {MAX_PASSWORD_BYTES} bytes or less")
    if len(username) < MIN_USERNAME_LENGTH:
        raise _bad_request(f"Username must be at least {MIN_USERNAME_LENGTH} characters long")

    existing = await repository.find_user_by_username_or_email(username=username, email=email)
    if existing is not None:
        raise _user_exists()

    password_hash = security.hash_password(password)
    try:
        user_row = await repository.create_user(
            username=username,
            email=email,
            password_hash=password_hash,
        )
    except asyncpg.UniqueViolationError as exc:
        # A concurrent registration won the race for the same username/email.
        raise _user_exists() from exc

    logger.info("user_registered user_id=%s username=%s", user_row["id"], user_row["username"])
    return {
        "message": "Registration successful",
        "user": {
            "id": int(user_row["id"]),
            "username": str(user_row["username"]),
            "email": str(user_row["email"]),
            "createdAt": user_row["created_at"],
        },
    }


async def login(payload: schemas.LoginRequest) -> dict:
    email = (payload.email or "").strip()
    password = payload.password or ""

    if not email or not password:
        raise _bad_request("Email and password are required")
    if not security.is_valid_email(email):
        raise _bad_request("Invalid email format")

    user_row = await repository.get_user_by_email(email)
    if user_row is None:
        logger.info("login_failed reason=unknown_email")
        raise _invalid_credentials()

    is_valid = security.verify_password(password, str(user_row.get("password_hash") or ""))
    if not is_valid:
        logger.info("login_failed reason=bad_password user_id=%s", user_row["id"])
        raise _invalid_credentials()

    token = security.build_access_token(
        user_id=int(user_row["id"]),
        username=str(user_row["username"]),
        email=str(user_row["email"]),
    )
    logger.info("login_succeeded user_id=%s", user_row["id"])
    return {
        "message": "Login successful!",
        "token": token,
        "user": {
            "id": int(user_row["id"]),
            "username": str(user_row["username"]),
            "email": str(user_row["email"]),
            "bio": user_row.get("bio"),
            "createdAt": user_row["created_at"],
        },
    }


def decode_token_or_401(access_token: str) -> dict[str, Any]:
    try:
        return security.decode_access_token(access_token)
    except security.AuthSecurityError as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(exc),
        ) from exc


def verify_token(access_token: str) -> dict:
    """
    Confirm a token is valid and echo its identity claims.

    No database round-trip: the signature and expiry are the whole check.
    """
    try:
        payload = security.decode_access_token(access_token)
    except security.AuthSecurityError as exc:
        logger.info("token_rejected reason=%s", exc)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        ) from exc

    return {
        "user": {
            "id": security.user_id_from_claims(payload),
            "username": payload.get("username"),
            "email": payload.get("email"),
        }
    }


async def get_user_from_access_token(access_token: str) -> dict:
    payload = decode_token_or_401(access_token)

    user_row = await repository.get_user_by_id(security.user_id_from_claims(payload))
    if user_row is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found",
        )
    return user_row
