"""
Auth API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Header, HTTPException, status

from . import dependencies, schemas, service

router = APIRouter(prefix="/api/auth")


@router.post("/register", status_code=status.HTTP_201_CREATED)
async def register(request: schemas.RegisterRequest | None = None) -> dict:
    return await service.register(request or schemas.RegisterRequest())


@router.post("/login")
async def login(request: schemas.LoginRequest | None = None) -> dict:
    return await service.login(request or schemas.LoginRequest())


@router.get("/verify-token")
async def verify_token(authorization: str | None = Header(default=None)) -> dict:
    try:
        token = dependencies.extract_bearer_token(authorization)
    except HTTPException as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        ) from exc
    return service.verify_token(token)
