"""
Signup and login business logic.
"""

from __future__ import annotations

from fastapi import HTTPException, status

from core.db import Database
from core.errors import store_errors

from . import repository, schemas, security


def _to_user_response(user_row: dict) -> schemas.UserResponse:
    return schemas.UserResponse(
        id=int(user_row["id"]),
        email=str(user_row["email"]),
        name=user_row.get("name"),
    )


async def signup(db: Database, payload: schemas.SignupRequest) -> schemas.SignupResponse:
    async with store_errors("signup", email=repository.normalize_email(payload.email)):
        existing = await repository.get_user_by_email(db, payload.email)
        if existing is not None:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="User already exists",
            )

        password_hash = security.hash_password(payload.password)
        user_row = await repository.create_user(
            db,
            email=payload.email,
            password_hash=password_hash,
            name=payload.name,
            phone=payload.phone,
        )

    return schemas.SignupResponse(user=_to_user_response(user_row))


async def login(db: Database, payload: schemas.LoginRequest) -> schemas.LoginResponse:
    async with store_errors("login", email=repository.normalize_email(payload.email)):
        user_row = await repository.get_user_by_email(db, payload.email)

    if user_row is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password",
        )

    is_valid = security.verify_password(payload.password, str(user_row.get("password") or ""))
    if not is_valid:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password",
        )

    user = _to_user_response(user_row)
    access_token = security.build_access_token(user_id=user.id, email=user.email)
    return schemas.LoginResponse(user=user, access_token=access_token)
