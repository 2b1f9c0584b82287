"""
Signup/login endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from core.db import Database, get_db

from . import schemas, service

router = APIRouter()


@router.post("/signup", status_code=status.HTTP_201_CREATED)
async def signup(
    payload: schemas.SignupRequest,
    db: Database = Depends(get_db),
) -> schemas.SignupResponse:
    return await service.signup(db, payload)


@router.post("/login")
async def login(
    payload: schemas.LoginRequest,
    db: Database = Depends(get_db),
) -> schemas.LoginResponse:
    return await service.login(db, payload)
