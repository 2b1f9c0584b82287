"""
User persistence helpers.
"""

from __future__ import annotations

from core.db import Database


def normalize_email(email: str) -> str:
    return (email or "").strip().lower()


async def get_user_by_email(db: Database, email: str) -> dict | None:
    return await db.fetch_one(
        """
        SELECT id, email, password, name, phone
        FROM users
        WHERE lower(email) = lower($1)
        """,
        normalize_email(email),
    )


async def create_user(
    db: Database,
    *,
    email: str,
    password_hash: str,
    name: str | None = None,
    phone: str | None = None,
) -> dict:
    row = await db.fetch_one(
        """
        INSERT INTO users (email, password, name, phone)
        VALUES ($1, $2, $3, $4)
        RETURNING id, email, name
        """,
        normalize_email(email),
        password_hash,
        name,
        phone,
    )
    if row is None:
        raise RuntimeError("Failed to create user.")
    return row
