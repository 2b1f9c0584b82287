"""
Movie API schemas.
"""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel


class MovieCreate(BaseModel):
    title: str
    description: str | None = None
    duration: int | None = None
    language: str | None = None
    genre: str | None = None
    release_date: date | None = None
    rating: float | None = None
    poster_url: str | None = None
    trailer_url: str | None = None


class MovieUpdate(MovieCreate):
    is_active: bool = True
