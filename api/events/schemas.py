"""
Event and event-show API schemas.
"""

from __future__ import annotations

from datetime import date, time
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, Field


class EventCreate(BaseModel):
    title: str
    description: str | None = None
    duration: int | None = None
    language: str | None = None
    genre: str | None = None
    event_date: date | None = None
    event_time: time | None = None
    rating: float | None = None
    poster_url: str | None = None
    trailer_url: str | None = None
    artist_name: str | None = None
    event_type: str | None = None


class EventUpdate(EventCreate):
    is_active: bool = True


class EventShowCreate(BaseModel):
    event_id: int
    venue_id: int
    screen_id: int
    show_date: date
    show_time: time
    price: Decimal
    available_seats: int


class EventShowUpdate(EventShowCreate):
    status: str = "available"


class ShowSummary(BaseModel):
    id: int
    show_date: date | None = None
    show_time: time | None = None
    price: Any = None
    available_seats: int | None = None
    status: str | None = None
    screen_name: str | None = None
    screen_type: str | None = None


class VenueShows(BaseModel):
    venue_id: int
    venue_name: str | None = None
    address: str | None = None
    shows: list[ShowSummary] = Field(default_factory=list)
