"""
Venue (theater) lookups.
"""

from __future__ import annotations

from core.db import Database
from core.query import Match, SelectQuery


def list_venues_query(*, city_id: int | None = None, name: str | None = None) -> SelectQuery:
    return (
        SelectQuery("SELECT id, name, address, city_id FROM theaters", order_by="name ASC")
        .where("is_active = true")
        .filter("city_id", city_id)
        .filter("name", name, match=Match.PATTERN)
    )


async def list_venues(db: Database, *, city_id: int | None = None, name: str | None = None) -> list[dict]:
    sql, params = list_venues_query(city_id=city_id, name=name).build()
    return await db.fetch_all(sql, *params)


async def get_venue(db: Database, venue_id: int) -> dict | None:
    return await db.fetch_one(
        "SELECT id, name, address, city_id FROM theaters WHERE id = $1",
        venue_id,
    )
