"""
Venue read endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from core.db import Database, get_db
from core.errors import not_found, store_errors

from . import repository

router = APIRouter(prefix="/venues")


@router.get("")
async def list_venues(
    city_id: int | None = Query(default=None, alias="cityId"),
    name: str | None = Query(default=None),
    db: Database = Depends(get_db),
) -> dict:
    async with store_errors("list_venues", city_id=city_id, name=name):
        venues = await repository.list_venues(db, city_id=city_id, name=name)
    return {"venues": venues}


@router.get("/{venue_id}")
async def get_venue(venue_id: int, db: Database = Depends(get_db)) -> dict:
    async with store_errors("get_venue", venue_id=venue_id):
        row = await repository.get_venue(db, venue_id)
    if row is None:
        raise not_found("Venue")
    return row
