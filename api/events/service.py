"""
Event and event-show business logic.
"""

from __future__ import annotations

from datetime import date

from core.db import Database
from core.errors import not_found, store_errors

from . import grouping, repository, schemas


async def list_events(
    db: Database,
    *,
    language: str | None = None,
    genre: str | None = None,
    event_type: str | None = None,
    from_date: date | None = None,
) -> list[dict]:
    async with store_errors("list_events", language=language, genre=genre, event_type=event_type):
        return await repository.list_events(
            db,
            language=language,
            genre=genre,
            event_type=event_type,
            from_date=from_date,
        )


async def get_event(db: Database, event_id: int) -> dict:
    async with store_errors("get_event", event_id=event_id):
        row = await repository.get_event(db, event_id)
    if row is None:
        raise not_found("Event")
    return row


async def create_event(db: Database, payload: schemas.EventCreate) -> dict:
    async with store_errors("create_event", title=payload.title):
        return await repository.create_event(db, payload)


async def update_event(db: Database, event_id: int, payload: schemas.EventUpdate) -> dict:
    async with store_errors("update_event", event_id=event_id):
        row = await repository.update_event(db, event_id, payload)
    if row is None:
        raise not_found("Event")
    return row


async def delete_event(db: Database, event_id: int) -> None:
    async with store_errors("delete_event", event_id=event_id):
        row = await repository.delete_event(db, event_id)
    if row is None:
        raise not_found("Event")


async def shows_by_venue(
    db: Database,
    event_id: int,
    *,
    show_date: date | None = None,
    city_id: int | None = None,
) -> list[schemas.VenueShows]:
    async with store_errors("list_event_shows", event_id=event_id, show_date=show_date, city_id=city_id):
        rows = await repository.list_shows_by_event(
            db,
            event_id,
            show_date=show_date,
            city_id=city_id,
        )
    return grouping.group_shows_by_venue(rows)


async def show_details(db: Database, show_id: int) -> dict:
    """
    Show row plus the screen's seat map with per-seat booking state.

    Two sequential reads; both are read-only.
    """
    async with store_errors("get_event_show", show_id=show_id):
        show = await repository.get_event_show(db, show_id)
        if show is None:
            raise not_found("Event show")
        seats = await repository.list_show_seats(db, show_id, int(show["screen_id"]))
    return {"show": show, "seats": seats}


async def create_event_show(db: Database, payload: schemas.EventShowCreate) -> dict:
    async with store_errors("create_event_show", event_id=payload.event_id, screen_id=payload.screen_id):
        return await repository.create_event_show(db, payload)


async def update_event_show(db: Database, show_id: int, payload: schemas.EventShowUpdate) -> dict:
    async with store_errors("update_event_show", show_id=show_id):
        row = await repository.update_event_show(db, show_id, payload)
    if row is None:
        raise not_found("Event show")
    return row


async def delete_event_show(db: Database, show_id: int) -> None:
    async with store_errors("delete_event_show", show_id=show_id):
        row = await repository.delete_event_show(db, show_id)
    if row is None:
        raise not_found("Event show")
