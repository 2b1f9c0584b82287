"""
Event and event-show endpoints.

Show routes are registered before `/{event_id}` so `/events/shows/...`
never resolves to an event id.
"""

from __future__ import annotations

from datetime import date

from fastapi import APIRouter, Depends, Query, status

from core.db import Database, get_db

from . import schemas, service

router = APIRouter(prefix="/events")


@router.get("/shows/{show_id}")
async def get_event_show(show_id: int, db: Database = Depends(get_db)) -> dict:
    return await service.show_details(db, show_id)


@router.post("/shows", status_code=status.HTTP_201_CREATED)
async def create_event_show(
    payload: schemas.EventShowCreate,
    db: Database = Depends(get_db),
) -> dict:
    show = await service.create_event_show(db, payload)
    return {"show": show}


@router.put("/shows/{show_id}")
async def update_event_show(
    show_id: int,
    payload: schemas.EventShowUpdate,
    db: Database = Depends(get_db),
) -> dict:
    show = await service.update_event_show(db, show_id, payload)
    return {"show": show}


@router.delete("/shows/{show_id}")
async def delete_event_show(show_id: int, db: Database = Depends(get_db)) -> dict:
    await service.delete_event_show(db, show_id)
    return {"message": "Event show deleted successfully"}


@router.get("")
async def list_events(
    language: str | None = Query(default=None),
    genre: str | None = Query(default=None),
    event_type: str | None = Query(default=None),
    from_date: date | None = Query(default=None, alias="date"),
    db: Database = Depends(get_db),
) -> dict:
    """
    Active events from `date` onwards (today when omitted), soonest first.
    """
    events = await service.list_events(
        db,
        language=language,
        genre=genre,
        event_type=event_type,
        from_date=from_date,
    )
    return {"events": events}


@router.get("/{event_id}")
async def get_event(event_id: int, db: Database = Depends(get_db)) -> dict:
    return await service.get_event(db, event_id)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_event(payload: schemas.EventCreate, db: Database = Depends(get_db)) -> dict:
    event = await service.create_event(db, payload)
    return {"event": event}


@router.put("/{event_id}")
async def update_event(
    event_id: int,
    payload: schemas.EventUpdate,
    db: Database = Depends(get_db),
) -> dict:
    event = await service.update_event(db, event_id, payload)
    return {"event": event}


@router.delete("/{event_id}")
async def delete_event(event_id: int, db: Database = Depends(get_db)) -> dict:
    await service.delete_event(db, event_id)
    return {"message": "Event deleted successfully"}


@router.get("/{event_id}/shows")
async def list_event_shows(
    event_id: int,
    show_date: date | None = Query(default=None, alias="date"),
    city_id: int | None = Query(default=None, alias="cityId"),
    db: Database = Depends(get_db),
) -> dict:
    """
    Available shows for an event, grouped by venue.
    """
    venues = await service.shows_by_venue(db, event_id, show_date=show_date, city_id=city_id)
    return {"venues": venues}
