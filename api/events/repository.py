"""
Event and event-show persistence (raw SQL).
"""

from __future__ import annotations

from datetime import date

from core.db import Database
from core.query import Match, SelectQuery

from . import schemas

SHOWS_BY_EVENT_SELECT = """
    SELECT
      es.id, es.show_date, es.show_time, es.price, es.available_seats, es.status,
      sc.name AS screen_name, sc.screen_type,
      t.id AS venue_id, t.name AS venue_name, t.address,
      e.title AS event_title, e.artist_name
    FROM event_shows es
    JOIN screens sc ON es.screen_id = sc.id
    JOIN theaters t ON sc.theater_id = t.id
    JOIN events e ON es.event_id = e.id
"""


def list_events_query(
    *,
    language: str | None = None,
    genre: str | None = None,
    event_type: str | None = None,
    from_date: date | None = None,
) -> SelectQuery:
    # Without a date only upcoming events are listed.
    return (
        SelectQuery("SELECT * FROM events", order_by="event_date ASC, event_time ASC")
        .where("is_active = true")
        .filter("language", language)
        .filter("genre", genre, match=Match.PATTERN)
        .filter("event_type", event_type)
        .filter(
            "event_date",
            from_date,
            match=Match.LOWER_BOUND,
            default="event_date >= CURRENT_DATE",
        )
    )


def shows_by_event_query(
    event_id: int,
    *,
    show_date: date | None = None,
    city_id: int | None = None,
) -> SelectQuery:
    return (
        SelectQuery(SHOWS_BY_EVENT_SELECT, order_by="es.show_date, es.show_time")
        .where("es.event_id = $?", event_id)
        .where("es.status = 'available'")
        .filter("es.show_date", show_date, default="es.show_date >= CURRENT_DATE")
        .filter("t.city_id", city_id)
    )


async def list_events(
    db: Database,
    *,
    language: str | None = None,
    genre: str | None = None,
    event_type: str | None = None,
    from_date: date | None = None,
) -> list[dict]:
    sql, params = list_events_query(
        language=language,
        genre=genre,
        event_type=event_type,
        from_date=from_date,
    ).build()
    return await db.fetch_all(sql, *params)


async def get_event(db: Database, event_id: int) -> dict | None:
    return await db.fetch_one("SELECT * FROM events WHERE id = $1", event_id)


async def create_event(db: Database, payload: schemas.EventCreate) -> dict:
    row = await db.fetch_one(
        """
        INSERT INTO events (title, description, duration, language, genre, event_date,
                            event_time, rating, poster_url, trailer_url, artist_name, event_type)
        VALUES ($1, $2, $3, $4, $5, $6, $7, $8, $9, $10, $11, $12)
        RETURNING *
        """,
        payload.title,
        payload.description,
        payload.duration,
        payload.language,
        payload.genre,
        payload.event_date,
        payload.event_time,
        payload.rating,
        payload.poster_url,
        payload.trailer_url,
        payload.artist_name,
        payload.event_type,
    )
    if row is None:
        raise RuntimeError("Failed to create event.")
    return row


async def update_event(db: Database, event_id: int, payload: schemas.EventUpdate) -> dict | None:
    return await db.fetch_one(
        """
        UPDATE events
        SET title = $1, description = $2, duration = $3, language = $4, genre = $5,
            event_date = $6, event_time = $7, rating = $8, poster_url = $9,
            trailer_url = $10, artist_name = $11, event_type = $12, is_active = $13,
            updated_at = CURRENT_TIMESTAMP
        WHERE id = $14
        RETURNING *
        """,
        payload.title,
        payload.description,
        payload.duration,
        payload.language,
        payload.genre,
        payload.event_date,
        payload.event_time,
        payload.rating,
        payload.poster_url,
        payload.trailer_url,
        payload.artist_name,
        payload.event_type,
        payload.is_active,
        event_id,
    )


async def delete_event(db: Database, event_id: int) -> dict | None:
    return await db.fetch_one("DELETE FROM events WHERE id = $1 RETURNING id", event_id)


async def list_shows_by_event(
    db: Database,
    event_id: int,
    *,
    show_date: date | None = None,
    city_id: int | None = None,
) -> list[dict]:
    sql, params = shows_by_event_query(event_id, show_date=show_date, city_id=city_id).build()
    return await db.fetch_all(sql, *params)


async def get_event_show(db: Database, show_id: int) -> dict | None:
    return await db.fetch_one(
        """
        SELECT
          es.*,
          e.title AS event_title, e.duration, e.language, e.genre, e.rating,
          e.artist_name, e.event_type,
          sc.name AS screen_name, sc.screen_type, sc.total_seats,
          t.name AS venue_name, t.address
        FROM event_shows es
        JOIN events e ON es.event_id = e.id
        JOIN screens sc ON es.screen_id = sc.id
        JOIN theaters t ON sc.theater_id = t.id
        WHERE es.id = $1
        """,
        show_id,
    )


async def list_show_seats(db: Database, show_id: int, screen_id: int) -> list[dict]:
    return await db.fetch_all(
        """
        SELECT
          s.id, s.seat_number, s.row_name, s.seat_type,
          (bs.id IS NOT NULL) AS is_booked
        FROM seats s
        LEFT JOIN booking_seats bs ON s.id = bs.seat_id
          AND bs.show_id = $1
          AND bs.status = 'booked'
        WHERE s.screen_id = $2
        ORDER BY s.row_name, s.seat_number
        """,
        show_id,
        screen_id,
    )


async def create_event_show(db: Database, payload: schemas.EventShowCreate) -> dict:
    row = await db.fetch_one(
        """
        INSERT INTO event_shows (event_id, venue_id, screen_id, show_date, show_time,
                                 price, available_seats)
        VALUES ($1, $2, $3, $4, $5, $6, $7)
        RETURNING *
        """,
        payload.event_id,
        payload.venue_id,
        payload.screen_id,
        payload.show_date,
        payload.show_time,
        payload.price,
        payload.available_seats,
    )
    if row is None:
        raise RuntimeError("Failed to create event show.")
    return row


async def update_event_show(
    db: Database,
    show_id: int,
    payload: schemas.EventShowUpdate,
) -> dict | None:
    return await db.fetch_one(
        """
        UPDATE event_shows
        SET event_id = $1, venue_id = $2, screen_id = $3, show_date = $4, show_time = $5,
            price = $6, available_seats = $7, status = $8
        WHERE id = $9
        RETURNING *
        """,
        payload.event_id,
        payload.venue_id,
        payload.screen_id,
        payload.show_date,
        payload.show_time,
        payload.price,
        payload.available_seats,
        payload.status,
        show_id,
    )


async def delete_event_show(db: Database, show_id: int) -> dict | None:
    return await db.fetch_one("DELETE FROM event_shows WHERE id = $1 RETURNING id", show_id)
