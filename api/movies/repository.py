"""
Movie persistence (raw SQL).
"""

from __future__ import annotations

from core.db import Database
from core.query import Match, SelectQuery

from . import schemas


def list_movies_query(*, language: str | None = None, genre: str | None = None) -> SelectQuery:
    return (
        SelectQuery("SELECT * FROM movies", order_by="release_date DESC")
        .where("is_active = true")
        .filter("language", language)
        .filter("genre", genre, match=Match.PATTERN)
    )


async def list_movies(
    db: Database,
    *,
    language: str | None = None,
    genre: str | None = None,
) -> list[dict]:
    sql, params = list_movies_query(language=language, genre=genre).build()
    return await db.fetch_all(sql, *params)


async def get_movie(db: Database, movie_id: int) -> dict | None:
    return await db.fetch_one("SELECT * FROM movies WHERE id = $1", movie_id)


async def create_movie(db: Database, payload: schemas.MovieCreate) -> dict:
    row = await db.fetch_one(
        """
        INSERT INTO movies (title, description, duration, language, genre,
                            release_date, rating, poster_url, trailer_url)
        VALUES ($1, $2, $3, $4, $5, $6, $7, $8, $9)
        RETURNING *
        """,
        payload.title,
        payload.description,
        payload.duration,
        payload.language,
        payload.genre,
        payload.release_date,
        payload.rating,
        payload.poster_url,
        payload.trailer_url,
    )
    if row is None:
        raise RuntimeError("Failed to create movie.")
    return row


async def update_movie(db: Database, movie_id: int, payload: schemas.MovieUpdate) -> dict | None:
    return await db.fetch_one(
        """
        UPDATE movies
        SET title = $1, description = $2, duration = $3, language = $4, genre = $5,
            release_date = $6, rating = $7, poster_url = $8, trailer_url = $9,
            is_active = $10, updated_at = CURRENT_TIMESTAMP
        WHERE id = $11
        RETURNING *
        """,
        payload.title,
        payload.description,
        payload.duration,
        payload.language,
        payload.genre,
        payload.release_date,
        payload.rating,
        payload.poster_url,
        payload.trailer_url,
        payload.is_active,
        movie_id,
    )


async def delete_movie(db: Database, movie_id: int) -> dict | None:
    return await db.fetch_one("DELETE FROM movies WHERE id = $1 RETURNING id", movie_id)
