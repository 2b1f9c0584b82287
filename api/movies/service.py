"""
Movie business logic: store calls plus not-found / store-failure mapping.
"""

from __future__ import annotations

from core.db import Database
from core.errors import not_found, store_errors

from . import repository, schemas


async def list_movies(db: Database, *, language: str | None, genre: str | None) -> list[dict]:
    async with store_errors("list_movies", language=language, genre=genre):
        return await repository.list_movies(db, language=language, genre=genre)


async def get_movie(db: Database, movie_id: int) -> dict:
    async with store_errors("get_movie", movie_id=movie_id):
        row = await repository.get_movie(db, movie_id)
    if row is None:
        raise not_found("Movie")
    return row


async def create_movie(db: Database, payload: schemas.MovieCreate) -> dict:
    async with store_errors("create_movie", title=payload.title):
        return await repository.create_movie(db, payload)


async def update_movie(db: Database, movie_id: int, payload: schemas.MovieUpdate) -> dict:
    async with store_errors("update_movie", movie_id=movie_id):
        row = await repository.update_movie(db, movie_id, payload)
    if row is None:
        raise not_found("Movie")
    return row


async def delete_movie(db: Database, movie_id: int) -> None:
    async with store_errors("delete_movie", movie_id=movie_id):
        row = await repository.delete_movie(db, movie_id)
    if row is None:
        raise not_found("Movie")
