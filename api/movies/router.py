"""
Movie endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status

from core.db import Database, get_db

from . import schemas, service

router = APIRouter(prefix="/movies")


@router.get("")
async def list_movies(
    language: str | None = Query(default=None),
    genre: str | None = Query(default=None),
    db: Database = Depends(get_db),
) -> dict:
    """
    Active movies, newest release first. `genre` is a case-insensitive substring.
    """
    movies = await service.list_movies(db, language=language, genre=genre)
    return {"movies": movies}


@router.get("/{movie_id}")
async def get_movie(movie_id: int, db: Database = Depends(get_db)) -> dict:
    return await service.get_movie(db, movie_id)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_movie(payload: schemas.MovieCreate, db: Database = Depends(get_db)) -> dict:
    movie = await service.create_movie(db, payload)
    return {"movie": movie}


@router.put("/{movie_id}")
async def update_movie(
    movie_id: int,
    payload: schemas.MovieUpdate,
    db: Database = Depends(get_db),
) -> dict:
    movie = await service.update_movie(db, movie_id, payload)
    return {"movie": movie}


@router.delete("/{movie_id}")
async def delete_movie(movie_id: int, db: Database = Depends(get_db)) -> dict:
    await service.delete_movie(db, movie_id)
    return {"message": "Movie deleted successfully"}
