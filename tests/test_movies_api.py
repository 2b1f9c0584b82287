"""HTTP tests for movie endpoints and shared error handling."""

import logging

from fastapi.testclient import TestClient

from main import app


def test_ping_and_health(client):
    assert client.get("/ping").json() == {"status": "ok", "message": "pong"}
    assert client.get("/health").json() == {"status": "ok"}


def test_list_movies_passes_filters_as_parameters(client, fake_db):
    fake_db.all_results.append([{"id": 1, "title": "Drama Night", "language": "en"}])

    resp = client.get("/movies", params={"language": "en", "genre": "dra"})

    assert resp.status_code == 200
    assert resp.json() == {"movies": [{"id": 1, "title": "Drama Night", "language": "en"}]}
    method, sql, args = fake_db.calls[0]
    assert method == "fetch_all"
    assert sql == (
        "SELECT * FROM movies WHERE is_active = true AND language = $1 "
        "AND genre ILIKE $2 ORDER BY release_date DESC"
    )
    assert args == ("en", "%dra%")


def test_list_movies_without_filters(client, fake_db):
    resp = client.get("/movies")

    assert resp.json() == {"movies": []}
    assert fake_db.calls[0][2] == ()


def test_get_movie(client, fake_db):
    fake_db.one_results.append({"id": 3, "title": "Heat"})

    resp = client.get("/movies/3")

    assert resp.status_code == 200
    assert resp.json() == {"id": 3, "title": "Heat"}
    assert fake_db.calls[0][2] == (3,)


def test_get_missing_movie_sends_single_404(client, fake_db):
    resp = client.get("/movies/404")

    assert resp.status_code == 404
    assert resp.json() == {"error": "Movie not found"}
    assert len(fake_db.calls) == 1


def test_create_movie(client, fake_db):
    fake_db.one_results.append({"id": 9, "title": "Arrival"})

    resp = client.post(
        "/movies",
        json={"title": "Arrival", "language": "en", "release_date": "2016-11-11", "rating": 7.9},
    )

    assert resp.status_code == 201
    assert resp.json() == {"movie": {"id": 9, "title": "Arrival"}}
    args = fake_db.calls[0][2]
    assert args[0] == "Arrival"
    assert args[3] == "en"
    assert len(args) == 9


def test_update_missing_movie_is_404(client, fake_db):
    resp = client.put("/movies/12", json={"title": "Gone"})

    assert resp.status_code == 404
    assert resp.json() == {"error": "Movie not found"}
    assert fake_db.calls[0][2][-1] == 12


def test_delete_movie(client, fake_db):
    fake_db.one_results.append({"id": 5})

    resp = client.delete("/movies/5")

    assert resp.status_code == 200
    assert resp.json() == {"message": "Movie deleted successfully"}


def test_store_failure_is_logged_and_hidden(client, fake_db, caplog):
    fake_db.error = RuntimeError("connection refused")

    with caplog.at_level(logging.ERROR, logger="core.errors"):
        resp = client.get("/movies", params={"genre": "sci"})

    assert resp.status_code == 500
    assert resp.json() == {"error": "Internal Server Error"}
    assert "connection refused" not in resp.text
    assert any("list_movies_failed" in record.getMessage() for record in caplog.records)


def test_bad_path_parameter_is_422(client, fake_db):
    resp = client.get("/movies/not-a-number")

    assert resp.status_code == 422
    assert resp.json()["error"] == "Invalid request"
    assert fake_db.calls == []


def test_missing_pool_is_500():
    plain = TestClient(app, raise_server_exceptions=False)

    resp = plain.get("/movies")

    assert resp.status_code == 500
    assert resp.json() == {"error": "Internal Server Error"}
