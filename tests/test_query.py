"""Tests for the filtered SELECT builder."""

import itertools
import re
from datetime import date

import pytest

from core.query import Clause, Filter, Match, SelectQuery, build_filtered_query
from events.repository import list_events_query, shows_by_event_query
from movies.repository import list_movies_query
from venues.repository import list_venues_query

_BOUND = re.compile(r"([\w.]+) (=|ILIKE|>=) \$(\d+)")


def _placeholders(sql):
    return [int(n) for n in re.findall(r"\$(\d+)", sql)]


def _bound_columns(sql, params):
    """Map each `column OP $n` in the SQL text to the value bound at $n."""
    return {column: params[int(n) - 1] for column, _, n in _BOUND.findall(sql)}


def _subsets(names):
    for size in range(len(names) + 1):
        yield from itertools.combinations(names, size)


def test_events_language_and_genre_with_default_date():
    sql, params = list_events_query(language="en", genre="dra").build()

    assert sql == (
        "SELECT * FROM events WHERE is_active = true AND language = $1 "
        "AND genre ILIKE $2 AND event_date >= CURRENT_DATE "
        "ORDER BY event_date ASC, event_time ASC"
    )
    assert params == ["en", "%dra%"]


def test_build_filtered_query_matches_endpoint_query():
    built = build_filtered_query(
        "SELECT * FROM events",
        "is_active = true",
        [
            Filter("language", "en"),
            Filter("genre", "dra", match=Match.PATTERN),
            Filter("event_type", None),
            Filter("event_date", None, match=Match.LOWER_BOUND, default="event_date >= CURRENT_DATE"),
        ],
        order_by="event_date ASC, event_time ASC",
    )

    assert built == list_events_query(language="en", genre="dra").build()


EVENT_FILTERS = {
    "language": "en",
    "genre": "dra",
    "event_type": "concert",
    "from_date": date(2026, 11, 1),
}


@pytest.mark.parametrize("present", list(_subsets(tuple(EVENT_FILTERS))))
def test_event_filters_every_subset_keeps_placeholders_aligned(present):
    kwargs = {name: EVENT_FILTERS[name] for name in present}
    sql, params = list_events_query(**kwargs).build()

    assert len(params) == len(present)
    assert _placeholders(sql) == list(range(1, len(params) + 1))

    expected = {}
    if "language" in present:
        expected["language"] = "en"
    if "genre" in present:
        expected["genre"] = "%dra%"
    if "event_type" in present:
        expected["event_type"] = "concert"
    if "from_date" in present:
        expected["event_date"] = date(2026, 11, 1)
    assert _bound_columns(sql, params) == expected

    assert ("event_date >= CURRENT_DATE" in sql) == ("from_date" not in present)
    assert sql.endswith("ORDER BY event_date ASC, event_time ASC")


SHOW_FILTERS = {"show_date": date(2026, 11, 2), "city_id": 7}


@pytest.mark.parametrize("present", list(_subsets(tuple(SHOW_FILTERS))))
def test_show_filters_after_fixed_event_id(present):
    kwargs = {name: SHOW_FILTERS[name] for name in present}
    sql, params = shows_by_event_query(42, **kwargs).build()

    # event_id is always $1; optional filters continue from $2 with no gaps.
    assert params[0] == 42
    assert len(params) == 1 + len(present)
    assert _placeholders(sql) == list(range(1, len(params) + 1))

    expected = {"es.event_id": 42}
    if "show_date" in present:
        expected["es.show_date"] = date(2026, 11, 2)
    if "city_id" in present:
        expected["t.city_id"] = 7
    assert _bound_columns(sql, params) == expected

    assert ("es.show_date >= CURRENT_DATE" in sql) == ("show_date" not in present)
    assert "es.status = 'available'" in sql
    assert sql.endswith("ORDER BY es.show_date, es.show_time")


def test_city_filter_alone_is_second_placeholder():
    sql, params = shows_by_event_query(5, city_id=3).build()

    assert "t.city_id = $2" in sql
    assert params == [5, 3]


def test_empty_string_counts_as_absent():
    sql, params = list_movies_query(language="", genre="").build()

    assert sql == "SELECT * FROM movies WHERE is_active = true ORDER BY release_date DESC"
    assert params == []


def test_movies_genre_is_case_insensitive_substring():
    sql, params = list_movies_query(genre="Comedy").build()

    assert "genre ILIKE $1" in sql
    assert params == ["%Comedy%"]


def test_venues_query_binds_city_then_name():
    sql, params = list_venues_query(city_id=1, name="royal").build()

    assert "city_id = $1 AND name ILIKE $2" in sql
    assert params == [1, "%royal%"]


def test_lower_bound_passes_value_unwrapped():
    clause = Filter("event_date", date(2026, 1, 1), match=Match.LOWER_BOUND).to_clause()

    assert clause == Clause("event_date >= $?", (date(2026, 1, 1),))


def test_absent_filter_without_default_adds_nothing():
    assert Filter("language", None).to_clause() is None


def test_query_without_clauses_has_no_where():
    sql, params = SelectQuery("SELECT * FROM movies").build()

    assert sql == "SELECT * FROM movies"
    assert params == []


def test_clause_rejects_mark_param_mismatch():
    with pytest.raises(ValueError):
        Clause("a = $? AND b = $?", (1,))


def test_braced_literals_in_fixed_and_default_clauses():
    built = build_filtered_query(
        "SELECT * FROM events",
        "tags <> '{}'",
        [
            Filter("language", "en"),
            Filter("genre", None, default="meta @> '{\"featured\": true}'"),
        ],
    )

    assert built.sql == (
        "SELECT * FROM events WHERE tags <> '{}' AND language = $1 "
        "AND meta @> '{\"featured\": true}'"
    )
    assert built.params == ["en"]


def test_braced_literal_next_to_bound_value():
    sql, params = SelectQuery("SELECT * FROM events").where("tags @> '{rock}'").where("id = $?", 3).build()

    assert sql == "SELECT * FROM events WHERE tags @> '{rock}' AND id = $1"
    assert params == [3]
