"""
Group flat show rows (show x screen x venue x event) by venue.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from .schemas import ShowSummary, VenueShows

SHOW_FIELDS = (
    "id",
    "show_date",
    "show_time",
    "price",
    "available_seats",
    "status",
    "screen_name",
    "screen_type",
)


def _show_summary(row: Mapping[str, Any]) -> ShowSummary:
    return ShowSummary(**{name: row.get(name) for name in SHOW_FIELDS})


def group_shows_by_venue(rows: Iterable[Mapping[str, Any]]) -> list[VenueShows]:
    """
    Venues come out in first-seen order, shows in input order.

    Venue name/address are taken from the first row seen for a venue; later
    rows never overwrite them.
    """
    venues: dict[Any, VenueShows] = {}
    for row in rows:
        key = row["venue_id"]
        group = venues.get(key)
        if group is None:
            group = VenueShows(
                venue_id=key,
                venue_name=row.get("venue_name"),
                address=row.get("address"),
            )
            venues[key] = group
        group.shows.append(_show_summary(row))
    return list(venues.values())
