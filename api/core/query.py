"""
Filtered SELECT builder for the listing endpoints.

Request filters are optional. Each present filter adds one clause and (for
parameterized clauses) one bound value. Placeholders are not chosen while
clauses are added; they are numbered in a single pass at `build()` time, so
the Nth `$n` in the text always binds the Nth entry of the parameter list,
whatever subset of filters was present.

Clause text marks each bound value with `$?`, which is not valid Postgres
outside a string literal. Marks are replaced by splitting the text, so braces
in array or JSON literals pass through untouched:

    SelectQuery("SELECT * FROM events", order_by="event_date ASC")
        .where("is_active = true")
        .filter("language", "en")
        .filter("genre", "dra", match=Match.PATTERN)
        .build()

    -> "SELECT * FROM events WHERE is_active = true AND language = $1
        AND genre ILIKE $2 ORDER BY event_date ASC", ["en", "%dra%"]

Column names and the SELECT/ORDER BY text are trusted (written in code);
only values travel as parameters.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, NamedTuple, Sequence

MARK = "$?"


class Match(str, Enum):
    EQUALS = "equals"
    PATTERN = "pattern"
    LOWER_BOUND = "lower_bound"


_OPERATORS = {
    Match.EQUALS: "=",
    Match.PATTERN: "ILIKE",
    Match.LOWER_BOUND: ">=",
}


def is_absent(value: Any) -> bool:
    return value is None or value == ""


@dataclass(frozen=True)
class Clause:
    sql: str
    params: tuple[Any, ...] = ()

    def __post_init__(self) -> None:
        if self.sql.count(MARK) != len(self.params):
            raise ValueError(
                f"Clause {self.sql!r} has {self.sql.count(MARK)} marks but {len(self.params)} params."
            )

    def render(self, first_index: int) -> str:
        """
        Replace marks with `$first_index`, `$first_index + 1`, ... in order.
        """
        pieces = self.sql.split(MARK)
        out = [pieces[0]]
        for offset, piece in enumerate(pieces[1:]):
            out.append(f"${first_index + offset}")
            out.append(piece)
        return "".join(out)


@dataclass(frozen=True)
class Filter:
    """
    One optional request filter.

    `default` is a parameter-free clause used when `value` is absent
    (e.g. "event_date >= CURRENT_DATE").
    """

    column: str
    value: Any = None
    match: Match = Match.EQUALS
    default: str | None = None

    def to_clause(self) -> Clause | None:
        if is_absent(self.value):
            return Clause(self.default) if self.default else None

        value = f"%{self.value}%" if self.match is Match.PATTERN else self.value
        return Clause(f"{self.column} {_OPERATORS[self.match]} {MARK}", (value,))


class BuiltQuery(NamedTuple):
    sql: str
    params: list[Any]


@dataclass
class SelectQuery:
    select_sql: str
    order_by: str | None = None
    clauses: list[Clause] = field(default_factory=list)

    def where(self, sql: str, *params: Any) -> SelectQuery:
        self.clauses.append(Clause(sql, tuple(params)))
        return self

    def apply(self, flt: Filter) -> SelectQuery:
        clause = flt.to_clause()
        if clause is not None:
            self.clauses.append(clause)
        return self

    def filter(
        self,
        column: str,
        value: Any,
        *,
        match: Match = Match.EQUALS,
        default: str | None = None,
    ) -> SelectQuery:
        return self.apply(Filter(column, value, match=match, default=default))

    def predicate(self) -> tuple[str, list[Any]]:
        """
        Render the AND-ed clauses (no WHERE keyword) and their parameters.
        """
        parts: list[str] = []
        params: list[Any] = []
        for clause in self.clauses:
            parts.append(clause.render(len(params) + 1))
            params.extend(clause.params)
        return " AND ".join(parts), params

    def build(self) -> BuiltQuery:
        condition, params = self.predicate()
        sql = self.select_sql.strip()
        if condition:
            sql += f" WHERE {condition}"
        if self.order_by:
            sql += f" ORDER BY {self.order_by}"
        return BuiltQuery(sql, params)


def build_filtered_query(
    select_sql: str,
    base_predicate: str,
    filters: Sequence[Filter],
    *,
    order_by: str | None = None,
) -> BuiltQuery:
    query = SelectQuery(select_sql, order_by=order_by).where(base_predicate)
    for flt in filters:
        query.apply(flt)
    return query.build()
