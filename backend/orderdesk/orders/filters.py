"""Structured filters for the owner / issue-date order query.

``build_order_filter`` never produces query text; it returns one of
``NoFilter``, ``MatchNone`` or ``And`` and the repository turns that into
a SQLAlchemy ``WHERE`` clause.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timezone
from typing import Optional, Tuple, Union


@dataclass(frozen=True)
class OwnerEquals:
    owner_id: int


@dataclass(frozen=True)
class IssuedOnOrAfter:
    moment: datetime


@dataclass(frozen=True)
class IssuedOnOrBefore:
    moment: datetime


Clause = Union[OwnerEquals, IssuedOnOrAfter, IssuedOnOrBefore]


@dataclass(frozen=True)
class NoFilter:
    """Match every row."""


@dataclass(frozen=True)
class MatchNone:
    """Match nothing; callers return an empty list without querying."""


@dataclass(frozen=True)
class And:
    clauses: Tuple[Clause, ...]


OrderFilter = Union[NoFilter, MatchNone, And]


def start_of_day(day: date) -> datetime:
    return datetime.combine(day, time.min, tzinfo=timezone.utc)


def end_of_day(day: date) -> datetime:
    # time.max is 23:59:59.999999, the finest resolution datetime has
    return datetime.combine(day, time.max, tzinfo=timezone.utc)


def build_order_filter(
    owner_id: Optional[int] = None,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
) -> OrderFilter:
    start = start_of_day(start_date) if start_date is not None else None
    end = end_of_day(end_date) if end_date is not None else None

    if start is not None and end is not None and start > end:
        return MatchNone()

    clauses = []
    if owner_id is not None:
        clauses.append(OwnerEquals(owner_id))
    if start is not None:
        clauses.append(IssuedOnOrAfter(start))
    if end is not None:
        clauses.append(IssuedOnOrBefore(end))

    if not clauses:
        return NoFilter()
    return And(tuple(clauses))
