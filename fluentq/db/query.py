# =============================================================================
# File:        fluentq/db/query.py
# Purpose:     QuerySpec stanje + predikati (zatvoren skup) + exceptions + capabilities
# Author:      Aleksandar Popović
# Created:     2026-10-03
# Updated:     2026-10-15
# =============================================================================

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, List, Mapping, Optional, Tuple, Union


# ---------- Exceptions ----------
class DBError(Exception):
    """Bazna greška query sloja."""
    pass


class QueryBuilderError(DBError, ValueError):
    """Pogrešan poziv builder-a koji ne može bezbedno da se normalizuje (npr. smer sortiranja)."""
    pass


class CompilationError(DBError, ValueError):
    """Predikat ne može da se prevede u ispravan SQL (npr. prazan where_any)."""
    pass


class ModelBindingError(DBError):
    """Model nema tabelu ili primarni ključ potreban za upit."""
    pass


# ---------- Capabilities ----------
@dataclass(frozen=True)
class DriverCapabilities:
    # token koji se ubacuje kad postoji OFFSET bez LIMIT-a (SQLite/MySQL ne prihvataju goli OFFSET)
    unbounded_limit: Optional[str] = None


# ---------- Sortiranje ----------
class SortDirection(str, Enum):
    ASCENDING = "ASC"
    DESCENDING = "DESC"

    @classmethod
    def parse(cls, value: Union["SortDirection", str]) -> "SortDirection":
        if isinstance(value, SortDirection):
            return value
        key = str(value or "").strip().lower()
        if key in ("asc", "ascending"):
            return cls.ASCENDING
        if key in ("desc", "descending"):
            return cls.DESCENDING
        raise QueryBuilderError(f"Nepoznat smer sortiranja: {value!r} (očekivano asc/desc)")


# ---------- Predikati ----------
@dataclass(frozen=True)
class Equals:
    column: str
    value: Any


@dataclass(frozen=True)
class NotEquals:
    column: str
    value: Any


@dataclass(frozen=True)
class Like:
    column: str
    pattern: Any


@dataclass(frozen=True)
class NotLike:
    column: str
    pattern: Any


@dataclass(frozen=True)
class In:
    column: str
    values: Tuple[Any, ...]


@dataclass(frozen=True)
class NotIn:
    column: str
    values: Tuple[Any, ...]


@dataclass(frozen=True)
class AnyOf:
    """(c1 = v1 OR c2 = v2 ...), parovi čuvaju redosled iz mape."""
    pairs: Tuple[Tuple[str, Any], ...]


@dataclass(frozen=True)
class AllOf:
    """(c1 = v1 AND c2 = v2 ...)"""
    pairs: Tuple[Tuple[str, Any], ...]


Predicate = Union[Equals, NotEquals, Like, NotLike, In, NotIn, AnyOf, AllOf]


def as_pairs(mapping: Union[Mapping[str, Any], Iterable[Tuple[str, Any]]]) -> Tuple[Tuple[str, Any], ...]:
    if isinstance(mapping, Mapping):
        return tuple(mapping.items())
    return tuple((str(k), v) for k, v in mapping)


def coerce_count(n: Any) -> int:
    """limit/offset: ceo broj >= 0; sve što ne može da se pretvori postaje 0."""
    try:
        value = int(n)
    except (TypeError, ValueError, OverflowError):
        return 0
    return value if value > 0 else 0


# ---------- QuerySpec ----------
@dataclass
class QuerySpec:
    table: str
    primary_key: str = "id"
    limit: int = 0
    offset: int = 0
    sort_column: str = "id"
    sort_direction: SortDirection = SortDirection.ASCENDING
    search_term: Optional[str] = None
    search_fields: List[str] = field(default_factory=list)
    predicates: List[Predicate] = field(default_factory=list)

    def bind_primary_key(self, name: str) -> None:
        # uvek pregazi sort_column, čak i ako je sort_by već pozvan
        self.primary_key = name
        self.sort_column = name

    def bind_searchable_fields(self, fields: Iterable[str]) -> None:
        self.search_fields = list(fields or [])

    def add_predicate(self, predicate: Predicate) -> "QuerySpec":
        self.predicates.append(predicate)
        return self

    def set_limit(self, n: Any) -> "QuerySpec":
        self.limit = coerce_count(n)
        return self

    def set_offset(self, n: Any) -> "QuerySpec":
        self.offset = coerce_count(n)
        return self

    def set_sort(self, column: str) -> "QuerySpec":
        self.sort_column = column
        return self

    def set_direction(self, direction: Union[SortDirection, str]) -> "QuerySpec":
        self.sort_direction = SortDirection.parse(direction)
        return self

    def set_search(self, term: Optional[str]) -> "QuerySpec":
        self.search_term = term
        return self

    @property
    def has_search(self) -> bool:
        return bool(self.search_term) and bool(self.search_fields)
