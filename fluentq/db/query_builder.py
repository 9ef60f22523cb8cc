# =============================================================================
# File:        fluentq/db/query_builder.py
# Purpose:     Fluent QueryBuilder iznad QuerySpec-a (vezan za model + drajver)
# Author:      Aleksandar Popović
# Created:     2026-10-05
# Updated:     2026-10-17
# =============================================================================

from __future__ import annotations
from typing import Any, Iterable, List, Mapping, Optional, Tuple, Union

from fluentq.db.base_driver import BaseDBDriver
from fluentq.db.executor import QueryExecutor
from fluentq.db.query import (
    QuerySpec, SortDirection, ModelBindingError, QueryBuilderError, as_pairs, coerce_count,
    Equals, NotEquals, Like, NotLike, In, NotIn, AnyOf, AllOf,
)

Pairs = Union[Mapping[str, Any], Iterable[Tuple[str, Any]]]


def _members(column: str, values: Iterable[Any]) -> Tuple[Any, ...]:
    # string je iterabilan, pa bi se tiho raspao na karaktere
    if isinstance(values, (str, bytes, bytearray)):
        raise QueryBuilderError(
            f"where_in/where_not_in za {column!r} očekuje kolekciju vrednosti, dobijen string {values!r}"
        )
    return tuple(values)


class QueryBuilder:
    """
    Postepeno gradi upit kroz lanac poziva, pa ga izvršava sa find() ili total_count().

        User.query(driver).where("status", "active").search("ana").limit(10).find()

    bind_primary_key() uvek postavlja i sort kolonu, zato ga treba pozvati
    pre sort_by(), inače pregazi eksplicitno sortiranje.
    """

    def __init__(self, model, driver: BaseDBDriver):
        table = model.table_name()
        if not table:
            raise ModelBindingError(f"Model {getattr(model, '__name__', model)!r} nema tabelu.")
        self._q = QuerySpec(table=table)
        self._executor = QueryExecutor(driver, model)

    @property
    def spec(self) -> QuerySpec:
        return self._q

    # ---------- Konfiguracija (nije deo lanca) ----------
    def bind_searchable_fields(self, fields: Iterable[str]) -> None:
        self._q.bind_searchable_fields(fields)

    def bind_primary_key(self, name: str) -> None:
        self._q.bind_primary_key(name)

    # ---------- Paginacija / sortiranje ----------
    def limit(self, n: Any) -> "QueryBuilder":
        self._q.set_limit(n)
        return self

    def offset(self, n: Any) -> "QueryBuilder":
        self._q.set_offset(n)
        return self

    def sort_by(self, column: str) -> "QueryBuilder":
        self._q.set_sort(column)
        return self

    def order(self, direction: Union[SortDirection, str]) -> "QueryBuilder":
        self._q.set_direction(direction)
        return self

    # ---------- Filteri ----------
    def where(self, column: str, value: Any) -> "QueryBuilder":
        self._q.add_predicate(Equals(column, value))
        return self

    def where_not(self, column: str, value: Any) -> "QueryBuilder":
        self._q.add_predicate(NotEquals(column, value))
        return self

    def where_like(self, column: str, pattern: Any) -> "QueryBuilder":
        self._q.add_predicate(Like(column, pattern))
        return self

    def where_not_like(self, column: str, pattern: Any) -> "QueryBuilder":
        self._q.add_predicate(NotLike(column, pattern))
        return self

    def where_in(self, column: str, values: Iterable[Any]) -> "QueryBuilder":
        self._q.add_predicate(In(column, _members(column, values)))
        return self

    def where_not_in(self, column: str, values: Iterable[Any]) -> "QueryBuilder":
        self._q.add_predicate(NotIn(column, _members(column, values)))
        return self

    def where_any(self, pairs: Pairs) -> "QueryBuilder":
        self._q.add_predicate(AnyOf(as_pairs(pairs)))
        return self

    def where_all(self, pairs: Pairs) -> "QueryBuilder":
        self._q.add_predicate(AllOf(as_pairs(pairs)))
        return self

    def search(self, term: Optional[str]) -> "QueryBuilder":
        self._q.set_search(term)
        return self

    # ---------- SQL bez izvršavanja ----------
    def to_sql(self) -> str:
        return self._executor.select_sql(self._q)

    def count_sql(self) -> str:
        return self._executor.count_sql(self._q)

    # ---------- Izvršavanje ----------
    def find(self) -> List[Any]:
        return self._executor.find(self._q)

    def total_count(self) -> int:
        return self._executor.total_count(self._q)

    def first(self):
        self._q.set_limit(1)
        rows = self._executor.find(self._q)
        return rows[0] if rows else None

    def paginate(self, page: Any = 1, per_page: Any = 10) -> List[Any]:
        """Strane kreću od 1; neispravan page daje prvu stranu, per_page je najmanje 1."""
        page = max(coerce_count(page), 1)
        self._q.set_limit(max(coerce_count(per_page), 1))
        self._q.set_offset((page - 1) * self._q.limit)
        return self._executor.find(self._q)
