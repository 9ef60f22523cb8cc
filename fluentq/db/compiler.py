# =============================================================================
# File:        fluentq/db/compiler.py
# Purpose:     QuerySpec -> SQL fragmenti (WHERE / ORDER BY / LIMIT / OFFSET)
#              + sklapanje SELECT i COUNT naredbi
# Author:      Aleksandar Popović
# Created:     2026-10-03
# Updated:     2026-10-15
# =============================================================================
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Tuple

from fluentq.db.query import (
    QuerySpec, Predicate,
    Equals, NotEquals, Like, NotLike, In, NotIn, AnyOf, AllOf,
    CompilationError,
)

Escape = Callable[[str], str]


@dataclass(frozen=True)
class CompiledStatement:
    where_sql: str = ""
    order_sql: str = ""
    limit_sql: str = ""
    offset_sql: str = ""


def quote_ident(name: str) -> str:
    """Identifikator ide u backtick-ove; ne validira se (dolazi iz aplikacije, ne od korisnika)."""
    return f"`{name}`"


def to_text(value: Any) -> str:
    """Vrednost -> tekst pre escape-a. None je prazan string, bool je '1'/'0'."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "1" if value else "0"
    return str(value)


def literal(value: Any, escape: Escape) -> str:
    return "'" + escape(to_text(value)) + "'"


def _comparison(column: str, op: str, value: Any, escape: Escape) -> str:
    return f"{quote_ident(column)} {op} {literal(value, escape)}"


def _membership(column: str, op: str, values: Tuple[Any, ...], escape: Escape) -> str:
    if not values:
        # prazan skup: IN () nije validan SQL
        return "1 = 0" if op == "IN" else "1 = 1"
    members = ",".join(literal(v, escape) for v in values)
    return f"{quote_ident(column)} {op} ({members})"


def _group(pairs, joiner: str, escape: Escape, kind: str) -> str:
    if not pairs:
        raise CompilationError(f"{kind} zahteva bar jedan par kolona -> vrednost")
    parts = [_comparison(column, "=", value, escape) for column, value in pairs]
    return "(" + f" {joiner} ".join(parts) + ")"


def render_predicate(predicate: Predicate, escape: Escape) -> str:
    if isinstance(predicate, Equals):
        return _comparison(predicate.column, "=", predicate.value, escape)
    if isinstance(predicate, NotEquals):
        return _comparison(predicate.column, "!=", predicate.value, escape)
    if isinstance(predicate, Like):
        return _comparison(predicate.column, "LIKE", predicate.pattern, escape)
    if isinstance(predicate, NotLike):
        return _comparison(predicate.column, "NOT LIKE", predicate.pattern, escape)
    if isinstance(predicate, In):
        return _membership(predicate.column, "IN", predicate.values, escape)
    if isinstance(predicate, NotIn):
        return _membership(predicate.column, "NOT IN", predicate.values, escape)
    if isinstance(predicate, AnyOf):
        return _group(predicate.pairs, "OR", escape, "where_any")
    if isinstance(predicate, AllOf):
        return _group(predicate.pairs, "AND", escape, "where_all")
    raise CompilationError(f"Nepoznat tip predikata: {type(predicate).__name__}")


def render_search(spec: QuerySpec, escape: Escape) -> Optional[str]:
    if not spec.has_search:
        return None
    pattern = "'%" + escape(to_text(spec.search_term)) + "%'"
    parts = [f"{quote_ident(f)} LIKE {pattern}" for f in spec.search_fields]
    return "(" + " OR ".join(parts) + ")"


def compile_where(spec: QuerySpec, escape: Escape) -> str:
    fragments: List[str] = []

    search = render_search(spec, escape)
    if search:
        fragments.append(search)

    for predicate in spec.predicates:
        fragments.append(render_predicate(predicate, escape))

    if not fragments:
        return ""
    return "WHERE " + " AND ".join(fragments)


def compile_spec(spec: QuerySpec, escape: Escape) -> CompiledStatement:
    order_sql = f"ORDER BY {quote_ident(spec.sort_column)} {spec.sort_direction.value}"
    limit_sql = f"LIMIT {spec.limit}" if spec.limit > 0 else ""
    offset_sql = f"OFFSET {spec.offset}" if spec.offset > 0 else ""
    return CompiledStatement(
        where_sql=compile_where(spec, escape),
        order_sql=order_sql,
        limit_sql=limit_sql,
        offset_sql=offset_sql,
    )


# ---------- Sklapanje naredbi ----------
def build_select(table: str, compiled: CompiledStatement, unbounded_limit: Optional[str] = None) -> str:
    limit_sql = compiled.limit_sql
    if compiled.offset_sql and not limit_sql and unbounded_limit:
        limit_sql = unbounded_limit
    parts = [
        f"SELECT * FROM {quote_ident(table)}",
        compiled.where_sql,
        compiled.order_sql,
        limit_sql,
        compiled.offset_sql,
    ]
    return " ".join(p for p in parts if p)


def build_count(table: str, where_sql: str) -> str:
    parts = [f"SELECT COUNT(*) FROM {quote_ident(table)}", where_sql]
    return " ".join(p for p in parts if p)
