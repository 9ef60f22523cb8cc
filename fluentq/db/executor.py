# =============================================================================
# File:        fluentq/db/executor.py
# Purpose:     Izvršavanje QuerySpec-a: find (redovi -> modeli) i total_count
# Author:      Aleksandar Popović
# Created:     2026-10-05
# Updated:     2026-10-15
# =============================================================================
from __future__ import annotations

from typing import Any, List

from fluentq.config.env import EnvLoader
from fluentq.db.base_driver import BaseDBDriver
from fluentq.db.compiler import compile_spec, compile_where, build_select, build_count
from fluentq.db.query import QuerySpec
from fluentq.managers.error_manager import ErrorManager
from fluentq.managers.log_manager import LogManager


def _log(level: str, msg: str):
    getattr(LogManager, level)(f"[Query] {msg}")


class QueryExecutor:
    """
    Spaja kompajler sa drajverom (escape + izvršavanje) i modelom (from_row).
    Greške drajvera se beleže u ErrorManager i prosleđuju dalje nepromenjene.
    """

    def __init__(self, driver: BaseDBDriver, model):
        self.driver = driver
        self.model = model

    # ---------- SQL ----------
    def select_sql(self, spec: QuerySpec) -> str:
        compiled = compile_spec(spec, self.driver.escape)
        caps = self.driver.capabilities()
        return build_select(spec.table, compiled, unbounded_limit=caps.unbounded_limit)

    def count_sql(self, spec: QuerySpec) -> str:
        return build_count(spec.table, compile_where(spec, self.driver.escape))

    # ---------- Izvršavanje ----------
    def total_count(self, spec: QuerySpec) -> int:
        """COUNT(*) nad celim filtriranim skupom; limit/offset/sort se ignorišu."""
        sql = self.count_sql(spec)
        value = self._run(self.driver.select_value, sql)
        return int(value or 0)

    def find(self, spec: QuerySpec) -> List[Any]:
        sql = self.select_sql(spec)
        rows = self._run(self.driver.select_rows, sql) or []
        return [self.model.from_row(row) for row in rows]

    def _run(self, method, sql: str):
        if EnvLoader.get_bool("QUERY_LOG_SQL", False):
            _log("debug", sql)
        try:
            return method(sql)
        except Exception as e:
            ErrorManager.create(e, context=f"[Query] {sql}")
            raise
