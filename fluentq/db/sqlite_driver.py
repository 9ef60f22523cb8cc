# =============================================================================
# File:        fluentq/db/sqlite_driver.py
# Purpose:     SQLite izvršni drajver za query sloj:
#              - PRAGMA tuning iz .env (journal, synchronous, busy_timeout)
#              - escape literala (udvostručeni navodnici)
#              - select_rows / select_value za kompajlirane upite
#              - execute / execute_many za DDL/DML (fixture-i, host aplikacija)
# Author:      Aleksandar Popović
# Created:     2026-10-04
# Updated:     2026-10-17
# =============================================================================
from __future__ import annotations

import os
import sqlite3
import threading
from typing import Any, Dict, Iterable, List, Sequence

from fluentq.config.env import EnvLoader
from fluentq.db.base_driver import BaseDBDriver
from fluentq.db.query import DriverCapabilities

MEMORY = ":memory:"
DEFAULT_PATH = os.path.join("data", "db", "app.db")
JOURNAL_MODES = ("wal", "delete", "truncate", "persist", "off", "memory")
SYNCHRONOUS_MODES = ("OFF", "NORMAL", "FULL", "EXTRA")


def escape_sqlite(raw: str) -> str:
    """' -> '' ; NUL bajt se izbacuje (SQLite bi presekao string na njemu)."""
    return str(raw).replace("\x00", "").replace("'", "''")


class SQLiteDriver(BaseDBDriver):
    """
    - __init__(**params): očekuje 'path' (ili ':memory:')
    - capabilities(), escape(), select_rows(), select_value()
    - execute(sql, params), execute_many(sql, rows), close()
    """
    _LOCK = threading.RLock()

    def __init__(self, **params):
        db_path = params.get("path") or DEFAULT_PATH

        if db_path == MEMORY:
            self.db_file = MEMORY
        else:
            self.db_file = os.path.abspath(db_path)
            if os.path.isdir(self.db_file):
                raise RuntimeError(
                    f"SQLite path '{self.db_file}' je direktorijum, očekivan je put do .db fajla."
                )
            dirpath = os.path.dirname(self.db_file) or "."
            os.makedirs(dirpath, exist_ok=True)

        # isolation_level=None -> autocommit; transakcije su stvar pozivaoca
        self.conn = sqlite3.connect(self.db_file, isolation_level=None, timeout=5.0, check_same_thread=False)
        self.conn.row_factory = sqlite3.Row
        self._apply_pragmas()

    # --- PRAGMA podešavanja (tunable preko .env) ---
    def _apply_pragmas(self) -> None:
        """
        Opcione .env varijable:
          - SQLITE_JOURNAL_MODE=wal|delete|truncate|persist|off|memory
          - SQLITE_SYNCHRONOUS=OFF|NORMAL|FULL|EXTRA
          - SQLITE_BUSY_TIMEOUT_MS=4000
        """
        cur = self.conn.cursor()
        try:
            cur.execute("PRAGMA foreign_keys = ON;")

            jm = EnvLoader.get_choice("SQLITE_JOURNAL_MODE", JOURNAL_MODES)
            if jm and self.db_file != MEMORY:
                cur.execute(f"PRAGMA journal_mode = {jm};")

            sync = EnvLoader.get_choice("SQLITE_SYNCHRONOUS", SYNCHRONOUS_MODES, "NORMAL")
            cur.execute(f"PRAGMA synchronous = {sync};")

            bt = EnvLoader.get_int("SQLITE_BUSY_TIMEOUT_MS", 4000)
            cur.execute(f"PRAGMA busy_timeout = {max(0, bt)};")
        finally:
            cur.close()

    # --- lifecycle ---
    def close(self) -> None:
        self.conn.close()

    # --- capabilities ---
    def capabilities(self) -> DriverCapabilities:
        # SQLite ne prihvata OFFSET bez LIMIT-a; -1 znači "bez ograničenja"
        return DriverCapabilities(unbounded_limit="LIMIT -1")

    # --- escape ---
    def escape(self, raw: str) -> str:
        return escape_sqlite(raw)

    # --- izvršavanje kompajliranih upita ---
    def select_rows(self, sql: str) -> List[Dict[str, Any]]:
        with self._LOCK:
            cur = self.conn.cursor()
            try:
                cur.execute(sql)
                rows = cur.fetchall()
            finally:
                cur.close()
        return [{k: row[k] for k in row.keys()} for row in rows]

    def select_value(self, sql: str) -> Any:
        with self._LOCK:
            cur = self.conn.cursor()
            try:
                cur.execute(sql)
                row = cur.fetchone()
            finally:
                cur.close()
        return row[0] if row else None

    # --- DDL/DML (parametrizovano) ---
    def execute(self, sql: str, params: Sequence[Any] = ()) -> int:
        with self._LOCK:
            cur = self.conn.cursor()
            try:
                cur.execute(sql, tuple(params))
                return max(cur.rowcount or 0, 0)
            finally:
                cur.close()

    def execute_many(self, sql: str, rows: Iterable[Sequence[Any]]) -> int:
        with self._LOCK:
            cur = self.conn.cursor()
            try:
                cur.executemany(sql, [tuple(r) for r in rows])
                return max(cur.rowcount or 0, 0)
            finally:
                cur.close()
