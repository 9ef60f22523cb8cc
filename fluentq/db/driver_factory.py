# =============================================================================
# File:        fluentq/db/driver_factory.py
# Purpose:     Kreiranje izvršnog drajvera iz .env (DB_DRIVER / SQLITE_PATH)
# Author:      Aleksandar Popović
# Created:     2026-10-05
# Updated:     2026-10-12
# =============================================================================
from __future__ import annotations

from typing import Any, Dict, Optional

from fluentq.config.env import EnvLoader
from fluentq.db.base_driver import BaseDBDriver
from fluentq.db.sqlite_driver import SQLiteDriver, DEFAULT_PATH
from fluentq.managers.log_manager import LogManager

DRIVERS = {
    "sqlite": SQLiteDriver,
}


def driver_config_from_env() -> Dict[str, Any]:
    EnvLoader.load()
    driver_key = (EnvLoader.get("DB_DRIVER", "sqlite") or "sqlite").strip().lower()
    if driver_key not in DRIVERS:
        raise ValueError(f"Nepoznat DB_DRIVER u .env: {driver_key}")
    params = {"path": EnvLoader.get("SQLITE_PATH", DEFAULT_PATH) or DEFAULT_PATH}
    return {"driver": driver_key, "params": params, "source": "env"}


def create_driver(driver_key: str, params: Optional[Dict[str, Any]] = None) -> BaseDBDriver:
    key = (driver_key or "").strip().lower()
    if key not in DRIVERS:
        raise ValueError(f"Nepoznat driver_key: {driver_key}")
    driver = DRIVERS[key](**(params or {}))
    LogManager.info(f"[Query] activate -> driver={key} params={params}")
    return driver


def driver_from_env() -> BaseDBDriver:
    """Drajver po .env podešavanjima; vlasnik (pozivalac) ga zatvara sa close()."""
    cfg = driver_config_from_env()
    return create_driver(cfg["driver"], cfg["params"])
