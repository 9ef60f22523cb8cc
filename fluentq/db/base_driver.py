# =============================================================================
# File:        fluentq/db/base_driver.py
# Purpose:     Ugovor za izvršni sloj (escape + izvršavanje gotovog SQL-a)
# Author:      Aleksandar Popović
# Created:     2026-10-03
# Updated:     2026-10-10
# =============================================================================
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, Dict, List

from fluentq.db.query import DriverCapabilities


class BaseDBDriver(ABC):
    """
    Query sloj ne otvara, ne zatvara i ne ponavlja konekciju, to je posao drajvera.
    Greške drajvera se propuštaju nepromenjene.
    """

    # --- Meta/capabilities ---
    def capabilities(self) -> DriverCapabilities:
        return DriverCapabilities()

    # --- Lifecycle / konekcija ---
    def close(self) -> None:
        """Opcionalno: uredno zatvaranje konekcije."""
        return None

    # --- Escape ---
    @abstractmethod
    def escape(self, raw: str) -> str:
        """Neutralizuje navodnike/metakaraktere za ugradnju u '...' literal."""

    # --- Izvršavanje ---
    @abstractmethod
    def select_rows(self, sql: str) -> List[Dict[str, Any]]:
        """Izvrši SELECT i vrati redove kao dict-ove (prazna lista ako nema rezultata)."""

    @abstractmethod
    def select_value(self, sql: str) -> Any:
        """Izvrši upit i vrati prvu kolonu prvog reda (None ako nema reda)."""
