# ============================================================================
# File:       fluentq/managers/log_manager.py
# Purpose:    LogManager: klasni API iznad LogHandler-a + ograničena memorija
# Author:     Aleksandar Popovic
# Created:    2026-10-02
# Updated:    2026-10-17
# ============================================================================

from collections import deque

from fluentq.config.env import EnvLoader
from fluentq.handlers.log_handler import LogHandler, LEVELS


class LogManager:
    _log_entries: deque = deque(maxlen=500)
    _initialized = False

    @classmethod
    def initialize(cls):
        size = EnvLoader.get_int("LOG_MEMORY_SIZE", 500)
        cls._log_entries = deque(maxlen=max(1, size))
        cls._initialized = True

    @classmethod
    def create(cls, level: str, message: str):
        """
        Centralni ulaz za log. Pamti u memoriji (bez obzira na LOG_LEVEL)
        i delegira LogHandler-u, koji sam odlučuje da li upisuje u fajl.
        """
        if not cls._initialized:
            cls.initialize()

        level_upper = (level or "INFO").upper()
        if level_upper not in LEVELS:
            level_upper = "INFO"

        cls._log_entries.append((level_upper, message))
        getattr(LogHandler, level_upper.lower())(message)

    @classmethod
    def read(cls, last_only: bool = False, level: str = None):
        entries = list(cls._log_entries)
        if level:
            entries = [e for e in entries if e[0] == level.upper()]
        if last_only:
            return entries[-1] if entries else None
        return entries

    @classmethod
    def delete(cls):
        cls._log_entries.clear()

    # === Prečice ===

    @classmethod
    def debug(cls, message: str):
        cls.create("DEBUG", message)

    @classmethod
    def info(cls, message: str):
        cls.create("INFO", message)

    @classmethod
    def success(cls, message: str):
        cls.create("SUCCESS", message)

    @classmethod
    def warning(cls, message: str):
        cls.create("WARNING", message)

    @classmethod
    def error(cls, message: str):
        cls.create("ERROR", message)

    @classmethod
    def critical(cls, message: str):
        cls.create("CRITICAL", message)
