# ========================================================================
# File:       fluentq/config/env.py
# Purpose:    .env konfiguracija query sloja (drajver, SQLite PRAGMA, log)
# Author:     Aleksandar Popovic
# Created:    2026-10-02
# Updated:    2026-10-17 (FLUENTQ_ENV_FILE, get_choice za PRAGMA vrednosti)
# ========================================================================

import os
from pathlib import Path
from typing import Iterable, Optional
from dotenv import load_dotenv

# Eksplicitna putanja do .env; ima prednost nad automatskim traženjem
ENV_FILE_VAR = "FLUENTQ_ENV_FILE"


class EnvLoader:
    """
    Jedino mesto odakle query sloj čita podešavanja (DB_DRIVER, SQLITE_*,
    QUERY_LOG_SQL, LOG_*, APP_DEBUG).

    Redosled za .env: FLUENTQ_ENV_FILE, pa radni direktorijum, pa root projekta.
    Vrednosti iz os.environ uvek pobeđuju .env (load_dotenv bez override-a),
    tako da monkeypatch u testovima i deploy varijable rade bez dodatnog koda.
    """
    _loaded = False
    _loaded_path: Optional[Path] = None

    @staticmethod
    def _find_env_path() -> Optional[Path]:
        explicit = (os.getenv(ENV_FILE_VAR) or "").strip()
        if explicit:
            p = Path(explicit).expanduser()
            return p if p.is_file() else None

        project_root = Path(__file__).resolve().parents[2]
        for p in (Path.cwd() / ".env", project_root / ".env"):
            if p.is_file():
                return p
        return None

    @classmethod
    def load(cls, force: bool = False) -> None:
        if cls._loaded and not force:
            return
        cls._loaded_path = cls._find_env_path()
        if cls._loaded_path:
            load_dotenv(dotenv_path=cls._loaded_path, override=False)
        cls._loaded = True

    @classmethod
    def get(cls, key: str, default=None):
        if not cls._loaded:
            cls.load()
        return os.getenv(key, default)

    @classmethod
    def get_bool(cls, key: str, default: bool = False) -> bool:
        val = cls.get(key, None)
        if val is None:
            return default
        return str(val).strip().lower() in ("1", "true", "yes", "y", "on")

    @classmethod
    def get_int(cls, key: str, default: int = 0) -> int:
        raw = (cls.get(key, "") or "").strip()
        try:
            return int(raw) if raw else default
        except ValueError:
            return default

    @classmethod
    def get_choice(cls, key: str, choices: Iterable[str], default: Optional[str] = None) -> Optional[str]:
        """
        Vrednost iz zatvorenog skupa (npr. SQLITE_SYNCHRONOUS), bez obzira na
        velika/mala slova. Vraća oblik iz `choices`; nepoznato ili prazno -> default.
        """
        raw = (cls.get(key, "") or "").strip().lower()
        for choice in choices:
            if raw == choice.lower():
                return choice
        return default

    @classmethod
    def debug_info(cls) -> dict:
        return {
            "loaded": cls._loaded,
            "env_path": str(cls._loaded_path) if cls._loaded_path else None,
        }
