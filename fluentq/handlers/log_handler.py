# ============================================================================
# File:       fluentq/handlers/log_handler.py
# Purpose:    Upis log linija u fajl uz prag nivoa (LOG_LEVEL)
# Author:     Aleksandar Popovic
# Created:    2026-10-02
# Updated:    2026-10-13
# ============================================================================

import os
import sys
from datetime import datetime
from fluentq.config.env import EnvLoader

LEVELS = {
    "DEBUG": 10,
    "INFO": 20,
    "SUCCESS": 25,
    "WARNING": 30,
    "ERROR": 40,
    "CRITICAL": 50,
}

DEFAULT_LOG_FILE = "data/logs/app.log"


class LogHandler:
    @staticmethod
    def log_file_path() -> str:
        # čita se pri svakom upisu da bi testovi mogli da preusmere log
        return EnvLoader.get("LOG_FILE_PATH", DEFAULT_LOG_FILE) or DEFAULT_LOG_FILE

    @staticmethod
    def threshold() -> int:
        name = (EnvLoader.get("LOG_LEVEL", "info") or "info").strip().upper()
        return LEVELS.get(name, LEVELS["INFO"])

    @staticmethod
    def enabled(level: str) -> bool:
        return LEVELS.get(level.upper(), LEVELS["INFO"]) >= LogHandler.threshold()

    @staticmethod
    def _write(level, message):
        if not LogHandler.enabled(level):
            return
        path = LogHandler.log_file_path()
        try:
            folder = os.path.dirname(path)
            if folder:
                os.makedirs(folder, exist_ok=True)
            timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
            log_entry = f"[{level.upper()}] {timestamp} - {message}\n"
            with open(path, "a", encoding="utf-8") as f:
                f.write(log_entry)
        except OSError as e:
            print(f"❌ Neuspelo logovanje u {path}: {e}", file=sys.stderr)

    @staticmethod
    def debug(message):
        LogHandler._write("DEBUG", message)

    @staticmethod
    def info(message):
        LogHandler._write("INFO", message)

    @staticmethod
    def success(message):
        LogHandler._write("SUCCESS", message)

    @staticmethod
    def warning(message):
        LogHandler._write("WARNING", message)

    @staticmethod
    def error(message):
        LogHandler._write("ERROR", message)

    @staticmethod
    def critical(message):
        LogHandler._write("CRITICAL", message)
