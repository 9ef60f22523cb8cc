# ========================================================================
# File:       fluentq/managers/error_manager.py
# Purpose:    Evidencija grešaka + logovanje (greške se NE gutaju)
# Author:     Aleksandar Popovic
# Created:    2026-10-02
# Updated:    2026-10-17
# ========================================================================

from fluentq.config.env import EnvLoader
from fluentq.handlers.error_handler import ErrorHandler
from fluentq.managers.log_manager import LogManager


class ErrorManager:
    _errors = []
    _dev_mode = False
    _initialized = False

    @classmethod
    def initialize(cls, dev_mode: bool = None):
        cls._errors = []
        cls._dev_mode = EnvLoader.get_bool("APP_DEBUG", False) if dev_mode is None else dev_mode
        cls._initialized = True

    @classmethod
    def create(cls, error: Exception, context: str = None):
        """
        Beleži grešku i upisuje je u log. Pozivalac je i dalje dužan
        da izuzetak prosledi dalje (raise), ovde se ništa ne hvata.
        """
        if not cls._initialized:
            cls.initialize()

        cls._errors.append(error)
        formatted = ErrorHandler.format_error(error)
        if context:
            formatted = f"{context}: {formatted}"

        ErrorHandler.display(error, dev_mode=cls._dev_mode)
        LogManager.error(f"{formatted}\n{ErrorHandler.get_traceback(error)}")

    @classmethod
    def read(cls, last_only: bool = True):
        if last_only:
            return cls._errors[-1] if cls._errors else None
        return list(cls._errors)

    @classmethod
    def delete(cls):
        cls._errors.clear()
