# ========================================================================
# File:       fluentq/handlers/error_handler.py
# Purpose:    Formatira greške (tip, poruka, traceback) za ErrorManager
# Author:     Aleksandar Popovic
# Created:    2026-10-02
# Updated:    2026-10-09
# ========================================================================

import sys
import traceback


class ErrorHandler:
    @staticmethod
    def format_error(error: Exception) -> str:
        return f"{type(error).__name__}: {str(error)}"

    @staticmethod
    def get_traceback(error: Exception) -> str:
        # radi i van except bloka; uzima traceback vezan za sam izuzetak
        return "".join(traceback.format_exception(type(error), error, error.__traceback__))

    @staticmethod
    def display(error: Exception, dev_mode: bool = True):
        """Ispisuje grešku na stderr u dev režimu, bez logovanja."""
        if dev_mode:
            formatted = ErrorHandler.format_error(error)
            trace = ErrorHandler.get_traceback(error)
            print(f"[ERROR]: {formatted}\n{trace}", file=sys.stderr)
