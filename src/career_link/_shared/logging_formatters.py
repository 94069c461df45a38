# Area: Shared
"""
career_link._shared.logging_formatters — Logging formatters and filters
=======================================================================

Contains formatter/filter classes and the UI mode flag/functions.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone

# Flag to control terminal log output while the console UI is active
_ui_mode_enabled = False


class UIModeFilter(logging.Filter):
    """Filter that suppresses terminal logs when UI mode is enabled.

    In UI mode the console UI draws the screen with direct print() and
    log lines would tear it.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        return not _ui_mode_enabled


class TerminalFormatter(logging.Formatter):
    """Colored formatter for terminal output."""

    COLORS = {
        "DEBUG": "\033[36m",     # Cyan
        "INFO": "\033[32m",      # Green
        "WARNING": "\033[33m",   # Yellow
        "ERROR": "\033[31m",     # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        # Colour a copy so the file handler still sees the plain level name.
        record = logging.makeLogRecord(record.__dict__)
        color = self.COLORS.get(record.levelname, self.RESET)
        record.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(record)


class JSONFormatter(logging.Formatter):
    """JSON formatter for file output."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in ("operation", "error_type", "session_id"):
            value = getattr(record, key, None)
            if value is not None:
                log_data[key] = value
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data)


def enable_ui_mode() -> None:
    """Enable UI mode.

    In UI mode:
    - Terminal log output is suppressed
    - Gateway error blocks are not printed to stderr
    - File logging remains unchanged for debugging
    """
    global _ui_mode_enabled
    _ui_mode_enabled = True


def disable_ui_mode() -> None:
    """Disable UI mode (restore terminal logging)."""
    global _ui_mode_enabled
    _ui_mode_enabled = False


def is_ui_mode_enabled() -> bool:
    """Check if UI mode is enabled."""
    return _ui_mode_enabled
