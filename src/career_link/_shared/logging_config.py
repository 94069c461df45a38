# Area: Shared
"""
career_link._shared.logging_config — Structured logging setup
=============================================================

Configures dual logging: terminal (colored) + file (JSON).
Provides gateway error logging.
UI mode suppresses standard logs on the terminal while the console UI
owns it; the file log is unaffected.
"""

from __future__ import annotations
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from .logging_formatters import (
    JSONFormatter,
    TerminalFormatter,
    UIModeFilter,
    is_ui_mode_enabled,
)

if TYPE_CHECKING:
    from ..errors import GatewayError

# Package logger
logger = logging.getLogger("career_link")


def setup_logging(
    log_file_path: str = "career_link.log",
    level: int = logging.INFO,
) -> None:
    """
    Configure logging for the package.

    Parameters
    ----------
    log_file_path : str
        Path to the log file. Defaults to 'career_link.log' in current dir.
    level : int
        Logging level. Defaults to INFO.
    """
    pkg_logger = logging.getLogger("career_link")
    pkg_logger.setLevel(level)

    # Remove existing handlers
    pkg_logger.handlers.clear()

    # Terminal handler with colors
    terminal_handler = logging.StreamHandler(sys.stderr)
    terminal_handler.setLevel(level)
    terminal_handler.setFormatter(TerminalFormatter(
        fmt="%(asctime)s │ %(levelname)s │ %(name)s │ %(message)s",
        datefmt="%H:%M:%S",
    ))
    terminal_handler.addFilter(UIModeFilter())
    pkg_logger.addHandler(terminal_handler)

    # File handler with JSON
    try:
        log_path = Path(log_file_path)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(JSONFormatter())
        pkg_logger.addHandler(file_handler)
    except OSError as e:
        pkg_logger.warning(f"Could not create log file: {e}")

    # Prevent propagation to root logger
    pkg_logger.propagate = False


def log_gateway_error(error: "GatewayError") -> None:
    """
    Log a gateway error in the structured format.

    Parameters
    ----------
    error : GatewayError
        The error to log (GatewayTransportError, GatewaySchemaError,
        or EmptyResponseError).
    """
    error_block = error.format_error_log()

    # Print to terminal (bypassing logger for exact formatting)
    if not is_ui_mode_enabled():
        print(error_block, file=sys.stderr)

    logger.error(
        f"Gateway error: {error.__class__.__name__}\n{error_block}",
        extra={
            "operation": getattr(error, "operation", None),
            "error_type": error.__class__.__name__,
        },
    )
