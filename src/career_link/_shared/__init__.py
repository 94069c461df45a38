# Area: Shared
"""
Shared utilities used by the gateway, the runner and the UI.

This package contains:
- Logging configuration
- Terminal display constants
"""

from .logging_config import setup_logging, log_gateway_error
from .logging_formatters import (
    enable_ui_mode,
    disable_ui_mode,
    is_ui_mode_enabled,
)

__all__ = [
    "setup_logging",
    "log_gateway_error",
    "enable_ui_mode",
    "disable_ui_mode",
    "is_ui_mode_enabled",
]
