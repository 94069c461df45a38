# Area: Shared
"""Error formatting for structured gateway error logs."""

from __future__ import annotations
import json
from typing import Any, Dict, List, Optional


def format_error_block(
    error_type: str,
    operation: str,
    request_payload: Dict[str, Any],
    raw_output: Optional[Any] = None,
    validation_errors: Optional[List[str]] = None,
    detail: Optional[str] = None,
) -> str:
    """Format a structured error block for a failed gateway call."""
    from datetime import datetime, timezone

    timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"

    lines = [
        "",
        "=" * 64,
        " GATEWAY ERROR",
        "=" * 64,
        f" Timestamp:    {timestamp}",
        f" Error Type:   {error_type}",
        f" Operation:    {operation}",
    ]

    if detail:
        lines.append(f" Detail:       {detail}")

    lines.append("")
    lines.append(" ── REQUEST PAYLOAD " + "─" * 44)
    lines.append(indent_json(request_payload))

    if raw_output is not None:
        lines.append("")
        lines.append(" ── RAW OUTPUT (from service) " + "─" * 34)
        if isinstance(raw_output, dict):
            lines.append(indent_json(raw_output))
        else:
            lines.append(f" {raw_output!r}")

    if validation_errors:
        lines.append("")
        lines.append(" ── VALIDATION ERRORS " + "─" * 42)
        for error in validation_errors:
            lines.append(f" • {error}")

    lines.append("")
    lines.append("=" * 64)
    lines.append("")

    return "\n".join(lines)


def indent_json(data: Dict[str, Any], indent: int = 2) -> str:
    """Format JSON with indentation for error logs."""
    try:
        formatted = json.dumps(data, indent=indent, default=str)
        return "\n".join(" " + line for line in formatted.split("\n"))
    except (TypeError, ValueError):
        return f" {repr(data)}"
