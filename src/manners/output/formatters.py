"""Human/JSON output helpers.

The CLI renders ValidationReport for humans (one line per value plus an
indented line per message) or machines (--json, one JSON document).
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from manners.result import ValidationReport


def _format_value(value: object) -> str:
    return _json.dumps(value, separators=(",", ":"), default=repr)


def format_report(report: ValidationReport) -> str:
    """Format one report as human-readable text."""
    if report.ok:
        return f"OK: {_format_value(report.value)}"
    lines = [f"INVALID: {_format_value(report.value)}"]
    lines.extend(f"  - {message}" for message in report.messages)
    return "\n".join(lines)


def format_reports(reports: list[ValidationReport], *, json_output: bool = False) -> str:
    """Format every report for display.

    Args:
        reports: Reports in the order the values were given.
        json_output: If True, return a JSON array; otherwise human-readable text.
    """
    if json_output:
        payload = [r.model_dump() for r in reports]
        return _json.dumps(payload, indent=2, default=repr)
    return "\n".join(format_report(r) for r in reports)
