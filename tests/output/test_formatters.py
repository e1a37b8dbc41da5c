"""Tests for report formatting."""

import json

from manners.output.formatters import format_report, format_reports
from manners.result import ValidationReport


class TestFormatReport:
    def test_ok(self) -> None:
        report = ValidationReport.from_messages(24, [])
        assert format_report(report) == "OK: 24"

    def test_invalid_lists_messages(self) -> None:
        report = ValidationReport.from_messages({"a": "x"}, ["m1", "m2"])
        assert format_report(report) == 'INVALID: {"a":"x"}\n  - m1\n  - m2'


class TestFormatReports:
    def test_human_joins_lines(self) -> None:
        reports = [
            ValidationReport.from_messages(1, ["must be even"]),
            ValidationReport.from_messages(2, []),
        ]
        assert format_reports(reports) == "INVALID: 1\n  - must be even\nOK: 2"

    def test_json(self) -> None:
        reports = [ValidationReport.from_messages("x", ["too short"])]
        parsed = json.loads(format_reports(reports, json_output=True))
        assert parsed == [{"ok": False, "value": "x", "messages": ["too short"]}]

    def test_json_falls_back_to_repr(self) -> None:
        marker = object()
        reports = [ValidationReport.from_messages(1, [marker])]
        parsed = json.loads(format_reports(reports, json_output=True))
        assert parsed[0]["messages"] == [repr(marker)]
