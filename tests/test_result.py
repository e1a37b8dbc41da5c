"""Tests for ValidationReport and CacheInfo."""

import json

import pytest

from manners.result import CacheInfo, ValidationReport


class TestValidationReport:
    def test_from_empty_messages(self) -> None:
        report = ValidationReport.from_messages(24, [])
        assert report.ok is True
        assert report.value == 24
        assert report.messages == []

    def test_from_messages(self) -> None:
        report = ValidationReport.from_messages(1, ["must be even"])
        assert report.ok is False
        assert report.messages == ["must be even"]

    def test_json_serialization(self) -> None:
        report = ValidationReport.from_messages({"a": 1}, ["must have key b"])
        parsed = json.loads(report.model_dump_json())
        assert parsed == {"ok": False, "value": {"a": 1}, "messages": ["must have key b"]}

    def test_frozen(self) -> None:
        report = ValidationReport(ok=True)
        with pytest.raises(Exception):
            report.ok = False  # type: ignore[misc]


class TestCacheInfo:
    def test_defaults(self) -> None:
        info = CacheInfo()
        assert (info.hits, info.misses, info.size, info.enabled) == (0, 0, 0, True)
