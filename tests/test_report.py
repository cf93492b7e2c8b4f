"""
Unit tests for report assembly and rendering.

Tests cover:
- Sample and grouping scenarios
- top_requested / top_returned bookkeeping
- Byte scaling
- Text sections and JSON shape
"""

import json

import pytest

from har_perf.models import GroupBy
from har_perf.parser import load_records
from har_perf.report import build_report, format_bytes, render_json, render_text

JSON_KEYS = {
    "entries",
    "total_time_ms",
    "total_bytes",
    "top_requested",
    "top_returned",
    "group_by",
    "top_slowest",
    "top_largest",
    "top_groups",
}


class TestFormatBytes:

    @pytest.mark.parametrize("value, expected", [
        (0, "0 B"),
        (1023, "1023 B"),
        (1024, "1.00 KB"),
        (3372, "3.29 KB"),
        (5 * 1024 * 1024, "5.00 MB"),
        (3 * 1024 ** 3, "3.00 GB"),
    ])
    def test_scaling(self, value, expected):
        assert format_bytes(value) == expected


class TestBuildReport:

    def test_sample_scenario(self, sample_records):
        report = build_report(sample_records, 10)
        assert report.entries == 4
        assert report.total_time_ms == 565.75
        assert report.total_bytes == 3372
        assert report.top_requested == 10
        assert report.top_returned == 4
        assert report.group_by is None
        assert report.top_groups == []
        assert [r.time_ms for r in report.top_slowest] == [320.5, 180.25, 55.0, 10.0]
        assert [r.bytes for r in report.top_largest] == [2078, 1224, 70, 0]

    def test_top_returned_is_min_of_top_and_entries(self, sample_records):
        for top in range(0, 7):
            report = build_report(sample_records, top)
            assert report.top_returned == min(top, 4)
            assert len(report.top_slowest) == report.top_returned
            assert len(report.top_largest) == report.top_returned

    def test_top_zero_keeps_summary(self, sample_records):
        report = build_report(sample_records, 0, GroupBy.HOST)
        assert report.top_slowest == []
        assert report.top_largest == []
        assert report.top_groups == []
        assert report.entries == 4
        assert report.total_bytes == 3372

    def test_zero_entries(self):
        report = build_report([], 10, GroupBy.HOST)
        assert report.entries == 0
        assert report.total_time_ms == 0
        assert report.total_bytes == 0
        assert report.top_slowest == []
        assert report.top_largest == []
        assert report.top_groups == []

    def test_groups_cut_to_top(self, grouped_har_path):
        records = load_records(grouped_har_path)
        report = build_report(records, 2, GroupBy.HOST)
        assert [g.key for g in report.top_groups] == ["cdn.example.com", "api.example.com"]
        cdn = report.top_groups[0]
        assert cdn.count == 2
        assert cdn.total_time_ms == 350.0
        assert cdn.avg_time_ms == 175.0
        assert cdn.p95_time_ms == 300.0
        assert cdn.total_bytes == 390

    def test_all_groups_when_top_large(self, grouped_har_path):
        records = load_records(grouped_har_path)
        report = build_report(records, 10, GroupBy.HOST)
        assert sum(g.count for g in report.top_groups) == report.entries


class TestRenderText:

    def test_header_and_sections(self, sample_records):
        text = render_text(build_report(sample_records, 10))
        lines = text.splitlines()
        assert lines[0] == "entries: 4"
        assert lines[1] == "total_time_ms: 565.75"
        assert lines[2] == "total_bytes: 3.29 KB"
        assert "slowest 4:" in lines
        assert "largest 4 by bytes:" in lines
        assert "groups by host" not in text

    def test_slowest_rows_in_order(self, sample_records):
        lines = render_text(build_report(sample_records, 10)).splitlines()
        start = lines.index("slowest 4:") + 1
        assert lines[start] == "  320.50 ms https://example.com/a"
        assert lines[start + 1] == "  180.25 ms https://example.com/c"
        assert lines[start + 3] == "   10.00 ms https://example.com/d"

    def test_largest_rows_use_scaled_sizes(self, sample_records):
        lines = render_text(build_report(sample_records, 10)).splitlines()
        start = lines.index("largest 4 by bytes:") + 1
        assert lines[start] == "   2.03 KB  https://example.com/c"
        assert lines[start + 3] == "       0 B  https://example.com/d"

    def test_group_section(self, grouped_har_path):
        report = build_report(load_records(grouped_har_path), 2, GroupBy.HOST)
        text = render_text(report)
        assert "groups by host (top 2):" in text
        group_lines = text.split("groups by host (top 2):\n", 1)[1].splitlines()
        assert group_lines[0].endswith("cdn.example.com")
        assert "350.00 ms total" in group_lines[0]
        assert "175.00 ms avg" in group_lines[0]
        assert "300.00 ms p95" in group_lines[0]
        assert "390 B" in group_lines[0]
        assert group_lines[1].endswith("api.example.com")


class TestRenderJson:

    def test_exact_keys_without_grouping(self, sample_records):
        data = json.loads(render_json(build_report(sample_records, 2)))
        assert set(data) == JSON_KEYS
        assert data["group_by"] is None
        assert data["top_groups"] == []
        assert data["top_requested"] == 2
        assert data["top_returned"] == 2
        assert data["top_slowest"][0] == {"url": "https://example.com/a", "time_ms": 320.5, "bytes": 1224}

    def test_group_shape(self, grouped_har_path):
        report = build_report(load_records(grouped_har_path), 2, GroupBy.HOST)
        data = json.loads(render_json(report))
        assert data["group_by"] == "host"
        assert set(data["top_groups"][0]) == {
            "key", "count", "total_time_ms", "avg_time_ms", "p95_time_ms", "total_bytes",
        }

    def test_full_float_precision(self):
        from .conftest import make_record

        records = [make_record("https://x/1", 1.0 / 3.0)]
        data = json.loads(render_json(build_report(records, 1)))
        assert data["total_time_ms"] == 1.0 / 3.0
        assert isinstance(data["total_bytes"], int)
