"""
Pytest configuration and shared fixtures for HAR report tests.
"""

import json
from pathlib import Path
from typing import Any, Dict, List

import pytest

from har_perf.models import RequestRecord

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def make_entry(url: str, time: float, **response: Any) -> Dict[str, Any]:
    """Minimal HAR entry dict; keyword arguments become response fields."""
    return {"time": time, "request": {"url": url}, "response": response}


def make_har(entries: List[Dict[str, Any]]) -> Dict[str, Any]:
    return {"log": {"version": "1.2", "entries": entries}}


def make_record(url: str, time_ms: float, size: int = 0, host: str = "example.com") -> RequestRecord:
    return RequestRecord(url=url, time_ms=time_ms, bytes=size, host=host)


@pytest.fixture
def sample_har_path() -> Path:
    """Four entries on example.com: times [320.5, 55, 180.25, 10]."""
    return FIXTURES_DIR / "sample.har"


@pytest.fixture
def grouped_har_path() -> Path:
    """Five entries across cdn., api. and static.example.com."""
    return FIXTURES_DIR / "grouped.har"


@pytest.fixture
def write_har(tmp_path):
    """Write a HAR dict (or raw text) to a temp file and return its path."""

    def _write(content, name: str = "capture.har") -> Path:
        path = tmp_path / name
        if isinstance(content, str):
            path.write_text(content, encoding="utf-8")
        else:
            path.write_text(json.dumps(content), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_records() -> List[RequestRecord]:
    """Records equivalent to tests/fixtures/sample.har."""
    return [
        make_record("https://example.com/a", 320.5, 1224),
        make_record("https://example.com/b", 55.0, 70),
        make_record("https://example.com/c", 180.25, 2078),
        make_record("https://example.com/d", 10.0, 0),
    ]
