"""
Top-N selections over request records.

Both lists use a stable sort, so records with equal keys keep their
original entry order.
"""

from typing import List, Sequence

from .models import RankedEntry, RequestRecord


def _ranked(record: RequestRecord) -> RankedEntry:
    return RankedEntry(url=record.url, time_ms=record.time_ms, bytes=record.bytes)


def top_slowest(records: Sequence[RequestRecord], n: int) -> List[RankedEntry]:
    """Up to n records by time_ms descending. n <= 0 gives an empty list."""
    if n <= 0:
        return []
    ordered = sorted(records, key=lambda r: r.time_ms, reverse=True)
    return [_ranked(r) for r in ordered[:n]]


def top_largest(records: Sequence[RequestRecord], n: int) -> List[RankedEntry]:
    """Up to n records by bytes descending. n <= 0 gives an empty list."""
    if n <= 0:
        return []
    ordered = sorted(records, key=lambda r: r.bytes, reverse=True)
    return [_ranked(r) for r in ordered[:n]]
