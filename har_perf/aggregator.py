"""
Totals and per-group statistics over request records.
"""

from collections import defaultdict
from typing import Callable, Dict, List, Optional, Sequence

from .models import GroupBy, GroupStat, ReportSummary, RequestRecord


# Key selector for each supported group-by dimension
GROUP_KEY_SELECTORS: Dict[GroupBy, Callable[[RequestRecord], str]] = {
    GroupBy.HOST: lambda record: record.host,
}


def summarize(records: Sequence[RequestRecord]) -> ReportSummary:
    """Entry count and time/byte totals."""
    return ReportSummary(
        entries=len(records),
        total_time_ms=sum(r.time_ms for r in records),
        total_bytes=sum(r.bytes for r in records),
    )


def p95(values: Sequence[float]) -> float:
    """
    95th percentile by nearest rank.

    Index is ceil(0.95 * count) - 1 on the ascending values, clamped to the
    valid range. Empty input gives 0.0.

    Example:
        [10, 55, 180.25, 320.5] → index 3 → 320.5
    """
    if not values:
        return 0.0

    ordered = sorted(values)
    count = len(ordered)
    # ceil(95 * count / 100) without float rounding
    index = (95 * count + 99) // 100 - 1
    index = max(0, min(index, count - 1))
    return float(ordered[index])


def group_records(
    records: Sequence[RequestRecord],
    group_by: Optional[GroupBy] = None,
) -> List[GroupStat]:
    """
    Bucket records by a key and compute statistics per bucket.

    Args:
        records: Extracted request records
        group_by: Grouping dimension, or None for no grouping

    Returns:
        GroupStat list ordered by total time descending, then key ascending.
        Empty when group_by is None.
    """
    if group_by is None:
        return []

    select_key = GROUP_KEY_SELECTORS[GroupBy(group_by)]
    groups = defaultdict(list)
    for record in records:
        groups[select_key(record)].append(record)

    stats = []
    for key, members in groups.items():
        times = [m.time_ms for m in members]
        total_time = sum(times)
        stats.append(GroupStat(
            key=key,
            count=len(members),
            total_time_ms=total_time,
            avg_time_ms=total_time / len(members),
            p95_time_ms=p95(times),
            total_bytes=sum(m.bytes for m in members),
        ))

    stats.sort(key=lambda s: (-s.total_time_ms, s.key))
    return stats
