"""
Report assembly and rendering (text and JSON).
"""

import json
import logging
from typing import List, Optional, Sequence

from .aggregator import group_records, summarize
from .models import GroupBy, HarReport, RequestRecord
from .ranker import top_largest, top_slowest

logger = logging.getLogger(__name__)

KB = 1024
MB = 1024 * KB
GB = 1024 * MB


# ============================================================================
# REPORT ASSEMBLY
# ============================================================================

def build_report(
    records: Sequence[RequestRecord],
    top: int,
    group_by: Optional[GroupBy] = None,
) -> HarReport:
    """
    Combine totals, top-N lists and (optionally) group statistics.

    Args:
        records: Extracted request records
        top: Rows per top-N list; also caps the number of groups
        group_by: Grouping dimension, or None

    Returns:
        HarReport
    """
    summary = summarize(records)
    slowest = top_slowest(records, top)
    largest = top_largest(records, top)
    groups = group_records(records, group_by)[:max(top, 0)]

    logger.info(
        f"Report: {summary.entries} entries, {len(slowest)} ranked rows, {len(groups)} groups"
    )

    return HarReport(
        entries=summary.entries,
        total_time_ms=summary.total_time_ms,
        total_bytes=summary.total_bytes,
        top_requested=top,
        top_returned=len(slowest),
        group_by=group_by,
        top_slowest=slowest,
        top_largest=largest,
        top_groups=groups,
    )


# ============================================================================
# FORMATTING
# ============================================================================

def format_bytes(n: int) -> str:
    """
    Human-readable size with 1024-based units.

    Examples:
        70 → 70 B
        3372 → 3.29 KB
        5242880 → 5.00 MB
    """
    if n < KB:
        return f"{n} B"
    if n < MB:
        return f"{n / KB:.2f} KB"
    if n < GB:
        return f"{n / MB:.2f} MB"
    return f"{n / GB:.2f} GB"


def render_text(report: HarReport) -> str:
    lines: List[str] = []

    lines.append(f"entries: {report.entries}")
    lines.append(f"total_time_ms: {report.total_time_ms:.2f}")
    lines.append(f"total_bytes: {format_bytes(report.total_bytes)}")

    lines.append("")
    lines.append(f"slowest {report.top_returned}:")
    for row in report.top_slowest:
        lines.append(f"{row.time_ms:>8.2f} ms {row.url}")

    lines.append("")
    lines.append(f"largest {report.top_returned} by bytes:")
    for row in report.top_largest:
        lines.append(f"{format_bytes(row.bytes):>10}  {row.url}")

    if report.group_by is not None:
        lines.append("")
        lines.append(f"groups by {report.group_by.value} (top {len(report.top_groups)}):")
        for group in report.top_groups:
            lines.append(
                f"{group.count:>4} req  "
                f"{group.total_time_ms:>8.2f} ms total  "
                f"{group.avg_time_ms:>8.2f} ms avg  "
                f"{group.p95_time_ms:>8.2f} ms p95  "
                f"{format_bytes(group.total_bytes):>10}  "
                f"{group.key}"
            )

    return '\n'.join(lines)


def render_json(report: HarReport) -> str:
    """Pretty JSON with raw integer bytes and full-precision times."""
    return json.dumps(report.model_dump(mode='json'), indent=2, ensure_ascii=False)
