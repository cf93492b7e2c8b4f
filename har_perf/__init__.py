"""
HAR Perf - Timing and payload size statistics for HAR capture files.

This package provides tools for:
- Loading and validating HAR documents into typed records
- Aggregating totals and per-host statistics
- Ranking the slowest and largest requests
- Rendering text or JSON reports
"""

__version__ = "1.0.0"
