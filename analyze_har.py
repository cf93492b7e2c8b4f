#!/usr/bin/env python3
"""
HAR Performance Analyzer

Summarizes request timing and payload size from a HAR capture.

Usage:
    python analyze_har.py output/requests.har
    python analyze_har.py output/requests.har --top 5 --json
    python analyze_har.py output/requests.har --group-by host
"""

import argparse
import logging
import sys
from typing import List, Optional, Tuple

from dotenv import load_dotenv

from har_perf import __version__
from har_perf.config import Defaults, ReportConfig, build_config, default_log_level, default_top
from har_perf.errors import ConfigError, HarPerfError
from har_perf.models import GroupBy
from har_perf.parser import load_records
from har_perf.report import build_report, render_json, render_text

logger = logging.getLogger(__name__)


# ============================================================================
# ARGUMENT PARSING
# ============================================================================

def non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}")
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {number}")
    return number


def build_parser(top_default: int = Defaults.TOP) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='perf_tool',
        description='Analyze HAR files',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  perf_tool output/requests.har
  perf_tool output/requests.har --top 5 --json
  perf_tool output/requests.har --group-by host
        """
    )
    parser.add_argument(
        'path',
        type=str,
        help='Path to the HAR file'
    )
    parser.add_argument(
        '--top',
        type=non_negative_int,
        default=top_default,
        help=f'Show top N slowest and largest requests (default: {top_default})'
    )
    parser.add_argument(
        '--json',
        action='store_true',
        help='Output JSON instead of text'
    )
    parser.add_argument(
        '--group-by',
        type=str,
        choices=[g.value for g in GroupBy],
        default=None,
        help='Group request metrics by dimension'
    )
    parser.add_argument(
        '--include-headers',
        action='store_true',
        help='Count response header bytes in request sizes'
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Log pipeline steps to stderr'
    )
    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )
    return parser


def parse_config(argv: Optional[List[str]] = None) -> Tuple[ReportConfig, str]:
    """
    Parse CLI arguments into a ReportConfig.

    Configuration errors exit through parser.error (status 2).

    Returns:
        (ReportConfig, log level name)
    """
    try:
        top_default = default_top()
    except ConfigError as e:
        build_parser().error(str(e))

    parser = build_parser(top_default)
    args = parser.parse_args(argv)

    try:
        config = build_config(
            path=args.path,
            top=args.top,
            json_output=args.json,
            group_by=args.group_by,
            include_headers=args.include_headers,
        )
    except ConfigError as e:
        parser.error(str(e))

    if args.verbose:
        return config, "INFO"

    try:
        return config, default_log_level()
    except ConfigError as e:
        parser.error(str(e))


# ============================================================================
# MAIN PIPELINE
# ============================================================================

def run(config: ReportConfig) -> str:
    """
    Read, analyze and render one HAR file.

    Raises:
        HarReadError: If the file can't be read
        HarParseError: If the HAR document is malformed
    """
    logger.info(f"Analyzing {config.path}")
    records = load_records(config.path, include_headers=config.include_headers)
    logger.info(f"Extracted {len(records)} records")

    report = build_report(records, config.top, config.group_by)

    if config.json_output:
        return render_json(report)
    return render_text(report)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    load_dotenv()

    config, log_level = parse_config(argv)

    logging.basicConfig(
        level=log_level,
        format=Defaults.LOG_FORMAT,
    )
    logger.info(f"Top N: {config.top}, group by: {config.group_by.value if config.group_by else None}")

    try:
        output = run(config)
    except HarPerfError as e:
        logger.error(str(e))
        return 1
    except KeyboardInterrupt:
        logger.warning("Analysis interrupted by user")
        return 130

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
