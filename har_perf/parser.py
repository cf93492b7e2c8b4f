"""
HAR loading, validation, and record extraction.
"""

import logging
from pathlib import Path
from typing import List, Optional, Union
from urllib.parse import urlparse

from pydantic import ValidationError

from .errors import HarParseError, HarReadError
from .models import HarDocument, HarEntry, RequestRecord

logger = logging.getLogger(__name__)

UNKNOWN_HOST = 'unknown'


# ============================================================================
# HAR LOADING AND VALIDATION
# ============================================================================

def load_har_file(har_path: Path) -> bytes:
    """
    Read a HAR file from disk. The handle is closed before anything is parsed.

    Args:
        har_path: Path to HAR file

    Returns:
        Raw file contents

    Raises:
        HarReadError: If the file doesn't exist or can't be read
    """
    har_path = Path(har_path)
    if not har_path.exists():
        raise HarReadError(har_path, "no such file")

    try:
        with open(har_path, 'rb') as f:
            data = f.read()
    except OSError as e:
        raise HarReadError(har_path, e.strerror or str(e)) from e

    logger.info(f"Read {len(data)} bytes from {har_path}")
    return data


def parse_har(data: Union[bytes, str]) -> HarDocument:
    """
    Validate raw JSON into a typed HAR document.

    Only log.entries[].time and log.entries[].request.url are required;
    response sizes are optional.

    Args:
        data: HAR JSON text

    Returns:
        HarDocument

    Raises:
        HarParseError: If the JSON is invalid or required fields are missing
    """
    try:
        document = HarDocument.model_validate_json(data)
    except ValidationError as e:
        raise HarParseError(str(e)) from e

    logger.info(f"Parsed HAR document with {len(document.log.entries)} entries")
    return document


# ============================================================================
# RECORD EXTRACTION
# ============================================================================

def _non_negative(value: Optional[float]) -> Optional[int]:
    """
    Size as int, or None when absent or negative (HAR uses -1 for unknown).

    Fractional sizes are truncated toward zero.
    """
    if value is None or value < 0:
        return None
    return int(value)


def entry_bytes(entry: HarEntry, include_headers: bool = False) -> int:
    """
    Response size of an entry.

    response.content.size is preferred; response.bodySize is used when the
    content size is absent or negative. Anything still unknown counts as 0.
    With include_headers, a known response.headersSize is added on top.
    """
    response = entry.response
    content_size = _non_negative(response.content.size) if response.content else None
    size = content_size if content_size is not None else _non_negative(response.body_size)
    size = size or 0

    if include_headers:
        size += _non_negative(response.headers_size) or 0

    return size


def extract_host(url: str) -> str:
    """
    Authority part of a URL.

    Examples:
        https://cdn.example.com/app.js → cdn.example.com
        http://localhost:8080/api → localhost:8080
        not a url → unknown
    """
    try:
        netloc = urlparse(url).netloc
    except ValueError:
        # e.g. unbalanced brackets in an IPv6 literal
        return UNKNOWN_HOST
    return netloc or UNKNOWN_HOST


def extract_record(entry: HarEntry, include_headers: bool = False) -> RequestRecord:
    time_ms = entry.time
    if time_ms < 0:
        logger.debug(f"Negative time {time_ms} clamped to 0 for {entry.request.url}")
        time_ms = 0.0

    return RequestRecord(
        url=entry.request.url,
        time_ms=time_ms,
        bytes=entry_bytes(entry, include_headers=include_headers),
        host=extract_host(entry.request.url),
    )


def extract_records(document: HarDocument, include_headers: bool = False) -> List[RequestRecord]:
    """
    Flatten a HAR document into request records, in original entry order.

    Args:
        document: Parsed HAR document
        include_headers: Add response header bytes to each record's size

    Returns:
        List of RequestRecord
    """
    return [extract_record(entry, include_headers=include_headers) for entry in document.log.entries]


def load_records(har_path: Path, include_headers: bool = False) -> List[RequestRecord]:
    """
    Read, parse and extract a HAR file in one go.

    Raises:
        HarReadError: If the file can't be read
        HarParseError: If the document is malformed
    """
    document = parse_har(load_har_file(har_path))
    return extract_records(document, include_headers=include_headers)
