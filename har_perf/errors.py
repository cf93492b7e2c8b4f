"""
Error types raised by the HAR report pipeline.

Messages of read and parse errors always start with a stable marker so that
callers (and scripts wrapping the CLI) can tell them apart.
"""

READ_ERROR_MARKER = "failed to read file"
PARSE_ERROR_MARKER = "failed to parse HAR JSON"


class HarPerfError(Exception):
    """Base class for all report errors"""


class HarReadError(HarPerfError, OSError):
    """HAR file missing or unreadable"""

    def __init__(self, path, reason: str = ""):
        self.path = path
        message = f"{READ_ERROR_MARKER}: {path}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class HarParseError(HarPerfError, ValueError):
    """Invalid JSON or a HAR document missing required structure"""

    def __init__(self, detail: str = ""):
        message = PARSE_ERROR_MARKER
        if detail:
            message += f": {detail}"
        super().__init__(message)


class ConfigError(HarPerfError, ValueError):
    """Invalid report configuration"""
