"""
Pydantic models for HAR documents and performance reports.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List
from enum import Enum


class GroupBy(str, Enum):
    """Dimensions requests can be grouped by"""
    HOST = "host"


# ============================================================================
# HAR DOCUMENT (typed intermediate)
# ============================================================================

class HarContent(BaseModel):
    """response.content block"""
    model_config = ConfigDict(allow_inf_nan=False)

    size: Optional[float] = Field(default=None, description="Decoded body size in bytes")


class HarResponse(BaseModel):
    """Response half of an entry. Every size field is optional."""
    model_config = ConfigDict(populate_by_name=True, allow_inf_nan=False)

    body_size: Optional[float] = Field(default=None, alias="bodySize", description="Transferred body size")
    headers_size: Optional[float] = Field(default=None, alias="headersSize", description="Response header size")
    content: Optional[HarContent] = Field(default=None, description="Response content info")


class HarRequest(BaseModel):
    """Request half of an entry"""
    url: str = Field(description="Absolute request URL")


class HarEntry(BaseModel):
    """Single request/response pair"""
    model_config = ConfigDict(allow_inf_nan=False)

    time: float = Field(description="Total elapsed time in ms")
    request: HarRequest
    response: HarResponse = Field(default_factory=HarResponse)


class HarLog(BaseModel):
    entries: List[HarEntry]


class HarDocument(BaseModel):
    """HAR root: only log.entries is required"""
    log: HarLog


# ============================================================================
# REPORT ENTITIES
# ============================================================================

class RequestRecord(BaseModel):
    """Normalized facts about one entry"""
    model_config = ConfigDict(frozen=True)

    url: str = Field(description="Request URL")
    time_ms: float = Field(ge=0, description="Total time in ms")
    bytes: int = Field(ge=0, description="Response size in bytes")
    host: str = Field(description="URL authority")


class RankedEntry(BaseModel):
    """Row of a top-N list"""
    url: str
    time_ms: float
    bytes: int


class ReportSummary(BaseModel):
    entries: int = Field(description="Number of entries")
    total_time_ms: float = Field(description="Sum of entry times")
    total_bytes: int = Field(description="Sum of entry sizes")


class GroupStat(BaseModel):
    """Statistics for one group key"""
    key: str = Field(description="Group key, e.g. a host")
    count: int = Field(description="Requests in the group")
    total_time_ms: float = Field(description="Sum of member times")
    avg_time_ms: float = Field(description="Mean member time")
    p95_time_ms: float = Field(description="Nearest-rank 95th percentile time")
    total_bytes: int = Field(description="Sum of member sizes")


class HarReport(BaseModel):
    """Complete report, serialized as-is for JSON output"""

    # Summary
    entries: int
    total_time_ms: float
    total_bytes: int

    # Top-N
    top_requested: int = Field(description="Configured N")
    top_returned: int = Field(description="Rows actually returned")

    # Grouping
    group_by: Optional[GroupBy] = Field(default=None, description="Group key name, null when not grouping")

    top_slowest: List[RankedEntry] = Field(default_factory=list)
    top_largest: List[RankedEntry] = Field(default_factory=list)
    top_groups: List[GroupStat] = Field(default_factory=list)
