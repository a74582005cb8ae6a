"""
Domain Models for the fake CloudWatch Logs service

Organized by domain:
1. Tenant Scope
2. Log Group Models
3. Log Stream Models
4. Log Event Models

Timestamps are numbers in epoch milliseconds. The service reports integers,
but callers may ingest floats such as ``time.time() * 1000``. Groups and
streams keep unknown attributes (``extra='allow'``) so fixtures captured from
a real account round-trip without loss.
"""

from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt

from .base import ServiceModel

EpochMillis = Union[StrictInt, StrictFloat]


# =============================================================================
# Tenant Scope
# =============================================================================

class TenantScope(BaseModel):
    """
    Isolation unit for every group, stream and event.

    Identified by the caller's account (access key id) and region. Scopes are
    frozen and hashable so they can key the store's nested mappings.
    """

    account: str = Field(..., min_length=1, description="Account or access key id")
    region: str = Field(..., min_length=1, description="AWS region name")

    model_config = ConfigDict(frozen=True)

    @property
    def key(self) -> str:
        """Return the ``account::region`` form used in fixture file names."""
        return f"{self.account}::{self.region}"

    def __str__(self) -> str:
        return self.key


# =============================================================================
# Log Group Domain
# =============================================================================

class LogGroup(ServiceModel):
    """A log group as returned by DescribeLogGroups. Never mutated after creation."""

    log_group_name: Optional[str] = Field(None, description="Group name, unique within a scope by convention")
    arn: Optional[str] = Field(None, description="Group ARN")
    creation_time: Optional[int] = Field(None, description="Creation time in epoch millis")
    stored_bytes: Optional[int] = Field(None, description="Stored bytes reported for the group")
    metric_filter_count: Optional[int] = Field(None, description="Number of metric filters")

    model_config = ConfigDict(extra='allow')


# =============================================================================
# Log Stream Domain
# =============================================================================

class StreamOrder(str, Enum):
    """Orderings accepted by DescribeLogStreams."""
    LOG_STREAM_NAME = "LogStreamName"
    LAST_EVENT_TIME = "LastEventTime"


class LogStream(ServiceModel):
    """
    A log stream as returned by DescribeLogStreams.

    The three event-derived fields stay ``None`` until the first batch of
    events is ingested and are only ever changed by event ingestion.
    """

    log_stream_name: Optional[str] = Field(None, description="Stream name, unique within its group")
    arn: Optional[str] = Field(None, description="Stream ARN")
    creation_time: Optional[int] = Field(None, description="Creation time in epoch millis")
    upload_sequence_token: Optional[str] = Field(None, description="Sequence token for PutLogEvents")
    stored_bytes: Optional[int] = Field(None, description="Stored bytes reported for the stream")

    first_event_timestamp: Optional[EpochMillis] = Field(None, description="Earliest event timestamp ever observed")
    last_event_timestamp: Optional[EpochMillis] = Field(None, description="Delayed high-water mark of event timestamps")
    last_ingestion_time: Optional[EpochMillis] = Field(None, description="Latest ingestion time observed")

    model_config = ConfigDict(extra='allow', validate_assignment=True)


# =============================================================================
# Log Event Domain
# =============================================================================

class LogEvent(ServiceModel):
    """
    A single log event (the service's OutputLogEvent).

    Validated strictly: timestamps must already be ints or floats and the
    message a string, no coercion from other types (bools and numeric strings
    are rejected).
    """

    timestamp: EpochMillis = Field(..., description="Event time in epoch millis")
    message: str = Field(..., description="Raw log line")
    ingestion_time: EpochMillis = Field(..., description="Time the event was accepted, epoch millis")

    model_config = ConfigDict(strict=True, frozen=True)
