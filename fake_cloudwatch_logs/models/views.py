"""
Response View Models

Read-side results of the three emulated operations. Field aliases match the
service's response members, so ``to_service_dict()`` yields exactly what a
botocore client would have parsed from the wire.
"""

from typing import List, Optional

from pydantic import Field

from .base import ServiceModel
from .domain_models import LogEvent, LogGroup, LogStream


class DescribeLogGroupsResponse(ServiceModel):
    """One page of log groups."""

    log_groups: List[LogGroup] = Field(default_factory=list, description="Groups on this page")
    next_token: Optional[str] = Field(None, description="Present only when more groups remain")


class DescribeLogStreamsResponse(ServiceModel):
    """One page of log streams."""

    log_streams: List[LogStream] = Field(default_factory=list, description="Streams on this page")
    next_token: Optional[str] = Field(None, description="Present only when more streams remain")


class GetLogEventsResponse(ServiceModel):
    """
    One tail-anchored page of log events, oldest first.

    Both tokens are minted on every read of a known stream, even when the
    page they point to is empty. They are ``None`` only for unknown streams.
    """

    events: List[LogEvent] = Field(default_factory=list, description="Events on this page, ascending by timestamp")
    next_forward_token: Optional[str] = Field(None, description="Token moving toward newer events")
    next_backward_token: Optional[str] = Field(None, description="Token moving toward older events")
