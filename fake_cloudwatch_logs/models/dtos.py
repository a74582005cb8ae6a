"""
Request DTOs (Data Transfer Objects)

These models represent the request side of the three emulated operations.
They only check shape and types; rules that depend on several parameters
(orderBy vs. prefix) or on store state (unknown group) are enforced by the
read handlers so the error messages match the service's.
"""

from datetime import datetime
from typing import Optional, Union

from pydantic import Field

from .base import ServiceModel


class DescribeLogGroupsRequest(ServiceModel):
    """Parameters for DescribeLogGroups."""

    next_token: Optional[str] = Field(None, description="Token from a previous page")
    limit: Optional[int] = Field(None, ge=1, description="Maximum groups to return")


class DescribeLogStreamsRequest(ServiceModel):
    """Parameters for DescribeLogStreams."""

    log_group_name: Optional[str] = Field(None, description="Group whose streams are listed (required)")
    order_by: Optional[str] = Field(None, description="LogStreamName (default) or LastEventTime")
    descending: bool = Field(False, description="Reverse the final ordering")
    log_stream_name_prefix: Optional[str] = Field(None, description="Only streams whose name starts with this")
    next_token: Optional[str] = Field(None, description="Token from a previous page")
    limit: Optional[int] = Field(None, ge=1, description="Maximum streams to return")


class GetLogEventsRequest(ServiceModel):
    """Parameters for GetLogEvents."""

    log_group_name: Optional[str] = Field(None, description="Group holding the stream")
    log_stream_name: Optional[str] = Field(None, description="Stream to read")
    start_time: Optional[Union[int, datetime]] = Field(None, description="Inclusive lower bound on timestamp")
    end_time: Optional[Union[int, datetime]] = Field(None, description="Exclusive upper bound on timestamp")
    next_token: Optional[str] = Field(None, description="Forward or backward token from a previous page")
    limit: Optional[int] = Field(None, ge=1, description="Maximum events to return")
