"""
fake_cloudwatch_logs - In-memory CloudWatch Logs for tests

Emulates DescribeLogGroups, DescribeLogStreams and GetLogEvents per tenant
scope (account, region), including single-use pagination tokens and the
delayed visibility of a stream's lastEventTimestamp.
"""

from .config import FakeCloudWatchLogsConfig
from .exceptions import (
    ConsistencyError,
    FakeCloudWatchLogsError,
    InvalidTokenError,
    ResourceNotFoundError,
    UnsupportedOperationError,
    ValidationError,
)
from .factories import LogEntityFactory
from .models import (
    DescribeLogGroupsResponse,
    DescribeLogStreamsResponse,
    GetLogEventsResponse,
    LogEvent,
    LogGroup,
    LogStream,
    StreamOrder,
    TenantScope,
)
from .service import FakeCloudWatchLogs

__version__ = "0.1.0"

__all__ = [
    "FakeCloudWatchLogs",
    "FakeCloudWatchLogsConfig",
    "LogEntityFactory",

    # Models
    "TenantScope",
    "LogGroup",
    "LogStream",
    "LogEvent",
    "StreamOrder",
    "DescribeLogGroupsResponse",
    "DescribeLogStreamsResponse",
    "GetLogEventsResponse",

    # Exceptions
    "FakeCloudWatchLogsError",
    "ConsistencyError",
    "InvalidTokenError",
    "ResourceNotFoundError",
    "UnsupportedOperationError",
    "ValidationError",
]
