# Base mixin
from .base import ServiceModel

# Core domain models
from .domain_models import (
    TenantScope,
    LogGroup,
    LogStream,
    StreamOrder,
    LogEvent,
)

# Request DTOs
from .dtos import (
    DescribeLogGroupsRequest,
    DescribeLogStreamsRequest,
    GetLogEventsRequest,
)

# Response views
from .views import (
    DescribeLogGroupsResponse,
    DescribeLogStreamsResponse,
    GetLogEventsResponse,
)

__all__ = [
    # Base mixin
    "ServiceModel",

    # Domain models
    "TenantScope",
    "LogGroup",
    "LogStream",
    "StreamOrder",
    "LogEvent",

    # Request DTOs
    "DescribeLogGroupsRequest",
    "DescribeLogStreamsRequest",
    "GetLogEventsRequest",

    # Response views
    "DescribeLogGroupsResponse",
    "DescribeLogStreamsResponse",
    "GetLogEventsResponse",
]
