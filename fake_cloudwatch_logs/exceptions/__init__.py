# Base exception class
from .base import FakeCloudWatchLogsError

# Domain-specific exceptions
from .domain_exceptions import (
    ConsistencyError,
    InvalidTokenError,
    ResourceNotFoundError,
    UnsupportedOperationError,
    ValidationError,
)

__all__ = [
    # Base exception
    "FakeCloudWatchLogsError",

    # Domain exceptions (alphabetically ordered)
    "ConsistencyError",
    "InvalidTokenError",
    "ResourceNotFoundError",
    "UnsupportedOperationError",
    "ValidationError",
]
