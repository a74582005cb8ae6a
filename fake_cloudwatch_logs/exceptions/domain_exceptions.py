"""
Domain-Specific Exceptions for the fake CloudWatch Logs service

Organized by category:
1. Parameter Validation Errors
2. Resource Not Found Errors
3. Consistency and Precondition Errors
4. Dispatch Errors

Errors in categories 1, 2 and 4 carry the service error code a real client
would see. Consistency errors are programmer/fixture mistakes and have none.
"""

from typing import Any, Dict, Optional

from .base import FakeCloudWatchLogsError


# =============================================================================
# Parameter Validation Errors
# =============================================================================

class ValidationError(FakeCloudWatchLogsError):
    """Raised when request parameters are malformed or mutually incompatible.

    Used for:
    - Missing required parameters (e.g. logGroupName)
    - Unsupported enum values (e.g. orderBy)
    - Mutually exclusive parameters (orderBy=LastEventTime with a prefix)
    """

    error_code = "InvalidParameterException"

    def __init__(self, message: str, errors: Optional[Dict[str, Any]] = None, original_error: Optional[Exception] = None):
        """Initialize validation error.

        Args:
            message: Human-readable error message
            errors: Dictionary of field-level validation errors
            original_error: The original exception that caused this error
        """
        self.errors = errors or {}
        context = {}
        if self.errors:
            context['validation_errors'] = self.errors
        super().__init__(message, original_error, context)


class InvalidTokenError(ValidationError):
    """Raised when a pagination token is unknown or was already consumed."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"invalid nextToken: {token}")


# =============================================================================
# Resource Not Found Errors
# =============================================================================

class ResourceNotFoundError(FakeCloudWatchLogsError):
    """Raised when a query targets a log group that was never populated.

    A group that is known but holds zero streams is *not* an error; listing
    it returns an empty page.
    """

    error_code = "ResourceNotFoundException"

    def __init__(self, message: str, resource_type: Optional[str] = None, resource_name: Optional[str] = None, original_error: Optional[Exception] = None):
        """Initialize not found error.

        Args:
            message: Human-readable error message
            resource_type: Type of resource not found (e.g., 'log_group')
            resource_name: Name of the resource not found
            original_error: The original exception that caused this error
        """
        self.resource_type = resource_type
        self.resource_name = resource_name
        context = {}
        if resource_type:
            context['resource_type'] = resource_type
        if resource_name:
            context['resource_name'] = resource_name
        super().__init__(message, original_error, context)


# =============================================================================
# Consistency and Precondition Errors
# =============================================================================

class ConsistencyError(FakeCloudWatchLogsError):
    """Raised when an append would break a store invariant.

    Used for:
    - Empty or malformed event batches
    - Events for a stream the stream store does not know
    - Batches that would move a stream's firstEventTimestamp

    These indicate a bug in the caller or a corrupt fixture. The store never
    tries to repair them and leaves its state untouched.
    """

    def __init__(self, message: str, stream_name: Optional[str] = None, original_error: Optional[Exception] = None):
        self.stream_name = stream_name
        context = {}
        if stream_name:
            context['stream_name'] = stream_name
        super().__init__(message, original_error, context)


# =============================================================================
# Dispatch Errors
# =============================================================================

class UnsupportedOperationError(FakeCloudWatchLogsError):
    """Raised when a request names an operation the fake does not emulate."""

    error_code = "UnknownOperationException"

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"Unsupported operation: {operation}", context={'operation': operation})
