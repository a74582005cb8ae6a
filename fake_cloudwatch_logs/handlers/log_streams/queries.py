"""
Log Streams Read API

Ordered, prefix-filterable, forward-paginated listing of a group's streams.

Processing order for one request:
1. Parameter validation (group name, orderBy, orderBy/prefix exclusivity)
2. Group existence check (never-populated group -> ResourceNotFoundError)
3. Stable sort by name or by lastEventTimestamp
4. Optional reversal of the whole ordered sequence
5. Prefix filter
6. Pagination
"""

import logging
from typing import Optional

from ...config import FakeCloudWatchLogsConfig
from ...core import LogBackend, PaginationCursorManager
from ...exceptions import ResourceNotFoundError, ValidationError
from ...models import DescribeLogStreamsResponse, LogStream, StreamOrder, TenantScope

logger = logging.getLogger(__name__)

_VALID_ORDERS = {order.value for order in StreamOrder}


def _by_name(stream: LogStream):
    # Streams without a name sort first
    return (stream.log_stream_name is not None, stream.log_stream_name or "")


def _by_last_event_time(stream: LogStream):
    return (stream.last_event_timestamp is not None, stream.last_event_timestamp or 0)


class LogStreamsReadApi:
    """Read-only API for log streams."""

    def __init__(self, backend: LogBackend, cursors: PaginationCursorManager, config: FakeCloudWatchLogsConfig):
        """Initialize read API with shared backend, cursors and configuration."""
        self.backend = backend
        self.cursors = cursors
        self.config = config

    def list(
        self,
        scope: TenantScope,
        group_name: Optional[str],
        order_by: Optional[str] = None,
        descending: bool = False,
        name_prefix: Optional[str] = None,
        next_token: Optional[str] = None,
        limit: Optional[int] = None
    ) -> DescribeLogStreamsResponse:
        """
        List one page of a group's log streams.

        Args:
            scope: Tenant scope owning the group
            group_name: Group to list (required)
            order_by: ``LogStreamName`` (default) or ``LastEventTime``
            descending: Reverse the ordered sequence
            name_prefix: Keep only streams whose name starts with this
            next_token: Token from the previous page
            limit: Page size (config.stream_page_limit if None)

        Returns:
            DescribeLogStreamsResponse

        Raises:
            ValidationError: Missing group name, bad orderBy, or orderBy
                LastEventTime combined with a name prefix
            ResourceNotFoundError: Group never populated in this scope
            InvalidTokenError: next_token unknown or already used
        """
        order = self._validate(group_name, order_by, name_prefix)

        with self.backend.lock:
            streams = self.backend.stream_bucket(scope, group_name)
            if streams is None:
                raise ResourceNotFoundError(
                    "The specified log group does not exist.",
                    resource_type="log_group",
                    resource_name=group_name
                )

            ordered = sorted(
                streams,
                key=_by_last_event_time if order is StreamOrder.LAST_EVENT_TIME else _by_name
            )
            if descending:
                ordered.reverse()

            if name_prefix:
                ordered = [
                    stream for stream in ordered
                    if stream.log_stream_name and stream.log_stream_name.startswith(name_prefix)
                ]

            page, token = self.cursors.paginate(
                ordered, next_token, limit or self.config.stream_page_limit
            )
            return DescribeLogStreamsResponse(
                log_streams=[stream.model_copy() for stream in page],
                next_token=token
            )

    @staticmethod
    def _validate(group_name: Optional[str], order_by: Optional[str], name_prefix: Optional[str]) -> StreamOrder:
        if not group_name:
            raise ValidationError("Missing required key 'logGroupName' in params")

        if order_by is None:
            return StreamOrder.LOG_STREAM_NAME

        value = order_by.value if isinstance(order_by, StreamOrder) else order_by
        if value not in _VALID_ORDERS:
            raise ValidationError(
                "Invalid required key 'orderBy' in params",
                errors={'orderBy': f"must be one of {sorted(_VALID_ORDERS)}"}
            )

        order = StreamOrder(value)
        if order is StreamOrder.LAST_EVENT_TIME and name_prefix:
            raise ValidationError("Cannot order by LastEventTime with a logStreamNamePrefix.")
        return order

