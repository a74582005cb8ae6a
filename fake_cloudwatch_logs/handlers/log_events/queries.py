"""
Log Events Read API

GetLogEvents always answers from the tail of a stream:

    50 events, limit=10, no token
        events            -> 40..49
        nextForwardToken  -> offset -10 (newer than anything stored: empty)
        nextBackwardToken -> offset 10  (30..39)

    presenting that backward token
        events            -> 30..39
        nextForwardToken  -> offset 0   (40..49)
        nextBackwardToken -> offset 20  (20..29)

An offset counts events back from the newest one. Both tokens are minted on
every read of a stream that has events, even when the page they lead to is
empty, so callers walking backward stop on the first empty page.
"""

import logging
from datetime import datetime
from typing import Optional, Union

from ...config import FakeCloudWatchLogsConfig
from ...core import LogBackend, PaginationCursorManager
from ...models import GetLogEventsResponse, TenantScope
from ...utils import to_epoch_millis

logger = logging.getLogger(__name__)

FORWARD_TOKEN_PREFIX = "f/"
BACKWARD_TOKEN_PREFIX = "b/"


class LogEventsReadApi:
    """Read-only API for log events."""

    def __init__(self, backend: LogBackend, cursors: PaginationCursorManager, config: FakeCloudWatchLogsConfig):
        """Initialize read API with shared backend, cursors and configuration."""
        self.backend = backend
        self.cursors = cursors
        self.config = config

    def query(
        self,
        scope: TenantScope,
        group_name: str,
        stream_name: str,
        start_time: Optional[Union[int, datetime]] = None,
        end_time: Optional[Union[int, datetime]] = None,
        next_token: Optional[str] = None,
        limit: Optional[int] = None
    ) -> GetLogEventsResponse:
        """
        Read one tail-anchored page of a stream's events.

        Args:
            scope: Tenant scope owning the stream
            group_name: Group holding the stream
            stream_name: Stream to read
            start_time: Inclusive lower bound (epoch millis or datetime)
            end_time: Exclusive upper bound (epoch millis or datetime)
            next_token: Forward or backward token from a previous page
            limit: Page size (config.event_page_limit if None)

        Returns:
            GetLogEventsResponse with events in ascending timestamp order.
            Unknown streams yield an empty page without tokens.

        Raises:
            InvalidTokenError: next_token unknown or already used
            ValidationError: start_time/end_time of an unsupported type
        """
        start_ms = to_epoch_millis(start_time)
        end_ms = to_epoch_millis(end_time)
        limit = limit or self.config.event_page_limit

        with self.backend.lock:
            events = self.backend.event_list(scope, group_name, stream_name)
            if not events:
                return GetLogEventsResponse(events=[])

            if start_ms is not None or end_ms is not None:
                lower = start_ms if start_ms is not None else 0
                events = [
                    e for e in events
                    if lower <= e.timestamp and (end_ms is None or e.timestamp < end_ms)
                ]

            offset = self.cursors.resolve(next_token)
            start = min(max(len(events) - limit - offset, 0), len(events))
            end = min(max(len(events) - offset, 0), len(events))
            page = events[start:end]

            forward_token = self.cursors.issue(offset - limit, prefix=FORWARD_TOKEN_PREFIX)
            backward_token = self.cursors.issue(offset + limit, prefix=BACKWARD_TOKEN_PREFIX)

            logger.debug(
                f"GetLogEvents {scope} '{group_name}/{stream_name}' offset={offset} "
                f"returned {len(page)} of {len(events)}"
            )
            return GetLogEventsResponse(
                events=list(page),
                next_forward_token=forward_token,
                next_backward_token=backward_token
            )
