"""
Ingestion Delay Simulator

A real log-ingestion pipeline reflects a new event in its stream's
``lastEventTimestamp`` only some time after the event became readable through
GetLogEvents. Code that polls stream metadata has to tolerate that lag, so the
emulation reproduces it.

The simulator is evaluated once per append and never on a timer: a stream's
``lastEventTimestamp`` only moves on the next append. It always rescans the
whole accumulated event list rather than just the new batch, because recency
is judged against the stream's full history.
"""

import logging
from typing import Callable, Dict, List, NamedTuple, Optional

from ..exceptions import ConsistencyError
from ..models import LogEvent, LogStream
from ..utils import now_millis

logger = logging.getLogger(__name__)


class EventSummary(NamedTuple):
    """Extremes of a stream's accumulated events."""
    min_timestamp: int
    max_timestamp: int
    max_ingestion_time: int


class IngestionDelaySimulator:
    """
    Computes the event-derived metadata of a stream after an append.

    Args:
        delay_ms: Ingestion delay in milliseconds
        clock: Returns "now" in epoch milliseconds
    """

    def __init__(self, delay_ms: int, clock: Optional[Callable[[], int]] = None):
        self.delay_ms = delay_ms
        self.clock = clock or now_millis

    @staticmethod
    def summarize(events: List[LogEvent]) -> EventSummary:
        """Rescan every event of the stream for its extremes."""
        return EventSummary(
            min_timestamp=min(e.timestamp for e in events),
            max_timestamp=max(e.timestamp for e in events),
            max_ingestion_time=max(e.ingestion_time for e in events),
        )

    def compute_metadata(self, stream: LogStream, events: List[LogEvent]) -> Dict[str, int]:
        """
        Work out the stream metadata implied by its full, sorted event list.

        Nothing is written to ``stream``; the caller commits the returned
        values once every check has passed.

        Args:
            stream: Stream record as currently stored
            events: All of the stream's events including the new batch

        Returns:
            Values for first_event_timestamp, last_ingestion_time and
            last_event_timestamp

        Raises:
            ConsistencyError: The batch would change firstEventTimestamp
        """
        summary = self.summarize(events)

        first_event_timestamp = stream.first_event_timestamp
        if first_event_timestamp is None:
            first_event_timestamp = summary.min_timestamp
        elif summary.min_timestamp != first_event_timestamp:
            raise ConsistencyError(
                "Cannot ingest events older than the stream's recorded first event "
                f"({summary.min_timestamp} != {first_event_timestamp})",
                stream_name=stream.log_stream_name
            )

        last_ingestion_time = summary.max_ingestion_time

        return {
            'first_event_timestamp': first_event_timestamp,
            'last_ingestion_time': last_ingestion_time,
            'last_event_timestamp': self._advance_high_water_mark(
                stream.last_event_timestamp, events, summary, last_ingestion_time
            ),
        }

    def _advance_high_water_mark(
        self,
        current: Optional[int],
        events: List[LogEvent],
        summary: EventSummary,
        last_ingestion_time: int
    ) -> int:
        # First observation is visible immediately
        if current is None:
            return summary.max_timestamp

        now = self.clock()
        for timestamp in sorted((e.timestamp for e in events), reverse=True):
            if (
                timestamp < now - self.delay_ms
                and timestamp < last_ingestion_time - self.delay_ms
                and timestamp > current
            ):
                logger.debug(f"lastEventTimestamp advanced {current} -> {timestamp}")
                return timestamp
        return current
