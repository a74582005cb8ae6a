"""
Log Events Write API

Ingests batches of log events into a known stream and updates the stream's
event-derived metadata through the IngestionDelaySimulator.

Appends are all-or-nothing: the merged event list and the new metadata are
computed first and committed only when every check has passed, so a rejected
batch leaves both the events and the stream record untouched.
"""

import logging
from typing import Any, Callable, Dict, List, Optional, Union

from pydantic import ValidationError as PydanticValidationError

from ...config import FakeCloudWatchLogsConfig
from ...core import IngestionDelaySimulator, LogBackend
from ...exceptions import ConsistencyError
from ...models import LogEvent, LogStream, TenantScope

logger = logging.getLogger(__name__)


class LogEventsWriteApi:
    """
    Write-only API for log events.

    Args:
        backend: Shared in-memory backend
        config: Emulation configuration (ingestion delay)
        clock: Returns "now" in epoch millis; defaults to the wall clock
    """

    def __init__(
        self,
        backend: LogBackend,
        config: FakeCloudWatchLogsConfig,
        clock: Optional[Callable[[], int]] = None
    ):
        self.backend = backend
        self.config = config
        self.simulator = IngestionDelaySimulator(config.ingestion_delay_ms, clock)

    def append(
        self,
        scope: TenantScope,
        group_name: str,
        stream_name: str,
        events: List[Union[LogEvent, Dict[str, Any]]]
    ) -> LogStream:
        """
        Append a batch of events to a stream.

        Args:
            scope: Tenant scope owning the stream
            group_name: Group holding the stream
            stream_name: Stream receiving the events
            events: LogEvent models or camelCase dicts with numeric ``timestamp``,
                str ``message`` and numeric ``ingestionTime``

        Returns:
            Copy of the stream record after the update

        Raises:
            ConsistencyError: Empty or malformed batch, unknown stream, or a
                batch that would move firstEventTimestamp
        """
        batch = self._validate_batch(events, stream_name)

        with self.backend.lock:
            stream = self.backend.find_stream(scope, group_name, stream_name)
            if stream is None:
                raise ConsistencyError(
                    f"could not find stream '{stream_name}' in group '{group_name}' for {scope}",
                    stream_name=stream_name
                )

            merged = list(self.backend.event_list(scope, group_name, stream_name) or [])
            merged.extend(batch)
            merged.sort(key=lambda e: e.timestamp)

            metadata = self.simulator.compute_metadata(stream, merged)

            self.backend.set_event_list(scope, group_name, stream_name, merged)
            for field, value in metadata.items():
                setattr(stream, field, value)

            logger.info(
                f"Appended {len(batch)} events to {scope} '{group_name}/{stream_name}' "
                f"(total={len(merged)}, lastEventTimestamp={stream.last_event_timestamp})"
            )
            return stream.model_copy()

    @staticmethod
    def _validate_batch(events: List[Union[LogEvent, Dict[str, Any]]], stream_name: str) -> List[LogEvent]:
        if not events:
            raise ConsistencyError("Cannot add empty events array", stream_name=stream_name)

        batch = []
        for index, event in enumerate(events):
            if isinstance(event, LogEvent):
                batch.append(event)
                continue
            try:
                batch.append(LogEvent.model_validate(event))
            except PydanticValidationError as e:
                raise ConsistencyError(
                    f"Malformed log event at index {index}: requires numeric timestamp, "
                    f"str message and numeric ingestionTime",
                    stream_name=stream_name,
                    original_error=e
                ) from e
        return batch
