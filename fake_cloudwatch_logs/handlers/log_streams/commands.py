"""
Log Streams Write API

Appends log streams to a (scope, group) bucket. Stream metadata is only ever
changed afterwards by event ingestion.
"""

import logging
from typing import Any, Dict, List, Union

from ...config import FakeCloudWatchLogsConfig
from ...core import LogBackend
from ...models import LogStream, TenantScope

logger = logging.getLogger(__name__)


class LogStreamsWriteApi:
    """Write-only API for log streams."""

    def __init__(self, backend: LogBackend, config: FakeCloudWatchLogsConfig):
        """Initialize write API with shared backend and configuration."""
        self.backend = backend
        self.config = config

    def append(
        self,
        scope: TenantScope,
        group_name: str,
        streams: List[Union[LogStream, Dict[str, Any]]]
    ) -> List[LogStream]:
        """
        Append streams to a group.

        The group becomes known even when ``streams`` is empty, which turns a
        later DescribeLogStreams on it from "does not exist" into an empty page.

        Args:
            scope: Tenant scope owning the group
            group_name: Group receiving the streams
            streams: LogStream models or camelCase service dicts

        Returns:
            The stored LogStream models

        Raises:
            ValidationError: A dict could not be converted to a LogStream
        """
        # Stored records are mutated by ingestion, never share caller objects
        new_streams = [
            stream.model_copy() if isinstance(stream, LogStream) else LogStream.from_service_dict(stream)
            for stream in streams
        ]

        with self.backend.lock:
            self.backend.ensure_stream_bucket(scope, group_name).extend(new_streams)

        logger.info(f"Appended {len(new_streams)} log streams to {scope} group '{group_name}'")
        return new_streams
