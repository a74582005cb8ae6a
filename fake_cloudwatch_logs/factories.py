"""
Entity Factories

Builds plausible groups, streams and events for tests and demos. One counter
is shared by all three kinds, so names and messages are unique per factory:

    factory = LogEntityFactory()
    factory.make_log_group()     # my-log-group-0
    factory.make_log_stream()    # my-log-stream-1
    factory.make_log_event()     # [INFO]: A log message: 2
"""

import itertools
import random
import threading
from typing import Callable, Optional

from .models import LogEvent, LogGroup, LogStream
from .utils import now_millis

MAX_STORED_BYTES = 1024 * 1024


class LogEntityFactory:
    """
    Factory for log groups, streams and events.

    Args:
        clock: Returns "now" in epoch millis; defaults to the wall clock
        account: Account embedded in generated ARNs
        region: Region embedded in generated ARNs
    """

    def __init__(self, clock: Optional[Callable[[], int]] = None, account: str = "0", region: str = "us-east-1"):
        self.clock = clock or now_millis
        self.account = account
        self.region = region
        self._counter = itertools.count()
        self._lock = threading.Lock()

    def _next(self) -> int:
        with self._lock:
            return next(self._counter)

    def make_log_group(self, name: Optional[str] = None) -> LogGroup:
        """Build a log group named ``name`` or ``my-log-group-N``."""
        log_group_name = name or f"my-log-group-{self._next()}"
        return LogGroup(
            log_group_name=log_group_name,
            creation_time=self.clock(),
            metric_filter_count=0,
            arn=f"arn:aws:logs:{self.region}:{self.account}:log-group:{log_group_name}:*",
            stored_bytes=random.randrange(MAX_STORED_BYTES),
        )

    def make_log_stream(self, name: Optional[str] = None) -> LogStream:
        """Build a log stream with no events yet."""
        log_stream_name = name or f"my-log-stream-{self._next()}"
        return LogStream(
            log_stream_name=log_stream_name,
            creation_time=self.clock(),
            arn=f"arn:aws:logs:{self.region}:{self.account}:log-group:???:log-stream:{log_stream_name}",
            upload_sequence_token="".join(str(random.randrange(10)) for _ in range(56)),
            stored_bytes=random.randrange(MAX_STORED_BYTES),
        )

    def make_log_event(self, time_offset: int = 0) -> LogEvent:
        """
        Build a log event ingested now.

        Args:
            time_offset: Milliseconds to subtract from "now" for the event's timestamp
        """
        now = self.clock()
        return LogEvent(
            timestamp=now - (time_offset or 0),
            ingestion_time=now,
            message=f"[INFO]: A log message: {self._next()}",
        )
