"""
Log Events CQRS APIs

Read API:
- Time range filtering
- Tail-anchored bidirectional pagination

Write API:
- Atomic batch ingestion with ordering and firstEventTimestamp checks
- Delayed lastEventTimestamp updates
"""

from .queries import LogEventsReadApi
from .commands import LogEventsWriteApi

__all__ = [
    "LogEventsReadApi",
    "LogEventsWriteApi",
]
