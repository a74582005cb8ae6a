"""
Log Streams CQRS APIs

Read API:
- Ordering by name or last event time, optional reversal
- Name prefix filtering
- Forward-only pagination

Write API:
- Append to a group, marking the group as known
"""

from .queries import LogStreamsReadApi
from .commands import LogStreamsWriteApi

__all__ = [
    "LogStreamsReadApi",
    "LogStreamsWriteApi",
]
