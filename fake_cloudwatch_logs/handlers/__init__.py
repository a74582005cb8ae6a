"""
Handler Layer for the fake CloudWatch Logs service

Each entity has its own subdirectory (log_groups, log_streams, log_events)
with queries.py (read) and commands.py (write). All handlers share one
LogBackend and one PaginationCursorManager, owned by FakeCloudWatchLogs.

Architecture:
handlers/ (this layer) -> core/ (backend, cursors, delay simulator)
handlers/ (this layer) <- models/ (entities, requests, responses)
"""

from .log_groups.queries import LogGroupsReadApi
from .log_groups.commands import LogGroupsWriteApi
from .log_streams.queries import LogStreamsReadApi
from .log_streams.commands import LogStreamsWriteApi
from .log_events.queries import LogEventsReadApi
from .log_events.commands import LogEventsWriteApi

__all__ = [
    'LogEventsReadApi',
    'LogEventsWriteApi',
    'LogGroupsReadApi',
    'LogGroupsWriteApi',
    'LogStreamsReadApi',
    'LogStreamsWriteApi',
]
