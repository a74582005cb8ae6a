"""
In-Memory Log Backend

Shared state behind the group, stream and event handlers. It plays the part a
table gateway plays for a real database: it owns the storage and the lock, and
offers small lookup helpers, while the read/write handlers own the semantics.

Layout (nested mappings, never concatenated string keys):

    groups:  TenantScope -> [LogGroup, ...]                      (append order)
    streams: TenantScope -> group name -> [LogStream, ...]       (append order)
    events:  TenantScope -> group name -> stream name -> [LogEvent, ...]
                                                                 (ascending timestamp)

A group name present in ``streams`` is a *known* group even when its list is
empty.

Every handler holds ``lock`` for the whole of an operation, which makes
appends and reads linearizable. The lock is re-entrant so a handler may call
helpers that take it again.
"""

import logging
import threading
from typing import Dict, List, Optional

from ..models import LogEvent, LogGroup, LogStream, TenantScope

logger = logging.getLogger(__name__)


class LogBackend:
    """Process-local storage for every tenant scope."""

    def __init__(self):
        self.lock = threading.RLock()
        self.groups: Dict[TenantScope, List[LogGroup]] = {}
        self.streams: Dict[TenantScope, Dict[str, List[LogStream]]] = {}
        self.events: Dict[TenantScope, Dict[str, Dict[str, List[LogEvent]]]] = {}

    def stream_bucket(self, scope: TenantScope, group_name: str) -> Optional[List[LogStream]]:
        """Return the stream list of a group, or None if the group is unknown."""
        with self.lock:
            return self.streams.get(scope, {}).get(group_name)

    def ensure_stream_bucket(self, scope: TenantScope, group_name: str) -> List[LogStream]:
        """Return the stream list of a group, marking the group as known."""
        with self.lock:
            return self.streams.setdefault(scope, {}).setdefault(group_name, [])

    def find_stream(self, scope: TenantScope, group_name: str, stream_name: str) -> Optional[LogStream]:
        """Return the stored (mutable) stream record, or None."""
        with self.lock:
            for stream in self.stream_bucket(scope, group_name) or []:
                if stream.log_stream_name == stream_name:
                    return stream
            return None

    def event_list(self, scope: TenantScope, group_name: str, stream_name: str) -> Optional[List[LogEvent]]:
        """Return the stored event list of a stream, or None if it has never had events."""
        with self.lock:
            return self.events.get(scope, {}).get(group_name, {}).get(stream_name)

    def set_event_list(self, scope: TenantScope, group_name: str, stream_name: str, events: List[LogEvent]) -> None:
        """Replace the event list of a stream."""
        with self.lock:
            self.events.setdefault(scope, {}).setdefault(group_name, {})[stream_name] = events

    def counts(self) -> Dict[str, int]:
        """Return total numbers of stored groups, streams and events."""
        with self.lock:
            return {
                'groups': sum(len(groups) for groups in self.groups.values()),
                'streams': sum(
                    len(streams)
                    for by_group in self.streams.values()
                    for streams in by_group.values()
                ),
                'events': sum(
                    len(events)
                    for by_group in self.events.values()
                    for by_stream in by_group.values()
                    for events in by_stream.values()
                ),
            }
