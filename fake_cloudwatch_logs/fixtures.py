"""
Fixture Cache

Captures log groups, streams and events from a real account into JSON files
and loads them back into a FakeCloudWatchLogs instance.

Layout under the cache directory:

    groups/<profile>::<region>-groups.json
    streams/<profile>::<region>::<quoted group>-streams.json
    events/<profile>::<region>::<quoted "group:stream">-events.json

Each file holds ``{"type", "profile", "region", ["groupName"], ["streamName"],
"data"}`` where ``data`` is the list of camelCase service records. The profile
is the access key id of the credentials used for the capture, so it doubles as
the account of the tenant scope the records are loaded into.
"""

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, Iterator, List, Optional, Sequence, Union
from urllib.parse import quote

from .exceptions import FakeCloudWatchLogsError
from .models import LogEvent, LogGroup, LogStream, TenantScope

if TYPE_CHECKING:
    from .service import FakeCloudWatchLogs

logger = logging.getLogger(__name__)

GROUPS_DIR = "groups"
STREAMS_DIR = "streams"
EVENTS_DIR = "events"

CACHED_GROUP_TYPE = "cached-log-group"
CACHED_STREAM_TYPE = "cached-log-stream"
CACHED_EVENT_TYPE = "cached-log-event"

Record = Union[LogGroup, LogStream, LogEvent, Dict[str, Any]]


def _to_service_dicts(records: Sequence[Record]) -> List[Dict[str, Any]]:
    return [r if isinstance(r, dict) else r.to_service_dict() for r in records]


class FixtureCache:
    """
    Reads and writes fixture files below one cache directory.

    Args:
        cache_path: Directory holding ``groups/``, ``streams/`` and ``events/``
    """

    def __init__(self, cache_path: Union[str, Path]):
        if not cache_path:
            raise FakeCloudWatchLogsError("Missing cache path")
        self.cache_path = Path(cache_path)

    def _write(self, kind_dir: str, file_name: str, document: Dict[str, Any]) -> Path:
        directory = self.cache_path / kind_dir
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / file_name
        path.write_text(json.dumps(document, indent=4), encoding="utf-8")
        logger.info(f"Cached {len(document['data'])} records to {path}")
        return path

    def write_groups(self, profile: str, region: str, groups: Sequence[Record]) -> Path:
        """Write one scope's groups."""
        return self._write(GROUPS_DIR, f"{profile}::{region}-groups.json", {
            'type': CACHED_GROUP_TYPE,
            'profile': profile,
            'region': region,
            'data': _to_service_dicts(groups),
        })

    def write_streams(self, profile: str, region: str, group_name: str, streams: Sequence[Record]) -> Path:
        """Write the streams of one group."""
        key = quote(group_name, safe="")
        return self._write(STREAMS_DIR, f"{profile}::{region}::{key}-streams.json", {
            'type': CACHED_STREAM_TYPE,
            'profile': profile,
            'region': region,
            'groupName': group_name,
            'data': _to_service_dicts(streams),
        })

    def write_events(
        self,
        profile: str,
        region: str,
        group_name: str,
        stream_name: str,
        events: Sequence[Record]
    ) -> Path:
        """Write the events of one stream."""
        key = quote(f"{group_name}:{stream_name}", safe="")
        return self._write(EVENTS_DIR, f"{profile}::{region}::{key}-events.json", {
            'type': CACHED_EVENT_TYPE,
            'profile': profile,
            'region': region,
            'groupName': group_name,
            'streamName': stream_name,
            'data': _to_service_dicts(events),
        })

    def read(self, kind_dir: str) -> Iterator[Dict[str, Any]]:
        """
        Yield every fixture document of one kind, in file name order.

        A missing kind directory yields nothing.
        """
        directory = self.cache_path / kind_dir
        if not directory.is_dir():
            logger.warning(f"No {kind_dir} fixtures under {self.cache_path}")
            return

        for path in sorted(directory.glob("*.json")):
            with path.open(encoding="utf-8") as f:
                yield json.load(f)


def populate_from_cache(service: 'FakeCloudWatchLogs', cache_path: Union[str, Path]) -> Dict[str, int]:
    """
    Load every fixture file into ``service``.

    Groups are loaded first, then streams, then events, so every event file
    finds its stream.

    Args:
        service: Emulation receiving the records
        cache_path: Cache directory

    Returns:
        Number of files loaded per kind

    Raises:
        ConsistencyError: An event file names a stream no stream file created
    """
    cache = FixtureCache(cache_path)
    loaded = {GROUPS_DIR: 0, STREAMS_DIR: 0, EVENTS_DIR: 0}

    for doc in cache.read(GROUPS_DIR):
        scope = TenantScope(account=doc['profile'], region=doc['region'])
        service.append_groups(scope, doc['data'])
        loaded[GROUPS_DIR] += 1

    for doc in cache.read(STREAMS_DIR):
        scope = TenantScope(account=doc['profile'], region=doc['region'])
        service.append_streams(scope, doc['groupName'], doc['data'])
        loaded[STREAMS_DIR] += 1

    for doc in cache.read(EVENTS_DIR):
        scope = TenantScope(account=doc['profile'], region=doc['region'])
        service.append_events(scope, doc['groupName'], doc['streamName'], doc['data'])
        loaded[EVENTS_DIR] += 1

    logger.info(f"Populated from {cache_path}: {loaded}")
    return loaded


def fetch_and_cache_region(
    service: 'FakeCloudWatchLogs',
    cache: Optional[FixtureCache],
    client,
    profile: str,
    region: str
) -> None:
    """
    Copy one region of a real account into the cache and into ``service``.

    Args:
        service: Emulation receiving the records
        cache: Fixture cache to write, or None to only populate
        client: boto3 ``logs`` client for ``region``
        profile: Access key id the client authenticates with
        region: Region the client talks to
    """
    scope = TenantScope(account=profile, region=region)

    groups = []
    for page in client.get_paginator('describe_log_groups').paginate():
        groups.extend(page.get('logGroups', []))
    if not groups:
        return

    if cache:
        cache.write_groups(profile, region, groups)
    service.append_groups(scope, groups)

    for group in groups:
        group_name = group.get('logGroupName')
        if not group_name:
            continue

        streams = []
        for page in client.get_paginator('describe_log_streams').paginate(logGroupName=group_name):
            logger.debug(f"Fetched {len(page.get('logStreams', []))} streams of {group_name}")
            streams.extend(page.get('logStreams', []))
        if not streams:
            continue

        if cache:
            cache.write_streams(profile, region, group_name, streams)
        service.append_streams(scope, group_name, streams)

        for stream in streams:
            stream_name = stream.get('logStreamName')
            if not stream_name:
                continue

            events = _fetch_stream_events(client, group_name, stream_name)
            if not events:
                continue

            if cache:
                cache.write_events(profile, region, group_name, stream_name, events)
            service.append_events(scope, group_name, stream_name, events)


def _fetch_stream_events(client, group_name: str, stream_name: str) -> List[Dict[str, Any]]:
    # Walk backward from the tail until an empty page comes back
    events = []
    params = {'logGroupName': group_name, 'logStreamName': stream_name}
    while True:
        response = client.get_log_events(**params)
        page = response.get('events', [])
        if not page:
            break

        logger.debug(f"Fetched {len(page)} events of {group_name}/{stream_name}")
        events.extend(
            {key: event[key] for key in ('timestamp', 'message', 'ingestionTime') if key in event}
            for event in page
        )
        token = response.get('nextBackwardToken')
        if not token:
            break
        params['nextToken'] = token
    return events
