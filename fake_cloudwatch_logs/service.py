"""
FakeCloudWatchLogs Service Facade

Wires one backend, one cursor manager and the read/write APIs of the three
entity kinds together and exposes them per tenant scope:

    fake = FakeCloudWatchLogs(FakeCloudWatchLogsConfig.for_testing())
    scope = TenantScope(account="123", region="us-east-1")

    group = fake.make_log_group()
    fake.append_groups(scope, [group])
    fake.append_streams(scope, group.log_group_name, [fake.make_log_stream("app")])
    fake.append_events(scope, group.log_group_name, "app", [fake.make_log_event()])

    page = fake.query_events(scope, group.log_group_name, "app", limit=10)

A real boto3 client can be served in-process:

    client = boto3.client("logs", region_name="us-east-1")
    detach = fake.attach(client)
    client.describe_log_groups()
"""

import logging
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Sequence, Union

import boto3
from pydantic import ValidationError as PydanticValidationError

from . import fixtures
from .config import FakeCloudWatchLogsConfig
from .core import BotocoreAttachment, LogBackend, PaginationCursorManager
from .exceptions import FakeCloudWatchLogsError, UnsupportedOperationError, ValidationError
from .factories import LogEntityFactory
from .handlers import (
    LogEventsReadApi,
    LogEventsWriteApi,
    LogGroupsReadApi,
    LogGroupsWriteApi,
    LogStreamsReadApi,
    LogStreamsWriteApi,
)
from .models import (
    DescribeLogGroupsRequest,
    DescribeLogGroupsResponse,
    DescribeLogStreamsRequest,
    DescribeLogStreamsResponse,
    GetLogEventsRequest,
    GetLogEventsResponse,
    LogEvent,
    LogGroup,
    LogStream,
    TenantScope,
)
from .utils import now_millis

logger = logging.getLogger(__name__)


class FakeCloudWatchLogs:
    """
    In-memory CloudWatch Logs emulation.

    Args:
        config: Emulation configuration (``FakeCloudWatchLogsConfig.from_env()`` if None)
        clock: Returns "now" in epoch millis; drives the ingestion delay and
            the factories. Defaults to the wall clock.
    """

    def __init__(
        self,
        config: Optional[FakeCloudWatchLogsConfig] = None,
        clock: Optional[Callable[[], int]] = None
    ):
        self.config = config or FakeCloudWatchLogsConfig.from_env()
        self.clock = clock or now_millis

        if self.config.enable_debug_logging:
            logging.getLogger(__package__).setLevel(logging.DEBUG)

        self.backend = LogBackend()
        self.cursors = PaginationCursorManager()
        self.factory = LogEntityFactory(clock=self.clock, region=self.config.default_region)

        self.groups_read = LogGroupsReadApi(self.backend, self.cursors, self.config)
        self.groups_write = LogGroupsWriteApi(self.backend, self.config)
        self.streams_read = LogStreamsReadApi(self.backend, self.cursors, self.config)
        self.streams_write = LogStreamsWriteApi(self.backend, self.config)
        self.events_read = LogEventsReadApi(self.backend, self.cursors, self.config)
        self.events_write = LogEventsWriteApi(self.backend, self.config, clock=self.clock)

        self._operations = {
            'DescribeLogGroups': self._describe_log_groups,
            'DescribeLogStreams': self._describe_log_streams,
            'GetLogEvents': self._get_log_events,
        }

    # =========================================================================
    # Per-scope interface
    # =========================================================================

    def append_groups(self, scope: TenantScope, groups: List[Union[LogGroup, Dict[str, Any]]]) -> List[LogGroup]:
        """
        Add log groups to a scope, after any already there.

        Args:
            scope: Tenant scope receiving the groups
            groups: LogGroup models or camelCase dicts

        Returns:
            The stored groups
        """
        return self.groups_write.append(scope, groups)

    def list_groups(
        self,
        scope: TenantScope,
        next_token: Optional[str] = None,
        limit: Optional[int] = None
    ) -> DescribeLogGroupsResponse:
        """
        List a scope's log groups in append order, one page at a time.

        Args:
            scope: Tenant scope to read
            next_token: Single-use token from a previous page
            limit: Page size (config.group_page_limit if None)

        Returns:
            Page of groups plus ``next_token`` when more remain

        Raises:
            InvalidTokenError: Unknown or already used token
        """
        return self.groups_read.list(scope, next_token=next_token, limit=limit)

    def append_streams(
        self,
        scope: TenantScope,
        group_name: str,
        streams: List[Union[LogStream, Dict[str, Any]]]
    ) -> List[LogStream]:
        """
        Add log streams to a group. The group becomes known to the scope.

        Args:
            scope: Tenant scope owning the group
            group_name: Group receiving the streams
            streams: LogStream models or camelCase dicts

        Returns:
            The stored streams
        """
        return self.streams_write.append(scope, group_name, streams)

    def list_streams(
        self,
        scope: TenantScope,
        group_name: Optional[str],
        order_by: Optional[str] = None,
        descending: bool = False,
        name_prefix: Optional[str] = None,
        next_token: Optional[str] = None,
        limit: Optional[int] = None
    ) -> DescribeLogStreamsResponse:
        """
        List the streams of a group.

        Args:
            scope: Tenant scope owning the group
            group_name: Group to read
            order_by: ``LogStreamName`` (default) or ``LastEventTime``
            descending: Reverse the final ordering
            name_prefix: Keep only streams whose name starts with this
                (not allowed with ``LastEventTime``)
            next_token: Single-use token from a previous page
            limit: Page size (config.stream_page_limit if None)

        Returns:
            Page of streams plus ``next_token`` when more remain

        Raises:
            ValidationError: Missing group name or invalid ordering
            ResourceNotFoundError: Group unknown to the scope
            InvalidTokenError: Unknown or already used token
        """
        return self.streams_read.list(
            scope,
            group_name,
            order_by=order_by,
            descending=descending,
            name_prefix=name_prefix,
            next_token=next_token,
            limit=limit
        )

    def append_events(
        self,
        scope: TenantScope,
        group_name: str,
        stream_name: str,
        events: List[Union[LogEvent, Dict[str, Any]]]
    ) -> LogStream:
        """
        Append a batch of events to a stream and update its metadata.

        Returns:
            Copy of the stream record after the update

        Raises:
            ConsistencyError: Empty or malformed batch, unknown stream, or a
                batch older than the stream's first event
        """
        return self.events_write.append(scope, group_name, stream_name, events)

    def query_events(
        self,
        scope: TenantScope,
        group_name: str,
        stream_name: str,
        start_time=None,
        end_time=None,
        next_token: Optional[str] = None,
        limit: Optional[int] = None
    ) -> GetLogEventsResponse:
        """
        Read a page of a stream's events, anchored at the newest events.

        Args:
            scope: Tenant scope owning the stream
            group_name: Group holding the stream
            stream_name: Stream to read
            start_time: Inclusive lower bound, epoch millis or datetime
            end_time: Exclusive upper bound, epoch millis or datetime
            next_token: ``nextForwardToken`` or ``nextBackwardToken`` of a previous page
            limit: Page size (config.event_page_limit if None)

        Returns:
            Page of events with forward and backward tokens; an empty page
            without tokens for an unknown or empty stream
        """
        return self.events_read.query(
            scope,
            group_name,
            stream_name,
            start_time=start_time,
            end_time=end_time,
            next_token=next_token,
            limit=limit
        )

    # =========================================================================
    # Operation dispatch
    # =========================================================================

    def dispatch(self, operation: str, params: Optional[Dict[str, Any]], scope: TenantScope) -> Dict[str, Any]:
        """
        Run a service operation given its name and camelCase parameters.

        Args:
            operation: ``DescribeLogGroups``, ``DescribeLogStreams`` or ``GetLogEvents``
            params: Request parameters as a botocore client would send them
            scope: Tenant scope of the caller

        Returns:
            camelCase response dictionary without empty members

        Raises:
            UnsupportedOperationError: Operation is not emulated
            ValidationError: Malformed parameters
            ResourceNotFoundError: Unknown log group (DescribeLogStreams)
        """
        handler = self._operations.get(operation)
        if handler is None:
            raise UnsupportedOperationError(operation)

        logger.debug(f"Dispatching {operation} for {scope}")
        return handler(params or {}, scope).to_service_dict()

    @staticmethod
    def _parse(request_cls, params: Dict[str, Any]):
        try:
            return request_cls.model_validate(params)
        except PydanticValidationError as e:
            raise ValidationError(
                f"Invalid parameters for {request_cls.__name__}",
                errors={'.'.join(str(loc) for loc in err['loc']): err['msg'] for err in e.errors()},
                original_error=e
            ) from e

    def _describe_log_groups(self, params: Dict[str, Any], scope: TenantScope) -> DescribeLogGroupsResponse:
        request = self._parse(DescribeLogGroupsRequest, params)
        return self.list_groups(scope, next_token=request.next_token, limit=request.limit)

    def _describe_log_streams(self, params: Dict[str, Any], scope: TenantScope) -> DescribeLogStreamsResponse:
        request = self._parse(DescribeLogStreamsRequest, params)
        return self.list_streams(
            scope,
            request.log_group_name,
            order_by=request.order_by,
            descending=request.descending,
            name_prefix=request.log_stream_name_prefix,
            next_token=request.next_token,
            limit=request.limit
        )

    def _get_log_events(self, params: Dict[str, Any], scope: TenantScope) -> GetLogEventsResponse:
        request = self._parse(GetLogEventsRequest, params)
        return self.query_events(
            scope,
            request.log_group_name,
            request.log_stream_name,
            start_time=request.start_time,
            end_time=request.end_time,
            next_token=request.next_token,
            limit=request.limit
        )

    def attach(self, client, account: Optional[str] = None) -> Callable[[], None]:
        """
        Serve a boto3 ``logs`` client from this instance.

        Args:
            client: boto3/botocore CloudWatch Logs client
            account: Account of the tenant scope (config.default_account if None);
                the region comes from the client

        Returns:
            Callable that detaches the client again
        """
        attachment = BotocoreAttachment(client, self.dispatch, account or self.config.default_account)
        return attachment.attach().detach

    # =========================================================================
    # Factories
    # =========================================================================

    def make_log_group(self, name: Optional[str] = None) -> LogGroup:
        """Build a log group for this instance's account and region."""
        return self.factory.make_log_group(name)

    def make_log_stream(self, name: Optional[str] = None) -> LogStream:
        """Build a log stream with no events."""
        return self.factory.make_log_stream(name)

    def make_log_event(self, time_offset: int = 0) -> LogEvent:
        """Build an event ``time_offset`` millis before now."""
        return self.factory.make_log_event(time_offset)

    # =========================================================================
    # Fixture cache
    # =========================================================================

    def _cache(self) -> fixtures.FixtureCache:
        if not self.config.cache_path:
            raise FakeCloudWatchLogsError("Missing cache path")
        return fixtures.FixtureCache(self.config.cache_path)

    def populate_from_cache(self, path: Optional[Union[str, Path]] = None) -> Dict[str, int]:
        """Load fixture files from ``path`` (config.cache_path if None)."""
        path = path or self.config.cache_path
        if not path:
            raise FakeCloudWatchLogsError("Missing cache path")
        return fixtures.populate_from_cache(self, path)

    def cache_groups_to_disk(self, profile: str, region: str, groups: Sequence) -> Path:
        return self._cache().write_groups(profile, region, groups)

    def cache_streams_to_disk(self, profile: str, region: str, group_name: str, streams: Sequence) -> Path:
        return self._cache().write_streams(profile, region, group_name, streams)

    def cache_events_to_disk(
        self,
        profile: str,
        region: str,
        group_name: str,
        stream_name: str,
        events: Sequence
    ) -> Path:
        return self._cache().write_events(profile, region, group_name, stream_name, events)

    def fetch_and_cache(self, session: boto3.session.Session, regions: Union[str, Sequence[str]]) -> None:
        """
        Copy groups, streams and events of a real account into this instance.

        Everything fetched is also written to the fixture cache when
        config.cache_path is set.

        Args:
            session: boto3 session holding the account's credentials
            regions: Region names, or ``'all'`` for every region offering the service
        """
        if regions == 'all':
            regions = session.get_available_regions('logs')

        credentials = session.get_credentials()
        if credentials is None:
            raise FakeCloudWatchLogsError("No credentials available for fetching fixtures")
        profile = credentials.access_key

        cache = self._cache() if self.config.cache_path else None
        for region in regions:
            logger.info(f"Fetching log groups of {profile} in {region}")
            client = session.client('logs', region_name=region)
            fixtures.fetch_and_cache_region(self, cache, client, profile, region)
