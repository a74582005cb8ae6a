"""
Tests for the fixture cache (fixtures.py)

Files are written below tmp_path and loaded back into a fresh instance.
"""

import json

import pytest

from fake_cloudwatch_logs import FakeCloudWatchLogs, FakeCloudWatchLogsConfig, TenantScope
from fake_cloudwatch_logs.exceptions import ConsistencyError, FakeCloudWatchLogsError
from fake_cloudwatch_logs.fixtures import FixtureCache
from tests.helpers import populate_events


@pytest.fixture
def cached_fake(tmp_path, clock):
    """FakeCloudWatchLogs writing fixtures to tmp_path."""
    return FakeCloudWatchLogs(FakeCloudWatchLogsConfig.for_testing(cache_path=str(tmp_path)), clock=clock)


def _cache_everything(fake, scope):
    groups = fake.list_groups(scope).log_groups
    fake.cache_groups_to_disk(scope.account, scope.region, groups)
    for group in groups:
        streams = fake.list_streams(scope, group.log_group_name).log_streams
        fake.cache_streams_to_disk(scope.account, scope.region, group.log_group_name, streams)
        for stream in streams:
            events = fake.query_events(scope, group.log_group_name, stream.log_stream_name).events
            if not events:
                continue
            fake.cache_events_to_disk(
                scope.account, scope.region, group.log_group_name, stream.log_stream_name, events
            )


def _stream_dicts(fake, scope):
    return [s.to_service_dict() for s in fake.list_streams(scope, "/aws/lambda/orders").log_streams]


class TestCacheToDisk:
    """Test fixture file names and documents."""

    def test_groups_file(self, cached_fake, scope, tmp_path):
        """Test log groups are written per scope."""
        path = cached_fake.cache_groups_to_disk("123", "us-east-1", [cached_fake.make_log_group("app")])

        assert path == tmp_path / "groups" / "123::us-east-1-groups.json"
        document = json.loads(path.read_text())
        assert document['type'] == "cached-log-group"
        assert document['profile'] == "123"
        assert document['region'] == "us-east-1"
        assert document['data'][0]['logGroupName'] == "app"

    def test_streams_file_name_is_quoted(self, cached_fake, tmp_path):
        """Test stream file names quote the group name."""
        path = cached_fake.cache_streams_to_disk("123", "us-east-1", "/aws/lambda/orders", [])

        assert path.name == "123::us-east-1::%2Faws%2Flambda%2Forders-streams.json"
        document = json.loads(path.read_text())
        assert document['type'] == "cached-log-stream"
        assert document['groupName'] == "/aws/lambda/orders"

    def test_events_file(self, cached_fake, tmp_path):
        """Test event files are written per stream."""
        event = cached_fake.make_log_event()
        path = cached_fake.cache_events_to_disk("123", "us-east-1", "app", "main", [event])

        assert path.name == "123::us-east-1::app%3Amain-events.json"
        document = json.loads(path.read_text())
        assert document['type'] == "cached-log-event"
        assert document['streamName'] == "main"
        assert document['data'] == [event.to_service_dict()]

    def test_indented(self, cached_fake):
        """Test fixture files are indented JSON."""
        path = cached_fake.cache_groups_to_disk("123", "us-east-1", [{'logGroupName': 'app'}])

        assert '\n    "type"' in path.read_text()

    def test_missing_cache_path(self, fake):
        """Test caching without a cache path."""
        with pytest.raises(FakeCloudWatchLogsError):
            fake.cache_groups_to_disk("123", "us-east-1", [])


class TestPopulateFromCache:
    """Test loading fixtures back."""

    def test_round_trip(self, cached_fake, scope, clock):
        """Test cached groups, streams and events load back unchanged."""
        events = [cached_fake.make_log_event(30), cached_fake.make_log_event(20), cached_fake.make_log_event()]
        populate_events(cached_fake, scope, "/aws/lambda/orders", "main", events)
        cached_fake.append_streams(scope, "/aws/lambda/orders", [cached_fake.make_log_stream("idle")])
        _cache_everything(cached_fake, scope)

        loaded = FakeCloudWatchLogs(cached_fake.config, clock=clock)
        counts = loaded.populate_from_cache()

        assert counts == {'groups': 1, 'streams': 1, 'events': 1}
        assert loaded.backend.counts() == {'groups': 1, 'streams': 2, 'events': 3}
        assert loaded.query_events(scope, "/aws/lambda/orders", "main").events == events
        assert _stream_dicts(loaded, scope) == _stream_dicts(cached_fake, scope)

    def test_profile_becomes_account(self, cached_fake, tmp_path):
        """Test the profile part of a file name becomes the account."""
        cache = FixtureCache(tmp_path)
        cache.write_groups("AKIAEXAMPLE", "eu-west-1", [{'logGroupName': 'app'}])

        cached_fake.populate_from_cache(tmp_path)

        scope = TenantScope(account="AKIAEXAMPLE", region="eu-west-1")
        assert [g.log_group_name for g in cached_fake.list_groups(scope).log_groups] == ["app"]

    def test_missing_directories(self, cached_fake, tmp_path):
        """Test loading from a cache with no kind directories."""
        assert cached_fake.populate_from_cache(tmp_path / "nothing") == {'groups': 0, 'streams': 0, 'events': 0}

    def test_no_path(self, fake):
        """Test loading without a cache path."""
        with pytest.raises(FakeCloudWatchLogsError):
            fake.populate_from_cache()

    def test_events_without_stream(self, cached_fake, tmp_path):
        """Test events of a stream missing from the cache are rejected."""
        cache = FixtureCache(tmp_path)
        cache.write_events("123", "us-east-1", "app", "ghost", [cached_fake.make_log_event()])

        with pytest.raises(ConsistencyError):
            cached_fake.populate_from_cache()
