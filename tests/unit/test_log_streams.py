"""
Tests for LogStreamsReadApi / LogStreamsWriteApi

Covers parameter validation, group existence, name and LastEventTime
ordering, prefix filtering and pagination.
"""

import pytest

from fake_cloudwatch_logs.exceptions import ResourceNotFoundError, ValidationError
from fake_cloudwatch_logs.models import LogEvent, StreamOrder


def _names(response):
    return [s.log_stream_name for s in response.log_streams]


@pytest.fixture
def group(fake, scope):
    """Known group named 'app' without streams."""
    fake.append_groups(scope, [fake.make_log_group("app")])
    return "app"


class TestValidation:
    """Test parameter validation and its precedence."""

    def test_missing_group_name(self, fake, scope):
        """Test listing without a group name."""
        with pytest.raises(ValidationError) as exc_info:
            fake.list_streams(scope, None)

        assert exc_info.value.message == "Missing required key 'logGroupName' in params"

    def test_empty_group_name(self, fake, scope):
        """Test listing with an empty group name."""
        with pytest.raises(ValidationError):
            fake.list_streams(scope, "")

    def test_invalid_order_by(self, fake, scope, group):
        """Test an unknown orderBy is rejected."""
        with pytest.raises(ValidationError) as exc_info:
            fake.list_streams(scope, group, order_by="CreationTime")

        assert exc_info.value.message == "Invalid required key 'orderBy' in params"

    def test_last_event_time_with_prefix(self, fake, scope, group):
        """Test LastEventTime ordering with a prefix is rejected."""
        with pytest.raises(ValidationError) as exc_info:
            fake.list_streams(scope, group, order_by="LastEventTime", name_prefix="a")

        assert exc_info.value.message == "Cannot order by LastEventTime with a logStreamNamePrefix."

    def test_validation_before_existence(self, fake, scope):
        """Test validation runs before the group existence check."""
        with pytest.raises(ValidationError):
            fake.list_streams(scope, "missing", order_by="Bogus")

    def test_unknown_group(self, fake, scope):
        """Test listing an unknown group."""
        with pytest.raises(ResourceNotFoundError) as exc_info:
            fake.list_streams(scope, "missing")

        assert exc_info.value.message == "The specified log group does not exist."
        assert exc_info.value.resource_name == "missing"

    def test_enum_order_accepted(self, fake, scope, group):
        """Test StreamOrder members are accepted."""
        assert fake.list_streams(scope, group, order_by=StreamOrder.LOG_STREAM_NAME).log_streams == []


class TestAppendStreams:
    """Test stream ingestion."""

    def test_empty_append_marks_group_known(self, fake, scope):
        """Test an empty append still makes the group known."""
        fake.append_streams(scope, "bare", [])

        assert fake.list_streams(scope, "bare").log_streams == []

    def test_append_dict(self, fake, scope, sample_stream_dict):
        """Test a camelCase dict is accepted."""
        fake.append_streams(scope, "app", [sample_stream_dict])

        assert _names(fake.list_streams(scope, "app")) == ["2024/01/01/[$LATEST]abc"]

    def test_caller_model_not_shared(self, fake, scope):
        """Test the stored stream is not the caller's model."""
        stream = fake.make_log_stream("s")
        fake.append_streams(scope, "app", [stream])
        fake.append_events(scope, "app", "s", [fake.make_log_event()])

        assert stream.first_event_timestamp is None

    def test_scope_isolation(self, fake, scope, other_scope):
        """Test streams are invisible to another scope."""
        fake.append_streams(scope, "app", [fake.make_log_stream("s")])

        with pytest.raises(ResourceNotFoundError):
            fake.list_streams(other_scope, "app")


class TestOrdering:
    """Test ordering, reversal and prefix filtering."""

    def test_default_order_by_name(self, fake, scope, group):
        """Test streams are ordered by name by default."""
        fake.append_streams(scope, group, [fake.make_log_stream(n) for n in ("c", "a", "b")])

        assert _names(fake.list_streams(scope, group)) == ["a", "b", "c"]

    def test_descending(self, fake, scope, group):
        """Test descending reverses the order."""
        fake.append_streams(scope, group, [fake.make_log_stream(n) for n in ("c", "a", "b")])

        assert _names(fake.list_streams(scope, group, descending=True)) == ["c", "b", "a"]

    def test_prefix_filter(self, fake, scope, group):
        """Test the name prefix filter."""
        fake.append_streams(scope, group, [fake.make_log_stream(n) for n in ("web-1", "app-2", "app-1")])

        assert _names(fake.list_streams(scope, group, name_prefix="app")) == ["app-1", "app-2"]

    def test_prefix_with_separator(self, fake, scope, group):
        """Test a prefix ending in a separator matches only that family."""
        fake.append_streams(scope, group, [fake.make_log_stream(n) for n in ("b-2", "a-2", "b-1", "a-1")])

        assert _names(fake.list_streams(scope, group, name_prefix="a-")) == ["a-1", "a-2"]

    def test_prefix_with_descending(self, fake, scope, group):
        """Test the prefix filter combined with descending."""
        fake.append_streams(scope, group, [fake.make_log_stream(n) for n in ("web-1", "app-2", "app-1")])

        response = fake.list_streams(scope, group, descending=True, name_prefix="app")

        assert _names(response) == ["app-2", "app-1"]

    def test_order_by_last_event_time(self, fake, scope, group, clock):
        """Test ordering by lastEventTimestamp with unset values first."""
        fake.append_streams(scope, group, [fake.make_log_stream(n) for n in ("old", "new", "idle")])
        fake.append_events(scope, group, "new", [
            LogEvent(timestamp=clock.now - 1000, message="n", ingestion_time=clock.now)
        ])
        fake.append_events(scope, group, "old", [
            LogEvent(timestamp=clock.now - 3000, message="o", ingestion_time=clock.now)
        ])

        ascending = fake.list_streams(scope, group, order_by="LastEventTime")
        descending = fake.list_streams(scope, group, order_by="LastEventTime", descending=True)

        assert _names(ascending) == ["idle", "old", "new"]
        assert _names(descending) == ["new", "old", "idle"]

    def test_last_event_time_ties_keep_insertion_order(self, fake, scope, group):
        """Test equal lastEventTimestamp values keep insertion order."""
        fake.append_streams(scope, group, [fake.make_log_stream(n) for n in ("z", "y", "x")])

        assert _names(fake.list_streams(scope, group, order_by="LastEventTime")) == ["z", "y", "x"]

    def test_listing_reflects_ingestion(self, fake, scope, group, clock):
        """Test listed streams reflect ingested events."""
        fake.append_streams(scope, group, [fake.make_log_stream("s")])
        fake.append_events(scope, group, "s", [
            LogEvent(timestamp=clock.now - 10, message="a", ingestion_time=clock.now)
        ])

        stream = fake.list_streams(scope, group).log_streams[0]

        assert stream.first_event_timestamp == clock.now - 10
        assert stream.last_event_timestamp == clock.now - 10
        assert stream.last_ingestion_time == clock.now


class TestPagination:
    """Test stream pagination."""

    def test_pages_over_filtered_streams(self, fake, scope, group):
        """Test pagination runs over the filtered streams."""
        fake.append_streams(scope, group, [fake.make_log_stream(f"app-{i:02d}") for i in range(7)])
        fake.append_streams(scope, group, [fake.make_log_stream("web")])

        first = fake.list_streams(scope, group, name_prefix="app", limit=5)
        second = fake.list_streams(scope, group, name_prefix="app", limit=5, next_token=first.next_token)

        assert _names(first) == [f"app-{i:02d}" for i in range(5)]
        assert _names(second) == ["app-05", "app-06"]
        assert second.next_token is None

    def test_default_page_size(self, fake, scope, group):
        """Test the default page size."""
        fake.append_streams(scope, group, [fake.make_log_stream() for _ in range(51)])

        first = fake.list_streams(scope, group)

        assert len(first.log_streams) == 50
        assert len(fake.list_streams(scope, group, next_token=first.next_token).log_streams) == 1
