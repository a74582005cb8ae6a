from fake_cloudwatch_logs import LogEntityFactory
from fake_cloudwatch_logs.models import LogEvent, LogGroup, LogStream


class TestLogEntityFactory:
    """Test generated groups, streams and events."""

    def test_shared_counter(self, clock):
        """Test generated names share one counter."""
        factory = LogEntityFactory(clock=clock)

        assert factory.make_log_group().log_group_name == "my-log-group-0"
        assert factory.make_log_stream().log_stream_name == "my-log-stream-1"
        assert factory.make_log_event().message == "[INFO]: A log message: 2"

    def test_explicit_names_do_not_consume_counter(self, clock):
        """Test explicit names leave the counter alone."""
        factory = LogEntityFactory(clock=clock)

        assert factory.make_log_group("named").log_group_name == "named"
        assert factory.make_log_group().log_group_name == "my-log-group-0"

    def test_log_group(self, clock):
        """Test a generated log group has an ARN for its account and region."""
        group = LogEntityFactory(clock=clock, account="123", region="eu-west-1").make_log_group("app")

        assert isinstance(group, LogGroup)
        assert group.arn == "arn:aws:logs:eu-west-1:123:log-group:app:*"
        assert group.creation_time == clock.now
        assert group.metric_filter_count == 0
        assert 0 <= group.stored_bytes < 1024 * 1024

    def test_log_stream_has_no_events(self, clock):
        """Test a generated log stream starts without event metadata."""
        stream = LogEntityFactory(clock=clock).make_log_stream("s")

        assert isinstance(stream, LogStream)
        assert stream.upload_sequence_token.isdigit()
        assert stream.first_event_timestamp is None
        assert stream.last_event_timestamp is None

    def test_log_event_offset(self, clock):
        """Test the event timestamp is offset from now."""
        event = LogEntityFactory(clock=clock).make_log_event(5000)

        assert isinstance(event, LogEvent)
        assert event.timestamp == clock.now - 5000
        assert event.ingestion_time == clock.now

    def test_service_delegates(self, fake):
        """Test the service factory methods delegate to its factory."""
        assert fake.make_log_group().log_group_name.startswith("my-log-group-")
        assert fake.make_log_stream("x").log_stream_name == "x"
        assert fake.make_log_event().message.startswith("[INFO]: A log message: ")
