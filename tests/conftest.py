"""
Test configuration and fixtures for fake_cloudwatch_logs.

Provides a FakeCloudWatchLogs instance driven by a controllable clock, the
tenant scope most tests use, and a boto3 client served in-process.
"""

import sys
from datetime import timedelta
from pathlib import Path

# Add parent directory to path so we can import fake_cloudwatch_logs and tests.helpers
sys.path.insert(0, str(Path(__file__).parent.parent))

import boto3
import pytest

from fake_cloudwatch_logs import FakeCloudWatchLogs, FakeCloudWatchLogsConfig, TenantScope
from tests.helpers import FakeClock


@pytest.fixture
def test_config():
    """Configuration for isolated tests (account 123, us-east-1, 1h delay)."""
    return FakeCloudWatchLogsConfig.for_testing(ingestion_delay=timedelta(hours=1))


@pytest.fixture
def clock():
    """Clock frozen at 2024-01-01T00:00:00Z until advanced."""
    return FakeClock()


@pytest.fixture
def fake(test_config, clock):
    """Empty FakeCloudWatchLogs instance."""
    return FakeCloudWatchLogs(test_config, clock=clock)


@pytest.fixture
def scope():
    """Tenant scope of the default test client."""
    return TenantScope(account="123", region="us-east-1")


@pytest.fixture
def other_scope():
    """A second tenant scope that must never see data of ``scope``."""
    return TenantScope(account="456", region="us-west-2")


# Client Fixtures

@pytest.fixture
def logs_client(fake):
    """boto3 CloudWatch Logs client served by ``fake`` as account 123."""
    client = boto3.client(
        'logs',
        region_name='us-east-1',
        aws_access_key_id='123',
        aws_secret_access_key='abc'
    )
    detach = fake.attach(client, account='123')
    yield client
    detach()


# Sample Data Fixtures

@pytest.fixture
def sample_group_dict():
    """Log group as DescribeLogGroups returns it."""
    return {
        "logGroupName": "/aws/lambda/orders",
        "creationTime": 1700000000000,
        "metricFilterCount": 0,
        "arn": "arn:aws:logs:us-east-1:123:log-group:/aws/lambda/orders:*",
        "storedBytes": 2048,
    }


@pytest.fixture
def sample_stream_dict():
    """Log stream as DescribeLogStreams returns it, before any events."""
    return {
        "logStreamName": "2024/01/01/[$LATEST]abc",
        "creationTime": 1700000000000,
        "arn": "arn:aws:logs:us-east-1:123:log-group:/aws/lambda/orders:log-stream:2024/01/01/[$LATEST]abc",
        "uploadSequenceToken": "49039859",
        "storedBytes": 0,
    }
