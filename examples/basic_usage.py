#!/usr/bin/env python3
"""
Basic usage examples for fake_cloudwatch_logs.

This example demonstrates:
1. Setting up configuration
2. Populating groups, streams and events for a tenant scope
3. Reading them back with the per-scope API
4. Serving a real boto3 client from the fake
"""

import boto3

from fake_cloudwatch_logs import (
    FakeCloudWatchLogs,
    FakeCloudWatchLogsConfig,
    TenantScope,
)


def main():
    """Demonstrate basic usage of the fake CloudWatch Logs service."""

    # 1. Configure the emulation
    print("1. Setting up configuration...")
    config = FakeCloudWatchLogsConfig.from_env()  # Uses environment variables

    # For tests, you might use:
    # config = FakeCloudWatchLogsConfig.for_testing()

    fake = FakeCloudWatchLogs(config)
    scope = TenantScope(account="123", region="us-east-1")

    # 2. Populate a group with one stream and a few events
    print("2. Populating log group, stream and events...")
    group = fake.make_log_group("/aws/lambda/orders")
    fake.append_groups(scope, [group])
    fake.append_streams(scope, group.log_group_name, [fake.make_log_stream("main")])
    fake.append_events(scope, group.log_group_name, "main", [
        fake.make_log_event(3000),
        fake.make_log_event(2000),
        fake.make_log_event(1000),
    ])

    # 3. Read them back
    print("3. Reading through the per-scope API...")
    streams = fake.list_streams(scope, group.log_group_name, order_by="LastEventTime", descending=True)
    for stream in streams.log_streams:
        print(f"   {stream.log_stream_name}: lastEventTimestamp={stream.last_event_timestamp}")

    page = fake.query_events(scope, group.log_group_name, "main", limit=2)
    for event in page.events:
        print(f"   {event.timestamp} {event.message}")

    older = fake.query_events(scope, group.log_group_name, "main", limit=2, next_token=page.next_backward_token)
    print(f"   older page holds {len(older.events)} event(s)")

    # 4. Serve a boto3 client in-process
    print("4. Serving a boto3 client...")
    client = boto3.client(
        "logs",
        region_name="us-east-1",
        aws_access_key_id="123",
        aws_secret_access_key="abc",
    )
    detach = fake.attach(client, account="123")
    try:
        response = client.describe_log_groups()
        print(f"   boto3 sees {[g['logGroupName'] for g in response['logGroups']]}")

        try:
            client.describe_log_streams(logGroupName="missing")
        except client.exceptions.ResourceNotFoundException as e:
            print(f"   expected error: {e.response['Error']['Message']}")
    finally:
        detach()

    print("\nDone.")


if __name__ == "__main__":
    main()
