"""
Test helpers for fake_cloudwatch_logs.

This module provides a controllable clock and shortcuts for populating a
FakeCloudWatchLogs instance the way most tests need it.
"""

from .harness import (
    FakeClock,
    populate_events,
    drain_backward,
)

__all__ = [
    'FakeClock',
    'populate_events',
    'drain_backward',
]
